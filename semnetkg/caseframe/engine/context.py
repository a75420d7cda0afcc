import logging
import threading
from typing import Optional

from ..model.errors import BootstrapError
from .catalog import StandardFrames, apply_log_level, build_standard_frames
from .config import Config
from .constraint_catalog import ConstraintCatalog, RelationFactory
from .frame_registry import FrameRegistry, InMemoryFrameRegistry

logger = logging.getLogger(__name__)


class CaseFrameContext:
    """
    Everything a consumer of case frames needs, passed around explicitly:
      - config: Config used for log level, semantic class names and signature policy
      - catalog: ConstraintCatalog of the standard relation constraints
      - registry: FrameRegistry holding every defined frame
      - standard_frames: StandardFrames, available after `bootstrap()`

    Each context owns its own catalog and registry unless they are given.
    """

    def __init__(self, registry: Optional[FrameRegistry] = None,
                 catalog: Optional[ConstraintCatalog] = None,
                 config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.catalog = catalog if catalog is not None else ConstraintCatalog()
        self.registry = registry if registry is not None else InMemoryFrameRegistry(self.config)
        self._standard_frames: Optional[StandardFrames] = None
        self._lock = threading.Lock()
        apply_log_level(self.config.get_log_level())

    @classmethod
    def from_config_file(cls, config_file: str) -> 'CaseFrameContext':
        """Create a context whose configuration is loaded from a YAML file."""
        config = Config()
        config.load_from_file(config_file)
        return cls(config=config)

    @property
    def strict_priority(self) -> bool:
        return self.config.is_strict_priority()

    @property
    def bootstrapped(self) -> bool:
        return self._standard_frames is not None

    def bootstrap(self, relation_factory: Optional[RelationFactory] = None) -> StandardFrames:
        """
        Build the standard frames into this context's registry. Calling it
        again re-submits the definitions and refreshes `standard_frames` with
        whatever the registry returns for them.
        """
        with self._lock:
            self._standard_frames = build_standard_frames(
                self.registry, self.catalog, self.config, relation_factory
            )
            return self._standard_frames

    @property
    def standard_frames(self) -> StandardFrames:
        frames = self._standard_frames
        if frames is None:
            raise BootstrapError("Standard case frames requested before bootstrap().")
        return frames

    def __repr__(self) -> str:
        state = "bootstrapped" if self.bootstrapped else "not bootstrapped"
        return f"CaseFrameContext({self.registry!r}, {self.catalog!r}, {state})"
