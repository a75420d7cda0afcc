import logging

import os
logger = logging.getLogger(__name__)
log_level_str = os.environ.get("SEMNET_LOG_LEVEL", "INFO").upper()
try:
    logger.setLevel(getattr(logging, log_level_str))
except AttributeError:
    logger.setLevel(logging.INFO)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('[%(levelname)s] %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)

from dataclasses import dataclass
from typing import Optional

from ..model.case_frame import CaseFrame
from ..model.constraint import RelationConstraint
from ..model.errors import BootstrapError, CaseFrameError
from .config import Config, config as default_config
from .constraint_catalog import ConstraintCatalog, RelationFactory, default_catalog
from .frame_registry import FrameRegistry

# Number of frames in the action family: 0 through 9 extra object slots
ACTION_FAMILY_SIZE = 10

PACKAGE_LOGGER = "semnetkg.caseframe"


def apply_log_level(level: str) -> int:
    """
    Set the level of the case-frame loggers. SEMNET_LOG_LEVEL, when set,
    takes precedence over `level`. Unknown level names fall back to INFO.

    Returns:
        The numeric level applied
    """
    name = (os.environ.get("SEMNET_LOG_LEVEL") or level or "INFO").upper()
    value = getattr(logging, name, None)
    if not isinstance(value, int):
        logger.warning(f"Unknown log level '{name}', using INFO")
        value = logging.INFO
    logging.getLogger(PACKAGE_LOGGER).setLevel(value)
    logger.setLevel(value)
    return value

# (field name, semantic class key, relation names)
PROPOSITION_FRAMES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("and_rule", "proposition", ("andAnt", "cq")),
    ("or_rule", "proposition", ("ant", "cq")),
    ("and_or_rule", "proposition", ("arg", "max", "min")),
    ("thresh_rule", "proposition", ("arg", "threshMax", "thresh")),
    ("numerical_rule", "proposition", ("andAnt", "cq", "i")),
)

CONTROL_FRAMES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("precondition_act", "proposition", ("precondition", "act")),
    ("when_do", "proposition", ("when", "do")),
    ("whenever_do", "proposition", ("whenever", "do")),
    ("do_if", "proposition", ("do", "if")),
    ("act_effect", "proposition", ("act", "effect")),
    ("plan_act", "proposition", ("plan", "act")),
    ("plan_goal", "proposition", ("plan", "goal")),
    ("with_some", "control_action", ("withsome", "vars", "suchthat", "do", "else")),
)


def action_relation_names(extra_objects: int) -> tuple[str, ...]:
    """
    Relation names of the action frame with `extra_objects` additional object slots:
    0 -> (action, obj); n -> (action, obj1, ..., obj{n+1}).
    """
    if isinstance(extra_objects, bool) or not isinstance(extra_objects, int) \
            or not 0 <= extra_objects < ACTION_FAMILY_SIZE:
        raise ValueError(f"extra_objects must be an int in 0..{ACTION_FAMILY_SIZE - 1}, got {extra_objects!r}")
    if extra_objects == 0:
        return ("action", "obj")
    return ("action",) + tuple(f"obj{n}" for n in range(1, extra_objects + 2))


def action_constraints(catalog: ConstraintCatalog, extra_objects: int) -> tuple[RelationConstraint, ...]:
    return catalog.require(*action_relation_names(extra_objects))


@dataclass(frozen=True, slots=True)
class StandardFrames:
    """
    The standard case frames, as returned by `build_standard_frames`.
    `acts[n]` is the action frame with n extra object slots.
    """
    and_rule: CaseFrame
    or_rule: CaseFrame
    and_or_rule: CaseFrame
    thresh_rule: CaseFrame
    numerical_rule: CaseFrame
    acts: tuple[CaseFrame, ...]
    precondition_act: CaseFrame
    when_do: CaseFrame
    whenever_do: CaseFrame
    do_if: CaseFrame
    act_effect: CaseFrame
    plan_act: CaseFrame
    plan_goal: CaseFrame
    with_some: CaseFrame

    @property
    def act(self) -> CaseFrame:
        return self.acts[0]

    def by_name(self) -> dict[str, CaseFrame]:
        """Frames keyed by name; the action family is act, act1, ..., act9."""
        named: dict[str, CaseFrame] = {}
        for name, _, _ in PROPOSITION_FRAMES:
            named[name] = getattr(self, name)
        for n, frame in enumerate(self.acts):
            named["act" if n == 0 else f"act{n}"] = frame
        for name, _, _ in CONTROL_FRAMES:
            named[name] = getattr(self, name)
        return named

    def all(self) -> tuple[CaseFrame, ...]:
        return tuple(self.by_name().values())

    def __len__(self) -> int:
        return len(PROPOSITION_FRAMES) + len(self.acts) + len(CONTROL_FRAMES)


def build_standard_frames(registry: FrameRegistry,
                          catalog: Optional[ConstraintCatalog] = None,
                          config: Optional[Config] = None,
                          relation_factory: Optional[RelationFactory] = None) -> StandardFrames:
    """
    Define the standard case frames in `registry`.

    The constraint catalog is initialized first if it has not been already;
    the frame definitions are submitted on every call and the registry is
    relied on to hand back the frames it already holds.

    Args:
        registry: Registry the frames are defined in
        catalog: Constraint catalog to read the standard constraints from
        config: Configuration providing the semantic class names
        relation_factory: Passed to the catalog if it needs initializing

    Returns:
        StandardFrames holding the frames the registry returned

    Raises:
        BootstrapError: if the constraints or any frame could not be created.
            Frames defined before the failure stay in the registry.
    """
    catalog = catalog if catalog is not None else default_catalog
    config = config or default_config
    classes = config.get_semantic_classes()

    if catalog.initialize(relation_factory):
        logger.info("[STANDARD_FRAMES] Initialized standard relation constraints")

    def define(name: str, semantic_class: str, constraints: tuple[RelationConstraint, ...]) -> CaseFrame:
        try:
            return registry.define_case_frame_with_constraints(semantic_class, constraints)
        except CaseFrameError:
            raise
        except Exception as e:
            logger.error(f"[STANDARD_FRAMES] Failed to define '{name}': {e}")
            raise BootstrapError(f"Cannot define standard frame '{name}': {e}") from e

    frames: dict[str, CaseFrame] = {}
    for name, class_key, relation_names in PROPOSITION_FRAMES:
        frames[name] = define(name, classes[class_key], catalog.require(*relation_names))

    acts = tuple(
        define(f"act{n}" if n else "act", classes["act"], action_constraints(catalog, n))
        for n in range(ACTION_FAMILY_SIZE)
    )

    for name, class_key, relation_names in CONTROL_FRAMES:
        frames[name] = define(name, classes[class_key], catalog.require(*relation_names))

    standard = StandardFrames(acts=acts, **frames)
    logger.info(f"[STANDARD_FRAMES] Defined {len(standard)} standard case frames")
    return standard
