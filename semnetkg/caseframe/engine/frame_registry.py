"""
Frame registries.

This module defines the interface the standard catalog uses to define case frames:
- FrameRegistry: abstract registry that deduplicates frames by canonical id
- InMemoryFrameRegistry: thread-safe, dictionary-backed implementation
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from ..model.case_frame import CaseFrame, ConstrainedCaseFrame, canonical_id
from ..model.constraint import RelationConstraint
from ..model.semantic_class import SemanticClass
from .config import Config, config as default_config

logger = logging.getLogger(__name__)


class FrameRegistry(ABC):
    """Abstract base class for case-frame registries."""

    @abstractmethod
    def define_case_frame_with_constraints(self, semantic_class: str,
                                           constraints: Iterable[RelationConstraint]) -> CaseFrame:
        """
        Define a case frame from relation constraints.

        Args:
            semantic_class: Default semantic class of nodes built from the frame
            constraints: Constraints of the relations making up the frame

        Returns:
            The frame already registered under the same canonical id if there
            is one, otherwise the newly registered frame
        """
        pass

    @abstractmethod
    def get(self, frame_id: str) -> Optional[CaseFrame]:
        """Return the frame registered under `frame_id`, or None."""
        pass

    @abstractmethod
    def frames(self) -> list[CaseFrame]:
        """Return all registered frames in registration order."""
        pass

    def __contains__(self, frame) -> bool:
        frame_id = frame.id if isinstance(frame, CaseFrame) else frame
        return self.get(frame_id) is not None

    def __len__(self) -> int:
        return len(self.frames())

    def __iter__(self) -> Iterator[CaseFrame]:
        return iter(self.frames())


class InMemoryFrameRegistry(FrameRegistry):
    """
    Holds:
      - _frames: Dict[canonical id -> ConstrainedCaseFrame]
    Defining a frame whose relation set is already registered returns the
    existing instance, whatever semantic class or relation order is given.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self._config = config or default_config
        self._frames: dict[str, ConstrainedCaseFrame] = {}
        self._lock = threading.RLock()

    def define_case_frame_with_constraints(self, semantic_class: str,
                                           constraints: Iterable[RelationConstraint]) -> ConstrainedCaseFrame:
        constraints = list(constraints)
        if not constraints:
            raise ValueError("define_case_frame_with_constraints: at least one constraint is required.")
        frame_id = canonical_id(c.relation for c in constraints)

        with self._lock:
            existing = self._frames.get(frame_id)
            if existing is not None:
                if existing.semantic_class != semantic_class:
                    logger.warning(
                        f"[DEFINE_FRAME] '{frame_id}' already defined as {existing.semantic_class}; "
                        f"ignoring semantic class {semantic_class}"
                    )
                else:
                    logger.debug(f"[DEFINE_FRAME] '{frame_id}' already defined")
                return existing

            frame = ConstrainedCaseFrame.from_constraints(
                semantic_class, constraints, strict_priority=self._config.is_strict_priority()
            )
            self._frames[frame_id] = frame

        if not SemanticClass.is_valid(semantic_class):
            logger.debug(
                f"[DEFINE_FRAME] '{frame_id}' uses non-standard semantic class {semantic_class} "
                f"(standard: {SemanticClass.get_all_classes()})"
            )
        logger.debug(f"[DEFINE_FRAME] Defined {semantic_class} frame '{frame_id}'")
        return frame

    def get(self, frame_id: str) -> Optional[ConstrainedCaseFrame]:
        with self._lock:
            return self._frames.get(frame_id)

    def frames(self) -> list[ConstrainedCaseFrame]:
        with self._lock:
            return list(self._frames.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._frames)

    def __repr__(self) -> str:
        return f"InMemoryFrameRegistry({len(self)} frames)"
