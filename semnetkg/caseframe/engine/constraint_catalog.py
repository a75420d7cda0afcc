"""
Catalog of the standard relation constraints.

The catalog is built once by `initialize()`; until then every read fails with
UninitializedConstraintCatalogError. Later `initialize()` calls are no-ops, so
the constraint instances handed out stay the same for the life of the catalog.
"""
import logging
import threading
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from ..model.constraint import RelationConstraint
from ..model.errors import BootstrapError, UninitializedConstraintCatalogError
from ..model.relation import Relation

logger = logging.getLogger(__name__)

RelationFactory = Callable[[str, str], Relation]

# (relation name, relation type, adjustable, limit)
STANDARD_CONSTRAINTS: tuple[tuple[str, str, bool, Optional[int]], ...] = (
    # Logical connectives
    ("andAnt", "Proposition", True, 1),
    ("ant", "Proposition", True, 1),
    ("cq", "Proposition", True, 1),
    ("arg", "Proposition", True, 1),
    ("min", "Infimum", False, 1),
    ("max", "Infimum", False, 1),
    ("thresh", "Infimum", False, 1),
    ("threshMax", "Infimum", False, 1),
    ("i", "Infimum", False, 1),
    # Acts
    ("action", "Action", False, 1),
    ("obj", "Entity", True, 1),
    *((f"obj{n}", "Entity", False, 1) for n in range(1, 11)),
    # Control constructs
    ("precondition", "Proposition", True, 1),
    ("act", "Act", False, 1),
    ("when", "Proposition", True, 1),
    ("whenever", "Proposition", True, 1),
    ("do", "Act", False, 1),
    ("if", "Proposition", True, 1),
    ("effect", "Proposition", True, 1),
    ("plan", "Act", False, 1),
    ("goal", "Proposition", False, 1),
    ("withsome", "Act", False, 1),
    ("vars", "Entity", False, 1),
    ("suchthat", "Proposition", True, 1),
    ("else", "Act", False, 1),
)


class ConstraintCatalog:
    """Named RelationConstraint constants, created once on `initialize()`."""

    def __init__(self, definitions: Iterable[tuple[str, str, bool, Optional[int]]] = STANDARD_CONSTRAINTS) -> None:
        self._definitions = tuple(definitions)
        self._constraints: Optional[Mapping[str, RelationConstraint]] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._constraints is not None

    def initialize(self, relation_factory: Optional[RelationFactory] = None) -> bool:
        """
        Create the constraint constants if they do not exist yet.

        Args:
            relation_factory: callable (name, type) -> Relation used to obtain
                the relations; defaults to building plain Relation values.

        Returns:
            True if this call created the constants, False if they already existed.

        Raises:
            BootstrapError: if a relation or constraint could not be created.
                The catalog then stays uninitialized.
        """
        if self._constraints is not None:
            return False

        with self._lock:
            if self._constraints is not None:
                return False

            factory = relation_factory or Relation
            constraints: dict[str, RelationConstraint] = {}
            try:
                for name, rel_type, adjustable, limit in self._definitions:
                    relation = factory(name, rel_type)
                    if not isinstance(relation, Relation) or relation.name != name:
                        raise ValueError(f"relation factory returned {relation!r} for '{name}'")
                    constraints[name] = RelationConstraint(relation, adjustable, limit)
            except Exception as e:
                logger.error(f"[CONSTRAINT_CATALOG] Failed to create standard constraints: {e}")
                raise BootstrapError(f"Cannot create standard relation constraints: {e}") from e

            self._constraints = MappingProxyType(constraints)

        logger.info(f"[CONSTRAINT_CATALOG] Created {len(constraints)} standard relation constraints")
        return True

    def get(self, name: str) -> RelationConstraint:
        """
        Return the standard constraint of the relation called `name`.
        Raises UninitializedConstraintCatalogError before `initialize()`,
        KeyError for names the catalog does not define.
        """
        constraints = self._constraints
        if constraints is None:
            raise UninitializedConstraintCatalogError(
                f"Standard constraint '{name}' requested before the constraint catalog was initialized."
            )
        if name not in constraints:
            raise KeyError(f"ConstraintCatalog: no standard constraint named '{name}'.")
        return constraints[name]

    def require(self, *names: str) -> tuple[RelationConstraint, ...]:
        """Return the standard constraints for `names`, in that order."""
        return tuple(self.get(name) for name in names)

    def names(self) -> tuple[str, ...]:
        return tuple(d[0] for d in self._definitions)

    def __getitem__(self, name: str) -> RelationConstraint:
        return self.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.names()

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        state = "initialized" if self.initialized else "uninitialized"
        return f"ConstraintCatalog({len(self)} constraints, {state})"

# Shared instance
default_catalog = ConstraintCatalog()
