from dataclasses import dataclass
from typing import Iterable, Optional

from .relation import Relation

@dataclass(frozen=True, slots=True)
class RelationConstraint:
    """
    A relation together with its structural constraints inside one case frame
    (an RCFP, "relation case frame properties").
      - relation: the Relation the constraint applies to
      - adjustable: whether the number of arcs may change after the node is built
      - limit: bound on how many arcs of the relation a node may carry, None when unbounded
    """
    relation: Relation
    adjustable: bool = False
    limit: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.relation, Relation):
            raise TypeError("RelationConstraint: relation must be a Relation.")
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 0:
                raise ValueError("RelationConstraint: limit must be a non-negative int or None.")

    @property
    def name(self) -> str:
        return self.relation.name

    def __repr__(self) -> str:
        adjust = "adjust" if self.adjustable else "fixed"
        return f"{self.relation.name}[{adjust}, limit={self.limit}]"


def relations_of(constraints: Iterable[RelationConstraint]) -> tuple[Relation, ...]:
    """Underlying relations of `constraints`, in the order given."""
    return tuple(c.relation for c in constraints)
