from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from .constraint import RelationConstraint, relations_of
from .outcome import SignatureResult
from .relation import Relation
from .signature import SignatureLike
from .signature_registry import SignatureRegistry, SignatureSnapshot

CANONICAL_ID_DELIMITER = ","


def _relation_name(relation: Union[Relation, str]) -> str:
    return relation if isinstance(relation, str) else relation.name


def canonical_id(relations: Iterable[Union[Relation, str]]) -> str:
    """
    Canonical id of a case frame: the relation names sorted lexicographically
    and joined by commas, e.g. {"cq", "andAnt"} -> "andAnt,cq".
    Repeated names are kept.
    """
    return CANONICAL_ID_DELIMITER.join(sorted(_relation_name(r) for r in relations))


@dataclass(frozen=True, eq=False)
class CaseFrame:
    """
    A set of relations used together to express one semantic construct.
      - semantic_class: default semantic type of nodes built from this frame
      - relations: the relations, in the order they were given
      - id: canonical id computed from the relation names only

    Two frames are equal when their ids are equal, whatever their semantic
    class or the order their relations were given in.
    """
    semantic_class: str
    relations: tuple[Relation, ...]
    id: str = field(init=False)

    def __post_init__(self):
        relations = tuple(self.relations)
        if not relations:
            raise ValueError("CaseFrame: at least one relation is required.")
        for r in relations:
            if not isinstance(r, Relation):
                raise TypeError(f"CaseFrame: expected Relation, got {r!r}.")
        object.__setattr__(self, "relations", relations)
        object.__setattr__(self, "id", canonical_id(relations))

    @classmethod
    def from_constraints(cls, semantic_class: str,
                         constraints: Iterable[RelationConstraint]) -> 'CaseFrame':
        return cls(semantic_class, relations_of(constraints))

    def relation_names(self) -> tuple[str, ...]:
        return tuple(r.name for r in self.relations)

    def has_relation(self, relation: Union[Relation, str]) -> bool:
        return _relation_name(relation) in self.relation_names()

    def __len__(self) -> int:
        return len(self.relations)

    def __eq__(self, other) -> bool:
        if isinstance(other, CaseFrame):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.semantic_class}: {self.id})"


@dataclass(frozen=True, eq=False, repr=False)
class ConstrainedCaseFrame(CaseFrame):
    """
    A case frame whose relations carry adjustability/limit constraints, plus
    a prioritized collection of signatures (restricted forms of the frame).

    Build it with `from_constraints` so that relations, id and constraints all
    come from the same list. When a relation name appears more than once in
    that list, every copy stays in `relations` and in the id, and the last
    constraint given for the name is the one kept in `constraints`.
    """
    constraints: Mapping[str, RelationConstraint]
    signature_registry: SignatureRegistry = field(default_factory=SignatureRegistry)

    def __post_init__(self):
        CaseFrame.__post_init__(self)
        constraints = dict(self.constraints)
        if set(constraints) != set(self.relation_names()):
            raise ValueError(
                f"ConstrainedCaseFrame: constraints {sorted(constraints)} do not match relations {self.id}."
            )
        for name, constraint in constraints.items():
            if constraint.name != name:
                raise ValueError(f"ConstrainedCaseFrame: constraint {constraint!r} filed under '{name}'.")
        object.__setattr__(self, "constraints", MappingProxyType(constraints))

    @classmethod
    def from_constraints(cls, semantic_class: str,
                         constraints: Iterable[RelationConstraint],
                         strict_priority: bool = True) -> 'ConstrainedCaseFrame':
        constraints = list(constraints)
        by_name: dict[str, RelationConstraint] = {}
        for c in constraints:
            by_name[c.name] = c
        return cls(semantic_class, relations_of(constraints), by_name,
                   SignatureRegistry(strict_priority=strict_priority))

    def lookup_constraint(self, relation: Union[Relation, str]) -> Optional[RelationConstraint]:
        """Constraint of `relation` in this frame, or None if the frame does not use it."""
        return self.constraints.get(_relation_name(relation))

    # Signatures

    def add_signature(self, signature: SignatureLike, priority: Optional[int] = None) -> SignatureResult:
        """
        Add a signature at `priority` (0 is tried first) or last if no priority
        is given. Fails softly if a signature with the same id is already there.
        """
        return self.signature_registry.add(signature, priority)

    def remove_signature(self, signature: Union[str, SignatureLike]) -> SignatureResult:
        """Remove a signature given either its id or the signature itself."""
        return self.signature_registry.remove(signature)

    @property
    def signature_order(self) -> tuple[str, ...]:
        """Signature ids, highest priority first. Reads that also need the
        signatures should use `signature_snapshot()` or `iter_signatures()`."""
        return self.signature_registry.order

    @property
    def signatures(self) -> Mapping[str, SignatureLike]:
        """Read-only id -> signature view. Not taken together with
        `signature_order`; use `signature_snapshot()` for both at once."""
        return self.signature_registry.signatures

    def signature_snapshot(self) -> SignatureSnapshot:
        """Order and signatures from the same state of the collection."""
        return self.signature_registry.snapshot()

    def get_signature(self, signature_id: str) -> Optional[SignatureLike]:
        return self.signature_registry.get(signature_id)

    def iter_signatures(self) -> Iterator[tuple[str, SignatureLike]]:
        """(id, signature) pairs, highest priority first, from one consistent snapshot."""
        return iter(self.signature_registry)
