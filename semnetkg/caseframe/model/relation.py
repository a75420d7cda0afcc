from dataclasses import dataclass, field

@dataclass(frozen=True, slots=True, order=True)
class Relation:
    """
    A labeled arc type of the semantic network, e.g. "andAnt", "cq", "obj1".
    Only the `name` takes part in equality, hashing and ordering; `type` is the
    semantic type of the nodes the relation points to and is carried along
    for consumers of the network.
    """
    name: str
    type: str = field(default="Entity", compare=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Relation: name must be a non-empty string.")

    def __repr__(self) -> str:
        return self.name
