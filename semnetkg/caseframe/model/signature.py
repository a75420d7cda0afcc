from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

@runtime_checkable
class SignatureLike(Protocol):
    """Anything carrying a stable signature id can be registered on a case frame."""
    id: str


@dataclass(frozen=True, slots=True)
class CaseFrameSignature:
    """
    A restricted form of a case frame. Only the id is used for identity;
    `result` names the semantic class given to nodes matching this form.
    """
    id: str
    result: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("CaseFrameSignature: id must be a non-empty string.")

    def __repr__(self) -> str:
        return f"Signature({self.id})"
