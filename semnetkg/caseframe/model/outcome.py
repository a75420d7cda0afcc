"""
Outcomes of case-frame operations.

Soft outcomes are returned to the immediate caller inside a SignatureResult;
fatal outcomes are raised as CaseFrameError subclasses carrying the same Outcome.
"""
from enum import Enum
from typing import Optional


class Outcome(str, Enum):
    """
    Every outcome a case-frame operation can produce.

    SUCCESS:
    - ADDED: a signature was registered
    - REMOVED: a signature was dropped

    SOFT (returned, no state change):
    - DUPLICATE_SIGNATURE: a signature with the same id is already registered
    - SIGNATURE_NOT_FOUND: no signature with the requested id
    - INVALID_PRIORITY: the requested position is outside the priority order

    FATAL (raised):
    - UNINITIALIZED_CATALOG: standard constraints read before initialization
    - BOOTSTRAP_FAILURE: the standard catalog could not be built
    """
    ADDED = "added"
    REMOVED = "removed"
    DUPLICATE_SIGNATURE = "duplicate_signature"
    SIGNATURE_NOT_FOUND = "signature_not_found"
    INVALID_PRIORITY = "invalid_priority"
    UNINITIALIZED_CATALOG = "uninitialized_catalog"
    BOOTSTRAP_FAILURE = "bootstrap_failure"

    @property
    def is_success(self) -> bool:
        return self in (Outcome.ADDED, Outcome.REMOVED)

    @property
    def is_fatal(self) -> bool:
        return self in (Outcome.UNINITIALIZED_CATALOG, Outcome.BOOTSTRAP_FAILURE)

    def __str__(self) -> str:
        return self.value


class SignatureResult:
    """Result of adding or removing a signature on a case frame.

    Truthy exactly when the mutation happened, so callers that only care
    whether something changed can keep using it as a boolean.
    """
    __slots__ = ("outcome", "signature_id", "position", "message")

    def __init__(self, outcome: Outcome, signature_id: str,
                 position: Optional[int] = None, message: str = "") -> None:
        if outcome.is_fatal:
            raise ValueError(f"SignatureResult cannot carry fatal outcome {outcome}.")
        self.outcome = outcome
        self.signature_id = signature_id
        self.position = position
        self.message = message

    @property
    def succeeded(self) -> bool:
        return self.outcome.is_success

    def __bool__(self) -> bool:
        return self.succeeded

    def __eq__(self, other) -> bool:
        if isinstance(other, SignatureResult):
            return (self.outcome, self.signature_id, self.position) == \
                   (other.outcome, other.signature_id, other.position)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.outcome, self.signature_id, self.position))

    def __repr__(self) -> str:
        return f"SignatureResult({self.outcome.value}, {self.signature_id!r}, position={self.position})"

    @classmethod
    def added(cls, signature_id: str, position: int) -> 'SignatureResult':
        return cls(Outcome.ADDED, signature_id, position)

    @classmethod
    def removed(cls, signature_id: str, position: int) -> 'SignatureResult':
        return cls(Outcome.REMOVED, signature_id, position)

    @classmethod
    def duplicate(cls, signature_id: str) -> 'SignatureResult':
        return cls(Outcome.DUPLICATE_SIGNATURE, signature_id,
                   message=f"Signature '{signature_id}' is already registered")

    @classmethod
    def not_found(cls, signature_id: str) -> 'SignatureResult':
        return cls(Outcome.SIGNATURE_NOT_FOUND, signature_id,
                   message=f"No signature with id '{signature_id}'")

    @classmethod
    def invalid_priority(cls, signature_id: str, priority: int, size: int) -> 'SignatureResult':
        return cls(Outcome.INVALID_PRIORITY, signature_id,
                   message=f"Priority {priority} is outside 0..{size}")
