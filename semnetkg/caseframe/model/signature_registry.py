import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from .outcome import SignatureResult
from .signature import SignatureLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SignatureSnapshot:
    """
    Immutable state of a signature collection:
      - order: signature ids, most specific (highest priority) first
      - by_id: signature id -> signature
    `order` is always a duplicate-free permutation of the keys of `by_id`.
    """
    order: tuple[str, ...] = ()
    by_id: Mapping[str, SignatureLike] = field(default_factory=lambda: MappingProxyType({}))


def signature_id_of(signature: Union[str, SignatureLike]) -> str:
    """Accept either a signature id or an object exposing one."""
    sig_id = signature if isinstance(signature, str) else getattr(signature, "id", None)
    if not isinstance(sig_id, str) or not sig_id:
        raise TypeError(f"Expected a signature id or an object with a string 'id', got {signature!r}")
    return sig_id


class SignatureRegistry:
    """
    Prioritized collection of the signatures of one case frame.

    Writers are serialized by a lock and publish a new SignatureSnapshot in a
    single assignment. Readers never lock: they grab the current snapshot and
    see either the state before or after any mutation, never a mix.
    """

    def __init__(self, strict_priority: bool = True) -> None:
        self.strict_priority = strict_priority
        self._lock = threading.Lock()
        self._snapshot = SignatureSnapshot()

    def snapshot(self) -> SignatureSnapshot:
        return self._snapshot

    @property
    def order(self) -> tuple[str, ...]:
        return self._snapshot.order

    @property
    def signatures(self) -> Mapping[str, SignatureLike]:
        return self._snapshot.by_id

    def get(self, signature_id: str) -> Optional[SignatureLike]:
        return self._snapshot.by_id.get(signature_id)

    def add(self, signature: SignatureLike, priority: Optional[int] = None) -> SignatureResult:
        """
        Register `signature` at `priority` (0 = tried first), or last when no
        priority is given. Entries at and after that position move one down.
        A bare id is not a signature and is rejected with TypeError.
        """
        if isinstance(signature, str):
            raise TypeError(f"Expected a signature object, got the bare id {signature!r}")
        sig_id = signature_id_of(signature)
        if priority is not None and (isinstance(priority, bool) or not isinstance(priority, int)):
            raise TypeError(f"priority must be an int or None, got {priority!r}")

        with self._lock:
            current = self._snapshot
            if sig_id in current.by_id:
                logger.debug(f"[SIGNATURE_ADD] '{sig_id}' already registered")
                return SignatureResult.duplicate(sig_id)

            size = len(current.order)
            if priority is None:
                position = size
            elif 0 <= priority <= size:
                position = priority
            elif self.strict_priority:
                logger.debug(f"[SIGNATURE_ADD] Rejected '{sig_id}' at priority {priority} (size {size})")
                return SignatureResult.invalid_priority(sig_id, priority, size)
            else:
                position = min(max(priority, 0), size)

            order = current.order[:position] + (sig_id,) + current.order[position:]
            by_id = dict(current.by_id)
            by_id[sig_id] = signature
            self._snapshot = SignatureSnapshot(order, MappingProxyType(by_id))

        logger.debug(f"[SIGNATURE_ADD] Added '{sig_id}' at position {position}")
        return SignatureResult.added(sig_id, position)

    def remove(self, signature: Union[str, SignatureLike]) -> SignatureResult:
        """Drop a signature by id (or by the signature itself), keeping the others in order."""
        sig_id = signature_id_of(signature)

        with self._lock:
            current = self._snapshot
            if sig_id not in current.by_id:
                logger.debug(f"[SIGNATURE_REMOVE] '{sig_id}' not registered")
                return SignatureResult.not_found(sig_id)

            position = current.order.index(sig_id)
            order = current.order[:position] + current.order[position + 1:]
            by_id = {k: v for k, v in current.by_id.items() if k != sig_id}
            self._snapshot = SignatureSnapshot(order, MappingProxyType(by_id))

        logger.debug(f"[SIGNATURE_REMOVE] Removed '{sig_id}' from position {position}")
        return SignatureResult.removed(sig_id, position)

    def __iter__(self) -> Iterator[tuple[str, SignatureLike]]:
        current = self._snapshot
        for sig_id in current.order:
            yield sig_id, current.by_id[sig_id]

    def __len__(self) -> int:
        return len(self._snapshot.order)

    def __contains__(self, signature) -> bool:
        try:
            return signature_id_of(signature) in self._snapshot.by_id
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"SignatureRegistry({list(self._snapshot.order)})"
