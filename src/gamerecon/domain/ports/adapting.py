"""Port for turning raw upstream documents into canonical records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gamerecon.domain.model import CanonicalRecord


@runtime_checkable
class SourceAdapter(Protocol):
    """Callable port mapping one parsed document to canonical records.

    Implementations never raise for malformed input; they log and return
    whatever records could be salvaged (possibly none).
    """

    def __call__(self, document: object) -> tuple[CanonicalRecord, ...]: ...


__all__ = ["SourceAdapter"]
