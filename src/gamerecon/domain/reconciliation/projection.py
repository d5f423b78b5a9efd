"""Active-set projection: keep the records a source reports as active."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gamerecon.domain.model import ActiveSet, CanonicalRecord


def project(records: Iterable[CanonicalRecord]) -> ActiveSet:
    """Return the ``id -> name`` mapping of active ``records``.

    Ordering follows the first occurrence of each id. A repeated id keeps its
    position but takes the name of its last occurrence.
    """

    active: dict[str, str] = {}
    for record in records:
        if record.active:
            active[record.id] = record.name
    return active
