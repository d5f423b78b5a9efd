"""Canonical record shapes shared by adapters and the reconciliation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

ActiveSet: TypeAlias = Mapping[str, str]
"""Ordered ``id -> name`` mapping of the games one source reports as active."""


@dataclass(frozen=True, slots=True)
class CanonicalRecord:
    """One upstream game record normalized to ``(id, name, active)``."""

    id: str
    name: str
    active: bool

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CanonicalRecord id must be non-empty")


@dataclass(frozen=True, slots=True)
class GameEntry:
    """An ``(id, name)`` pair as listed inside a region."""

    id: str
    name: str
