"""Domain model for catalog reconciliation."""

from __future__ import annotations

from .enums import Region, SourceName
from .records import ActiveSet, CanonicalRecord, GameEntry

__all__ = [
    "ActiveSet",
    "CanonicalRecord",
    "GameEntry",
    "Region",
    "SourceName",
]
