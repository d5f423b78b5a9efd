"""Domain ports (interfaces implemented by adapters)."""

from __future__ import annotations

from .adapting import SourceAdapter

__all__ = ["SourceAdapter"]
