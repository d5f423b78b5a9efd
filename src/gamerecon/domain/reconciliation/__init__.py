"""Reconciliation core for three-source game catalogs.

Layered flow:
1) project each source's canonical records to its active set
2) partition the three active sets into seven disjoint regions
3) filter every region by identifier substrings
4) summarize the filtered regions into counts
"""

from __future__ import annotations

from .engine import CatalogSnapshot, ReconciliationResult, reconcile
from .filtering import FilterPredicate, filter_regions, parse_filter
from .partition import Regions, empty_regions, partition
from .projection import project
from .summary import SummaryCounts, summarize

__all__ = [
    "CatalogSnapshot",
    "FilterPredicate",
    "ReconciliationResult",
    "Regions",
    "SummaryCounts",
    "empty_regions",
    "filter_regions",
    "parse_filter",
    "partition",
    "project",
    "reconcile",
    "summarize",
]
