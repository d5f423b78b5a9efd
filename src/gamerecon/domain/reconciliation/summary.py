"""Per-region counts derived from a (filtered) partition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gamerecon.domain.model import Region

if TYPE_CHECKING:
    from .partition import Regions


@dataclass(frozen=True, slots=True)
class SummaryCounts:
    cms_only: int = 0
    content_hub_only: int = 0
    upam_only: int = 0
    cms_and_content_hub: int = 0
    cms_and_upam: int = 0
    content_hub_and_upam: int = 0
    all_three: int = 0

    @property
    def total(self) -> int:
        return sum(self.by_region().values())

    def count(self, region: Region) -> int:
        return getattr(self, region.value)

    def by_region(self) -> dict[Region, int]:
        return {region: getattr(self, region.value) for region in Region}


def summarize(regions: Regions) -> SummaryCounts:
    """Count the entries of each region; the total is their sum."""

    return SummaryCounts(**{region.value: len(regions.get(region, ())) for region in Region})
