"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class SourceName(StrEnum):
    CMS = "cms"
    CONTENT_HUB = "content_hub"
    UPAM = "upam"

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]


_SOURCE_LABELS: dict[SourceName, str] = {
    SourceName.CMS: "CMS",
    SourceName.CONTENT_HUB: "Content Hub",
    SourceName.UPAM: "UPAM",
}


class Region(StrEnum):
    """The seven disjoint membership categories of the three-source partition."""

    CMS_ONLY = "cms_only"
    CONTENT_HUB_ONLY = "content_hub_only"
    UPAM_ONLY = "upam_only"
    CMS_AND_CONTENT_HUB = "cms_and_content_hub"
    CMS_AND_UPAM = "cms_and_upam"
    CONTENT_HUB_AND_UPAM = "content_hub_and_upam"
    ALL_THREE = "all_three"

    @property
    def sources(self) -> tuple[SourceName, ...]:
        """Sources an id must be active in (and only in) to land here."""

        return _REGION_SOURCES[self]

    @property
    def label(self) -> str:
        return _REGION_LABELS[self]


_REGION_SOURCES: dict[Region, tuple[SourceName, ...]] = {
    Region.CMS_ONLY: (SourceName.CMS,),
    Region.CONTENT_HUB_ONLY: (SourceName.CONTENT_HUB,),
    Region.UPAM_ONLY: (SourceName.UPAM,),
    Region.CMS_AND_CONTENT_HUB: (SourceName.CMS, SourceName.CONTENT_HUB),
    Region.CMS_AND_UPAM: (SourceName.CMS, SourceName.UPAM),
    Region.CONTENT_HUB_AND_UPAM: (SourceName.CONTENT_HUB, SourceName.UPAM),
    Region.ALL_THREE: (SourceName.CMS, SourceName.CONTENT_HUB, SourceName.UPAM),
}

_REGION_LABELS: dict[Region, str] = {
    Region.CMS_ONLY: "CMS Only",
    Region.CONTENT_HUB_ONLY: "Content Hub Only",
    Region.UPAM_ONLY: "UPAM Only",
    Region.CMS_AND_CONTENT_HUB: "CMS & Content Hub",
    Region.CMS_AND_UPAM: "CMS & UPAM",
    Region.CONTENT_HUB_AND_UPAM: "Content Hub & UPAM",
    Region.ALL_THREE: "Present in All Systems",
}
