"""Three-way partition of active ids into the seven membership regions.

Each source pass only emits into the regions it owns, so no id is ever listed
twice:

- the CMS pass owns every region containing CMS (four regions)
- the Content Hub pass owns Content Hub only and Content Hub & UPAM
- the UPAM pass owns UPAM only

The name attached to an entry is the one reported by the source whose pass
emitted it.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from gamerecon.domain.model import GameEntry, Region

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gamerecon.domain.model import ActiveSet

Regions: TypeAlias = "Mapping[Region, tuple[GameEntry, ...]]"

log = getLogger(__name__)


def empty_regions() -> dict[Region, tuple[GameEntry, ...]]:
    return {region: () for region in Region}


def partition(
    cms: ActiveSet,
    content_hub: ActiveSet,
    upam: ActiveSet,
) -> dict[Region, tuple[GameEntry, ...]]:
    """Partition the union of the three active sets into regions."""

    ids_cms = cms.keys()
    ids_hub = content_hub.keys()
    ids_upam = upam.keys()

    buckets: dict[Region, list[GameEntry]] = {region: [] for region in Region}

    for game_id, name in cms.items():
        in_hub = game_id in ids_hub
        in_upam = game_id in ids_upam
        if in_hub and in_upam:
            region = Region.ALL_THREE
        elif in_hub:
            region = Region.CMS_AND_CONTENT_HUB
        elif in_upam:
            region = Region.CMS_AND_UPAM
        else:
            region = Region.CMS_ONLY
        buckets[region].append(GameEntry(id=game_id, name=name))

    for game_id, name in content_hub.items():
        if game_id in ids_cms:
            continue
        region = Region.CONTENT_HUB_AND_UPAM if game_id in ids_upam else Region.CONTENT_HUB_ONLY
        buckets[region].append(GameEntry(id=game_id, name=name))

    for game_id, name in upam.items():
        if game_id in ids_cms or game_id in ids_hub:
            continue
        buckets[Region.UPAM_ONLY].append(GameEntry(id=game_id, name=name))

    regions = {region: tuple(entries) for region, entries in buckets.items()}
    log.debug(
        "Partitioned %s active ids: %s",
        sum(len(entries) for entries in regions.values()),
        ", ".join(f"{region}={len(entries)}" for region, entries in regions.items()),
    )
    return regions
