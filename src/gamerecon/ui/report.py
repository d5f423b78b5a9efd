"""Plain-data and text renderings of a reconciliation result."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from gamerecon.domain.model import GameEntry, Region, SourceName

if TYPE_CHECKING:
    from collections.abc import Collection

    from gamerecon.domain.reconciliation import ReconciliationResult


VENN_ORDER: Final[tuple[Region, ...]] = (
    Region.CMS_ONLY,
    Region.CONTENT_HUB_ONLY,
    Region.UPAM_ONLY,
    Region.CMS_AND_CONTENT_HUB,
    Region.CMS_AND_UPAM,
    Region.CONTENT_HUB_AND_UPAM,
    Region.ALL_THREE,
)

TABLE_ORDER: Final[tuple[Region, ...]] = (
    Region.ALL_THREE,
    Region.CMS_ONLY,
    Region.CONTENT_HUB_ONLY,
    Region.UPAM_ONLY,
    Region.CMS_AND_CONTENT_HUB,
    Region.CMS_AND_UPAM,
    Region.CONTENT_HUB_AND_UPAM,
)

TOTAL_LABEL: Final[str] = "Total Games"


@dataclass(frozen=True, slots=True)
class VennRegion:
    """One badge of the Venn diagram: which sources, how many games, which games."""

    region: Region
    sets: tuple[str, ...]
    size: int
    games: tuple[GameEntry, ...]

    def as_dict(self) -> dict[str, object]:
        return {
            "region": self.region.value,
            "sets": list(self.sets),
            "size": self.size,
            "games": [{"id": game.id, "name": game.name} for game in self.games],
        }


def venn_regions(result: ReconciliationResult) -> list[VennRegion]:
    return [
        VennRegion(
            region=region,
            sets=tuple(source.label for source in region.sources),
            size=result.summary.count(region),
            games=result.entries(region),
        )
        for region in VENN_ORDER
    ]


def _format_game(game: GameEntry) -> str:
    return f"{game.id} ({game.name})" if game.name else game.id


def format_loaded_sources(loaded_sources: Collection[SourceName]) -> str:
    """Format as ``Loaded: CMS, UPAM (missing: Content Hub)``."""

    loaded = [source.label for source in SourceName if source in loaded_sources]
    missing = [source.label for source in SourceName if source not in loaded_sources]
    line = f"Loaded: {', '.join(loaded) or 'none'}"
    return f"{line} (missing: {', '.join(missing)})" if missing else line


def render_table(
    result: ReconciliationResult,
    *,
    expand: Collection[Region] = (),
    environment: str | None = None,
    loaded_sources: Collection[SourceName] | None = None,
) -> str:
    """Render the summary table; regions in ``expand`` list their games beneath the row.

    When ``loaded_sources`` is given, a ``Loaded:`` line names the sources that
    were supplied and those that were not.
    """

    width = max(len(TOTAL_LABEL), *(len(region.label) for region in TABLE_ORDER)) + 2
    lines: list[str] = []
    if environment:
        lines.append(f"{environment} IWG Analysis")
    if not result.predicate.is_identity:
        lines.append(f"Filter: {result.predicate}")
    if loaded_sources is not None:
        lines.append(format_loaded_sources(loaded_sources))
    if lines:
        lines.append("")

    lines.append(f"{'Category':<{width}}{'Count':>7}")
    lines.append("-" * (width + 7))
    for region in TABLE_ORDER:
        marker = "v " if region in expand else "> "
        lines.append(f"{marker + region.label:<{width}}{result.summary.count(region):>7}")
        if region in expand:
            lines.extend(f"      {_format_game(game)}" for game in result.entries(region))
    lines.append("-" * (width + 7))
    lines.append(f"{TOTAL_LABEL:<{width}}{result.summary.total:>7}")
    return "\n".join(lines)


def render_json(
    result: ReconciliationResult,
    *,
    environment: str | None = None,
    loaded_sources: Collection[SourceName] | None = None,
) -> str:
    payload = {
        "environment": environment,
        "loaded_sources": (
            None
            if loaded_sources is None
            else [source.value for source in SourceName if source in loaded_sources]
        ),
        "filter": list(result.predicate.terms),
        "summary": {
            **{region.value: count for region, count in result.summary.by_region().items()},
            "total": result.summary.total,
        },
        "regions": [venn.as_dict() for venn in venn_regions(result)],
    }
    return json.dumps(payload, indent=2)


def render_venn_json(result: ReconciliationResult) -> str:
    return json.dumps([venn.as_dict() for venn in venn_regions(result)], indent=2)
