"""Identifier-substring filtering applied to every region."""

from __future__ import annotations

from dataclasses import dataclass

from gamerecon.domain.model import GameEntry, Region

from .partition import Regions  # noqa: TC001


@dataclass(frozen=True, slots=True)
class FilterPredicate:
    """Lowercase id substrings; an entry matches if its id contains any of them."""

    terms: tuple[str, ...] = ()

    @property
    def is_identity(self) -> bool:
        return not self.terms

    def matches(self, game_id: str) -> bool:
        if self.is_identity:
            return True
        lowered = game_id.lower()
        return any(term in lowered for term in self.terms)

    def __str__(self) -> str:
        return ",".join(self.terms)


def parse_filter(raw: str | None) -> FilterPredicate:
    """Parse a comma-separated filter string.

    Segments are trimmed and lower-cased. A blank string means no filtering. An
    empty segment inside a non-blank string (``"g1,"``) is kept as the empty
    term, which every id contains.
    """

    if raw is None or not raw.strip():
        return FilterPredicate()
    terms: list[str] = []
    for segment in raw.split(","):
        term = segment.strip().lower()
        if term not in terms:
            terms.append(term)
    return FilterPredicate(terms=tuple(terms))


def filter_regions(
    regions: Regions,
    predicate: FilterPredicate | str | None,
) -> dict[Region, tuple[GameEntry, ...]]:
    """Return ``regions`` with each region narrowed to entries matching ``predicate``."""

    active = predicate if isinstance(predicate, FilterPredicate) else parse_filter(predicate)
    if active.is_identity:
        return {region: tuple(regions.get(region, ())) for region in Region}
    return {
        region: tuple(entry for entry in regions.get(region, ()) if active.matches(entry.id))
        for region in Region
    }
