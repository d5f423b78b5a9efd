"""Pipeline composition for catalog reconciliation.

The pipeline is a pure function of its inputs: projection, partition, filter
and summary are recomputed from scratch on every call. Callers that receive
documents over time keep a :class:`CatalogSnapshot` and replace it wholesale
whenever a source's document changes; only that source's adapter reruns.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from gamerecon.domain.model import GameEntry, Region, SourceName

from .filtering import FilterPredicate, filter_regions, parse_filter
from .partition import partition
from .projection import project
from .summary import SummaryCounts, summarize

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import TypeAlias

    from gamerecon.domain.model import ActiveSet, CanonicalRecord

    Adapt: TypeAlias = Callable[[SourceName, object], tuple[CanonicalRecord, ...]]

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Immutable view of the canonical records currently known per source."""

    records: Mapping[SourceName, tuple[CanonicalRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))

    @property
    def loaded_sources(self) -> tuple[SourceName, ...]:
        return tuple(source for source in SourceName if source in self.records)

    def records_for(self, source: SourceName) -> tuple[CanonicalRecord, ...]:
        return self.records.get(source, ())

    def with_records(
        self, source: SourceName, records: Iterable[CanonicalRecord]
    ) -> CatalogSnapshot:
        """Return a new snapshot where ``source`` is replaced by ``records``."""

        updated = dict(self.records)
        updated[source] = tuple(records)
        return CatalogSnapshot(records=updated)

    def with_document(
        self,
        source: SourceName,
        document: object,
        *,
        adapt: Adapt,
    ) -> CatalogSnapshot:
        """Adapt ``document`` for ``source`` and replace that source's records."""

        return self.with_records(source, adapt(source, document))

    def active_sets(self) -> dict[SourceName, ActiveSet]:
        return {source: project(self.records_for(source)) for source in SourceName}


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """Filtered regions plus the counts derived from them."""

    regions: Mapping[Region, tuple[GameEntry, ...]]
    summary: SummaryCounts
    predicate: FilterPredicate = field(default_factory=FilterPredicate)

    def entries(self, region: Region) -> tuple[GameEntry, ...]:
        return self.regions.get(region, ())

    def region_ids(self, region: Region) -> tuple[str, ...]:
        return tuple(entry.id for entry in self.entries(region))


def reconcile(
    catalog: CatalogSnapshot | Mapping[SourceName, ActiveSet],
    filter_text: FilterPredicate | str | None = None,
) -> ReconciliationResult:
    """Run projection, partition, filter and summary over ``catalog``.

    ``catalog`` is either a snapshot of canonical records or pre-projected
    active sets keyed by source. Missing sources count as empty.
    """

    if isinstance(catalog, CatalogSnapshot):
        active_sets: Mapping[SourceName, ActiveSet] = catalog.active_sets()
    else:
        active_sets = catalog

    predicate = filter_text if isinstance(filter_text, FilterPredicate) else parse_filter(filter_text)
    regions = partition(
        active_sets.get(SourceName.CMS, {}),
        active_sets.get(SourceName.CONTENT_HUB, {}),
        active_sets.get(SourceName.UPAM, {}),
    )
    filtered = filter_regions(regions, predicate)
    summary = summarize(filtered)
    log.debug("Reconciled catalog with filter %r: total=%s", str(predicate), summary.total)
    return ReconciliationResult(
        regions=MappingProxyType(filtered),
        summary=summary,
        predicate=predicate,
    )
