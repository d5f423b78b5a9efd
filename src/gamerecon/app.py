"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from gamerecon.adapters import adapt
from gamerecon.adapters.files import load_documents
from gamerecon.domain.model import SourceName
from gamerecon.domain.reconciliation import CatalogSnapshot, ReconciliationResult, reconcile

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike

    from gamerecon.adapters.files import IngestedDocument
    from gamerecon.config import IngestConfig


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogReport:
    """Outcome of reconciling a batch of exported files."""

    result: ReconciliationResult
    snapshot: CatalogSnapshot
    environment: str | None = None
    files: tuple[str, ...] = ()


def build_snapshot(
    documents: Iterable[IngestedDocument],
    *,
    snapshot: CatalogSnapshot | None = None,
) -> CatalogSnapshot:
    """Fold ingested documents into a snapshot; later documents replace earlier ones."""

    current = snapshot or CatalogSnapshot()
    for ingested in documents:
        if ingested.source in current.records:
            log.info("Replacing %s data with %s", ingested.source.label, ingested.filename)
        current = current.with_document(ingested.source, ingested.document, adapt=adapt)
    return current


def reconcile_files(
    paths: Iterable[str | PathLike[str]],
    *,
    filter_text: str | None = None,
    config: IngestConfig | None = None,
) -> CatalogReport:
    """Load exported files and reconcile the three catalogs they describe."""

    documents = list(load_documents(paths, config=config))
    environment: str | None = None
    for ingested in documents:
        if ingested.environment is not None:
            environment = ingested.environment

    snapshot = build_snapshot(documents)
    missing = [source.label for source in SourceName if source not in snapshot.records]
    if not documents:
        log.warning("No recognised source documents were loaded")
    elif missing:
        log.info("No document supplied for: %s", ", ".join(missing))

    result = reconcile(snapshot, filter_text)
    log.info(
        "Reconciled %s file(s): total=%s, all_three=%s",
        len(documents),
        result.summary.total,
        result.summary.all_three,
    )
    return CatalogReport(
        result=result,
        snapshot=snapshot,
        environment=environment,
        files=tuple(ingested.filename for ingested in documents),
    )