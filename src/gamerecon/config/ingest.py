"""File ingestion settings: how uploaded file names map onto sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from gamerecon.domain.model import SourceName

DEFAULT_SOURCE_KEYWORDS: Final[tuple[tuple[str, SourceName], ...]] = (
    ("cms", SourceName.CMS),
    ("iwg", SourceName.CONTENT_HUB),
    ("upam", SourceName.UPAM),
)
ARCHIVE_SUFFIX: Final[str] = ".zip"


@dataclass(frozen=True, slots=True)
class IngestConfig:
    # Checked in order; the first keyword found in a file name wins.
    source_keywords: tuple[tuple[str, SourceName], ...] = field(
        default_factory=lambda: DEFAULT_SOURCE_KEYWORDS
    )
    archive_suffix: str = ARCHIVE_SUFFIX


def get_ingest_config() -> IngestConfig:
    return IngestConfig()
