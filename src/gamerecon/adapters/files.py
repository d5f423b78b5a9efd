"""Filesystem ingestion: read exported JSON files and zip archives.

File names decide which source a document belongs to; archives are expanded
and each member is dispatched by its own name. Anything that cannot be read
or parsed is logged and skipped so one bad file never blocks the others.
"""

from __future__ import annotations

import json
import zipfile
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from gamerecon.config import IngestConfig, get_ingest_config
from gamerecon.domain.errors import UnparsableInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from os import PathLike

    from gamerecon.domain.model import SourceName


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IngestedDocument:
    """A parsed upstream document together with where it came from."""

    source: SourceName
    filename: str
    environment: str | None
    document: object


def parse_document(raw: bytes | str, *, origin: str) -> object:
    """Parse raw JSON, raising ``UnparsableInputError`` for anything invalid."""

    try:
        return json.loads(raw)
    except ValueError as exc:
        raise UnparsableInputError(f"{origin} is not valid JSON: {exc}") from exc


def _base_name(filename: str) -> str:
    return PurePosixPath(filename.replace("\\", "/")).name


def source_for_filename(filename: str, *, config: IngestConfig | None = None) -> SourceName | None:
    """Return the source whose keyword appears in the file name (case-insensitive)."""

    effective = config or get_ingest_config()
    lowered = _base_name(filename).lower()
    for keyword, source in effective.source_keywords:
        if keyword in lowered:
            return source
    return None


def environment_from_filename(filename: str) -> str | None:
    """Return the upper-cased prefix before the first ``-`` (``prod-cms.json`` -> ``PROD``)."""

    base = _base_name(filename)
    prefix, separator, _rest = base.partition("-")
    if not separator or not prefix.strip():
        return None
    return prefix.strip().upper()


def ingest_bytes(
    filename: str,
    raw: bytes | str,
    *,
    config: IngestConfig | None = None,
) -> IngestedDocument | None:
    """Dispatch and parse one file's contents; ``None`` when it is unusable."""

    source = source_for_filename(filename, config=config)
    if source is None:
        log.warning("Unrecognized file type: %s", filename)
        return None
    try:
        document = parse_document(raw, origin=filename)
    except UnparsableInputError as exc:
        log.error("Discarding %s: %s", filename, exc)  # noqa: TRY400
        return None
    log.info("Loaded %s document from %s", source.label, filename)
    return IngestedDocument(
        source=source,
        filename=filename,
        environment=environment_from_filename(filename),
        document=document,
    )


_MEMBER_READ_ERRORS = (zipfile.BadZipFile, NotImplementedError, RuntimeError, OSError)


def _read_member(archive: zipfile.ZipFile, member: zipfile.ZipInfo) -> bytes | None:
    # Unsupported compression raises NotImplementedError, encryption RuntimeError.
    try:
        return archive.read(member)
    except _MEMBER_READ_ERRORS as exc:
        log.error("Discarding archive member %s: %s", member.filename, exc)  # noqa: TRY400
        return None


def _iter_archive(path: Path, config: IngestConfig) -> Iterator[IngestedDocument]:
    try:
        with zipfile.ZipFile(path) as archive:
            for member in archive.infolist():
                if member.is_dir():
                    continue
                raw = _read_member(archive, member)
                if raw is None:
                    continue
                ingested = ingest_bytes(member.filename, raw, config=config)
                if ingested is not None:
                    yield ingested
    except zipfile.BadZipFile as exc:
        log.error("Discarding archive %s: %s", path, exc)  # noqa: TRY400


def load_documents(
    paths: Iterable[str | PathLike[str]],
    *,
    config: IngestConfig | None = None,
) -> Iterator[IngestedDocument]:
    """Yield the usable documents found in ``paths``, in input order."""

    effective = config or get_ingest_config()
    for raw_path in paths:
        path = Path(raw_path)
        try:
            if path.name.lower().endswith(effective.archive_suffix):
                yield from _iter_archive(path, effective)
                continue
            ingested = ingest_bytes(path.name, path.read_bytes(), config=effective)
        except OSError as exc:
            log.error("Error reading file %s: %s", path, exc)  # noqa: TRY400
            continue
        if ingested is not None:
            yield ingested
