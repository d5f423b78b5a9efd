"""Shared boundary handling for upstream catalog documents.

Every source exports a JSON object wrapping one array of game records. The
helpers here locate that array, translate elements one at a time and turn
malformed input into log diagnostics instead of exceptions.
"""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from gamerecon.domain.errors import MalformedDocumentError, MalformedElementError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from gamerecon.domain.model import CanonicalRecord, SourceName


log = getLogger(__name__)


def coerce_game_id(value: object) -> object:
    """Turn JSON numbers into comparable id strings and trim surrounding blanks."""

    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value.strip()
    return value


def coerce_display_name(value: object) -> str:
    """Names are cosmetic: numbers become text, anything else unusable becomes blank."""

    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def none_to_false(value: object) -> object:
    return False if value is None else value


def extract_elements(document: object, field: str) -> Sequence[object]:
    """Return the record array stored under ``field``.

    Raises ``MalformedDocumentError`` when the document is not an object, the
    field is absent or null, or the field is not an array.
    """

    if not isinstance(document, Mapping):
        raise MalformedDocumentError(
            f"expected a JSON object, got {type(document).__name__}"
        )
    value = document.get(field)
    if value is None:
        raise MalformedDocumentError(f"missing {field!r} field")
    if not isinstance(value, list):
        raise MalformedDocumentError(f"{field!r} is not an array ({type(value).__name__})")
    return value


def translate_document(
    document: object,
    *,
    source: SourceName,
    field: str,
    translate_element: Callable[[object], CanonicalRecord],
) -> tuple[CanonicalRecord, ...]:
    """Translate every usable element of ``document``; never raises for bad input."""

    try:
        elements = extract_elements(document, field)
    except MalformedDocumentError as exc:
        log.error("Discarding %s document: %s", source.label, exc)  # noqa: TRY400
        return ()

    records: list[CanonicalRecord] = []
    skipped = 0
    for index, element in enumerate(elements):
        try:
            records.append(translate_element(element))
        except (ValidationError, MalformedElementError) as exc:
            skipped += 1
            log.warning("Skipping %s record #%s: %s", source.label, index, exc)

    log.info(
        "Adapted %s document: kept=%s, skipped=%s",
        source.label,
        len(records),
        skipped,
    )
    return tuple(records)
