"""Translate UPAM entitlement payloads into canonical records."""

from __future__ import annotations

from collections.abc import Mapping

from gamerecon.adapters.documents import translate_document
from gamerecon.domain.errors import MalformedElementError
from gamerecon.domain.model import CanonicalRecord, SourceName

from .schema import UPAM_ENVELOPE_FIELD, UPAM_RECORDS_FIELD, UpamGame


def _ensure_upam_game(element: object) -> UpamGame:
    if isinstance(element, UpamGame):
        return element
    if not isinstance(element, Mapping) or element.get(UPAM_ENVELOPE_FIELD) is None:
        raise MalformedElementError(f"missing {UPAM_ENVELOPE_FIELD!r} envelope")
    return UpamGame.model_validate(element)


def translate_upam_game(element: object) -> CanonicalRecord:
    """Map one UPAM envelope; envelopes without ``attributes`` are rejected."""

    attributes = _ensure_upam_game(element).attributes
    return CanonicalRecord(
        id=attributes.external_game_id,
        name=attributes.name,
        active=attributes.enabled,
    )


def translate_upam_document(document: object) -> tuple[CanonicalRecord, ...]:
    return translate_document(
        document,
        source=SourceName.UPAM,
        field=UPAM_RECORDS_FIELD,
        translate_element=translate_upam_game,
    )
