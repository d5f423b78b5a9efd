"""Translate CMS exports into canonical records."""

from __future__ import annotations

from gamerecon.adapters.documents import translate_document
from gamerecon.domain.model import CanonicalRecord, SourceName

from .schema import CMS_RECORDS_FIELD, CmsGame


def _ensure_cms_game(element: object) -> CmsGame:
    if isinstance(element, CmsGame):
        return element
    return CmsGame.model_validate(element)


def translate_cms_game(element: object) -> CanonicalRecord:
    """Map one CMS record; a record is active unless it is hidden."""

    game = _ensure_cms_game(element)
    return CanonicalRecord(id=game.game_id, name=game.name, active=not game.is_hidden)


def translate_cms_document(document: object) -> tuple[CanonicalRecord, ...]:
    return translate_document(
        document,
        source=SourceName.CMS,
        field=CMS_RECORDS_FIELD,
        translate_element=translate_cms_game,
    )
