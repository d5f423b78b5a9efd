"""Translate Content Hub game lists into canonical records."""

from __future__ import annotations

from gamerecon.adapters.documents import translate_document
from gamerecon.domain.model import CanonicalRecord, SourceName

from .schema import CONTENT_HUB_RECORDS_FIELD, ContentHubGame


def translate_content_hub_game(element: object) -> CanonicalRecord:
    game = element if isinstance(element, ContentHubGame) else ContentHubGame.model_validate(element)
    return CanonicalRecord(id=game.game_id, name=game.title, active=game.is_active)


def translate_content_hub_document(document: object) -> tuple[CanonicalRecord, ...]:
    return translate_document(
        document,
        source=SourceName.CONTENT_HUB,
        field=CONTENT_HUB_RECORDS_FIELD,
        translate_element=translate_content_hub_game,
    )
