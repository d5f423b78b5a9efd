"""Public interface for the Content Hub adapter."""

from __future__ import annotations

from .schema import CONTENT_HUB_RECORDS_FIELD, ContentHubGame
from .translator import translate_content_hub_document, translate_content_hub_game

__all__ = [
    "CONTENT_HUB_RECORDS_FIELD",
    "ContentHubGame",
    "translate_content_hub_document",
    "translate_content_hub_game",
]
