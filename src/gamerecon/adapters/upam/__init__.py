"""Public interface for the UPAM adapter."""

from __future__ import annotations

from .schema import UPAM_RECORDS_FIELD, UpamGame, UpamGameAttributes
from .translator import translate_upam_document, translate_upam_game

__all__ = [
    "UPAM_RECORDS_FIELD",
    "UpamGame",
    "UpamGameAttributes",
    "translate_upam_document",
    "translate_upam_game",
]
