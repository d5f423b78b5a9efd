"""Public interface for the CMS adapter."""

from __future__ import annotations

from .schema import CMS_RECORDS_FIELD, CmsGame
from .translator import translate_cms_document, translate_cms_game

__all__ = [
    "CMS_RECORDS_FIELD",
    "CmsGame",
    "translate_cms_document",
    "translate_cms_game",
]
