"""Source adapters: one per upstream schema, all converging on ``CanonicalRecord``."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from gamerecon.domain.model import SourceName

from .cms import translate_cms_document
from .content_hub import translate_content_hub_document
from .upam import translate_upam_document

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gamerecon.domain.model import CanonicalRecord
    from gamerecon.domain.ports import SourceAdapter


ADAPTERS: Mapping[SourceName, SourceAdapter] = MappingProxyType(
    {
        SourceName.CMS: translate_cms_document,
        SourceName.CONTENT_HUB: translate_content_hub_document,
        SourceName.UPAM: translate_upam_document,
    }
)


def adapt(source: SourceName, document: object) -> tuple[CanonicalRecord, ...]:
    """Translate ``document`` with the adapter registered for ``source``."""

    return ADAPTERS[source](document)


__all__ = ["ADAPTERS", "adapt"]
