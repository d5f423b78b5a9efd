"""Pydantic models describing UPAM entitlement payloads.

UPAM wraps each game in a JSON:API style envelope; only ``attributes`` is
relevant for reconciliation.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gamerecon.adapters.documents import coerce_display_name, coerce_game_id, none_to_false

UPAM_RECORDS_FIELD: Final[str] = "data"
UPAM_ENVELOPE_FIELD: Final[str] = "attributes"


class UpamBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class UpamGameAttributes(UpamBaseModel):
    external_game_id: str = Field(alias="externalGameId", min_length=1)
    name: str = ""
    enabled: bool = False

    _coerce_game_id = field_validator("external_game_id", mode="before")(coerce_game_id)
    _coerce_name = field_validator("name", mode="before")(coerce_display_name)
    _default_disabled = field_validator("enabled", mode="before")(none_to_false)


class UpamGame(UpamBaseModel):
    attributes: UpamGameAttributes
