"""Pydantic models describing CMS catalog exports."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gamerecon.adapters.documents import coerce_display_name, coerce_game_id, none_to_false

CMS_RECORDS_FIELD: Final[str] = "results"


class CmsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CmsGame(CmsBaseModel):
    game_id: str = Field(alias="gameId", min_length=1)
    name: str = ""
    is_hidden: bool = Field(default=False, alias="isHidden")

    _coerce_game_id = field_validator("game_id", mode="before")(coerce_game_id)
    _coerce_name = field_validator("name", mode="before")(coerce_display_name)
    _default_visible = field_validator("is_hidden", mode="before")(none_to_false)
