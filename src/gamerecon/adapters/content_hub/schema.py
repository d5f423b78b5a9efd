"""Pydantic models describing Content Hub (IWG) game lists."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gamerecon.adapters.documents import coerce_display_name, coerce_game_id, none_to_false

CONTENT_HUB_RECORDS_FIELD: Final[str] = "gameList"


class ContentHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ContentHubGame(ContentHubBaseModel):
    game_id: str = Field(alias="gameID", min_length=1)
    title: str = ""
    is_active: bool = Field(default=False, alias="isActive")

    _coerce_game_id = field_validator("game_id", mode="before")(coerce_game_id)
    _coerce_title = field_validator("title", mode="before")(coerce_display_name)
    _default_inactive = field_validator("is_active", mode="before")(none_to_false)
