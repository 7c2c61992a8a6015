"""Documents persisted by the store and exchanged over the API."""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null fields fall back to their zero value
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Channel(_Document):
    """A single playable stream."""

    id: str = ""
    name: str = ""
    url: str = ""
    group: str = ""
    logo: str = ""
    added_at: StrictInt = Field(0, alias="addedAt")


class Playlist(_Document):
    id: str = ""
    name: str = ""
    channels: List[Channel] = Field(default_factory=list)
    created_at: StrictInt = Field(0, alias="createdAt")


class Store(_Document):
    """Root document: playlists in display order, history most-recent-first."""

    playlists: List[Playlist] = Field(default_factory=list)
    history: List[Channel] = Field(default_factory=list)
