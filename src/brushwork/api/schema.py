"""Response models for the catalog API."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from brushwork.domain.model import EpisodeView


class ApiBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class EpisodeResponse(ApiBaseModel):
    id: int
    title: str
    season: int
    episode_number: int = Field(alias="episodeNumber")
    broadcast_date: date | None = Field(default=None, alias="broadcastDate")
    materials: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: EpisodeView) -> EpisodeResponse:
        return cls(
            id=view.id,
            title=view.title,
            season=view.season,
            episode_number=view.episode_number,
            broadcast_date=view.broadcast_date,
            materials=list(view.materials),
            tags=list(view.tags),
        )


class ErrorResponse(ApiBaseModel):
    error: str
    details: str | None = None
