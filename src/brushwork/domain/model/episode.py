"""Episode entities: the merged in-memory form and the persisted read model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(eq=False, kw_only=True)
class Episode:
    """Unified episode assembled from material, date and tag contributions.

    ``title`` is the normalized title and acts as identity during a batch.
    """

    title: str
    season: int
    episode_number: int
    broadcast_date: date | None = None
    materials: set[str] = field(default_factory=set[str])
    tags: set[str] = field(default_factory=set[str])

    @property
    def is_dated(self) -> bool:
        return self.broadcast_date is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class EpisodeView:
    """Persisted episode as returned by catalog queries."""

    id: int
    title: str
    season: int
    episode_number: int
    broadcast_date: date | None
    materials: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
