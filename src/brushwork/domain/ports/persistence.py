"""Ports for persisting and querying the episode catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from brushwork.domain.filtering.plan import QueryPlan
    from brushwork.domain.model import Episode, EpisodeView, VocabularyKind


@runtime_checkable
class VocabularyRepository(Protocol):
    """Master lists of material and tag names."""

    def upsert(self, kind: VocabularyKind, name: str) -> None:
        """Insert ``name`` unless it already exists."""
        ...

    def ids_by_name(self, kind: VocabularyKind) -> dict[str, int]: ...

    def names(self, kind: VocabularyKind) -> list[str]:
        """Return all names of ``kind`` in alphabetical order."""
        ...


@runtime_checkable
class EpisodeRepository(Protocol):
    """Write side of the episode table and its junction tables."""

    def clear(self) -> int: ...

    def insert(self, episode: Episode) -> int:
        """Insert ``episode`` and return its id; dated episodes only."""
        ...

    def link(self, episode_id: int, vocabulary_id: int, kind: VocabularyKind) -> None:
        """Associate an episode with a vocabulary entry; existing links are ignored."""
        ...


@runtime_checkable
class EpisodeQueryRepository(Protocol):
    """Read side: evaluate a query plan against persisted episodes."""

    def filter(self, plan: QueryPlan) -> list[EpisodeView]: ...
