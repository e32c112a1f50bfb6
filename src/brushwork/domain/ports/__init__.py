"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import EpisodeQueryRepository, EpisodeRepository, VocabularyRepository
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "EpisodeQueryRepository",
    "EpisodeRepository",
    "RepositoryCollection",
    "UnitOfWork",
    "VocabularyRepository",
]
