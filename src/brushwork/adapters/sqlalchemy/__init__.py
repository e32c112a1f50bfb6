"""SQLAlchemy adapter package for Brushwork."""

from __future__ import annotations

from .mappings import (
    VOCABULARY_TABLES,
    create_all_tables,
    episode_material_table,
    episode_table,
    episode_tag_table,
    material_table,
    metadata,
    tag_table,
)
from .query import matching_ids_select, predicate_select
from .repositories import (
    SqlAlchemyEpisodeQueryRepository,
    SqlAlchemyEpisodeRepository,
    SqlAlchemyVocabularyRepository,
)
from .unit_of_work import Database, SqlAlchemyUnitOfWork, StartupError, startup

__all__ = [
    "VOCABULARY_TABLES",
    "Database",
    "SqlAlchemyEpisodeQueryRepository",
    "SqlAlchemyEpisodeRepository",
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyVocabularyRepository",
    "StartupError",
    "create_all_tables",
    "episode_material_table",
    "episode_table",
    "episode_tag_table",
    "matching_ids_select",
    "material_table",
    "metadata",
    "predicate_select",
    "startup",
    "tag_table",
]
