"""SQLAlchemy table metadata for the episode catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
)

from brushwork.domain.model import VocabularyKind

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# Core tables -----------------------------------------------------------------

episode_table = Table(
    "episode",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String, nullable=False, unique=True),
    Column("season", Integer, nullable=False),
    Column("episode_number", Integer, nullable=False),
    Column("broadcast_date", Date, nullable=False),
)

material_table = Table(
    "material",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
)

tag_table = Table(
    "tag",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
)

# Junction tables -------------------------------------------------------------

episode_material_table = Table(
    "episode_material",
    metadata,
    Column(
        "episode_id", Integer, ForeignKey("episode.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "material_id", Integer, ForeignKey("material.id", ondelete="CASCADE"), primary_key=True
    ),
)

episode_tag_table = Table(
    "episode_tag",
    metadata,
    Column(
        "episode_id", Integer, ForeignKey("episode.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("tag_id", Integer, ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True),
)


@dataclass(frozen=True, slots=True)
class VocabularyTables:
    """Vocabulary table plus the junction table linking it to episodes."""

    vocabulary: Table
    link: Table
    link_column: str


VOCABULARY_TABLES: Final[dict[VocabularyKind, VocabularyTables]] = {
    VocabularyKind.MATERIAL: VocabularyTables(
        vocabulary=material_table,
        link=episode_material_table,
        link_column="material_id",
    ),
    VocabularyKind.TAG: VocabularyTables(
        vocabulary=tag_table,
        link=episode_tag_table,
        link_column="tag_id",
    ),
}


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the catalog metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
