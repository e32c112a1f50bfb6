"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite

from brushwork.adapters.sqlalchemy.mappings import VOCABULARY_TABLES, episode_table
from brushwork.adapters.sqlalchemy.query import matching_ids_select
from brushwork.domain.model import EpisodeView, VocabularyKind

if TYPE_CHECKING:
    from sqlalchemy import Select, Table
    from sqlalchemy.orm import Session

    from brushwork.domain.filtering import QueryPlan
    from brushwork.domain.model import Episode

log = logging.getLogger(__name__)


def insert_ignoring_conflicts(session: Session, table: Table, values: dict[str, Any]) -> None:
    """Insert a row unless it collides with an existing unique key."""

    dialect = session.get_bind().dialect.name
    if dialect == "sqlite":
        session.execute(sqlite.insert(table).values(**values).on_conflict_do_nothing())
        return
    if dialect == "postgresql":
        session.execute(postgresql.insert(table).values(**values).on_conflict_do_nothing())
        return
    stmt = select(table).filter_by(**values).limit(1)
    if session.execute(stmt).first() is None:
        session.execute(table.insert().values(**values))


class SqlAlchemyVocabularyRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def upsert(self, kind: VocabularyKind, name: str) -> None:
        insert_ignoring_conflicts(self.session, VOCABULARY_TABLES[kind].vocabulary, {"name": name})

    def ids_by_name(self, kind: VocabularyKind) -> dict[str, int]:
        table = VOCABULARY_TABLES[kind].vocabulary
        rows = self.session.execute(select(table.c.name, table.c.id)).all()
        return {name: vocabulary_id for name, vocabulary_id in rows}

    def names(self, kind: VocabularyKind) -> list[str]:
        table = VOCABULARY_TABLES[kind].vocabulary
        return list(self.session.execute(select(table.c.name).order_by(table.c.name)).scalars())


class SqlAlchemyEpisodeRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def clear(self) -> int:
        for tables in VOCABULARY_TABLES.values():
            self.session.execute(delete(tables.link))
        result = self.session.execute(delete(episode_table))
        return cast(int, result.rowcount or 0)  # pyright: ignore[reportAttributeAccessIssue]

    def insert(self, episode: Episode) -> int:
        if episode.broadcast_date is None:
            raise ValueError(f"Episode {episode.title!r} has no broadcast date")
        result = self.session.execute(
            episode_table.insert().values(
                title=episode.title,
                season=episode.season,
                episode_number=episode.episode_number,
                broadcast_date=episode.broadcast_date,
            )
        )
        (episode_id,) = result.inserted_primary_key or (None,)
        if episode_id is None:
            raise RuntimeError(f"Insert for episode {episode.title!r} returned no id")
        return int(episode_id)

    def link(self, episode_id: int, vocabulary_id: int, kind: VocabularyKind) -> None:
        tables = VOCABULARY_TABLES[kind]
        insert_ignoring_conflicts(
            self.session,
            tables.link,
            {"episode_id": episode_id, tables.link_column: vocabulary_id},
        )


class SqlAlchemyEpisodeQueryRepository:
    """Evaluate query plans and hydrate the matching episodes."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def filter(self, plan: QueryPlan) -> list[EpisodeView]:
        matched = matching_ids_select(plan)
        stmt = (
            select(episode_table)
            .where(episode_table.c.id.in_(matched))
            .order_by(
                episode_table.c.season,
                episode_table.c.episode_number,
                episode_table.c.id,
            )
        )
        rows = self.session.execute(stmt).all()
        log.debug(
            "Query plan with %s predicates matched %s episodes", len(plan.predicates), len(rows)
        )
        if not rows:
            return []
        materials = self._names_by_episode(VocabularyKind.MATERIAL, matched)
        tags = self._names_by_episode(VocabularyKind.TAG, matched)
        return [
            EpisodeView(
                id=row.id,
                title=row.title,
                season=row.season,
                episode_number=row.episode_number,
                broadcast_date=row.broadcast_date,
                materials=tuple(materials.get(row.id, ())),
                tags=tuple(tags.get(row.id, ())),
            )
            for row in rows
        ]

    def _names_by_episode(
        self, kind: VocabularyKind, matched: Select[tuple[int]]
    ) -> dict[int, list[str]]:
        tables = VOCABULARY_TABLES[kind]
        link, vocabulary = tables.link, tables.vocabulary
        stmt = (
            select(link.c.episode_id, vocabulary.c.name)
            .join(vocabulary, link.c[tables.link_column] == vocabulary.c.id)
            .where(link.c.episode_id.in_(matched))
            .distinct()
            .order_by(link.c.episode_id, vocabulary.c.name)
        )
        names: defaultdict[int, list[str]] = defaultdict(list)
        for episode_id, name in self.session.execute(stmt):
            names[episode_id].append(name)
        return names


if TYPE_CHECKING:
    from brushwork.domain.ports.persistence import (
        EpisodeQueryRepository,
        EpisodeRepository,
        VocabularyRepository,
    )

    _session_stub = cast("Session", object())
    _vocabulary_check: VocabularyRepository = SqlAlchemyVocabularyRepository(_session_stub)
    _episode_check: EpisodeRepository = SqlAlchemyEpisodeRepository(_session_stub)
    _query_check: EpisodeQueryRepository = SqlAlchemyEpisodeQueryRepository(_session_stub)
