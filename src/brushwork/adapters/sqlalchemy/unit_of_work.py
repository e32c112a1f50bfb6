"""SQLAlchemy-backed storage handle and unit of work for the catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from brushwork.adapters.sqlalchemy.mappings import create_all_tables
from brushwork.adapters.sqlalchemy.repositories import (
    SqlAlchemyEpisodeQueryRepository,
    SqlAlchemyEpisodeRepository,
    SqlAlchemyVocabularyRepository,
)
from brushwork.config import DatabaseConfig, get_database_config
from brushwork.domain.errors import StorageError
from brushwork.domain.ports.unit_of_work import CatalogRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when a SQLAlchemy unit of work is used outside its context."""


@dataclass(slots=True)
class Database:
    """Engine plus session factory, passed explicitly to whoever needs storage."""

    engine: Engine
    session_factory: sessionmaker[Session] = field(init=False)

    def __post_init__(self) -> None:
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def unit_of_work(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self.session_factory)

    def dispose(self) -> None:
        self.engine.dispose()


def _create_engine(database_uri: str | None) -> Engine:
    config = DatabaseConfig(uri=database_uri) if database_uri else get_database_config()
    # the API serves requests from a thread pool
    connect_args = {"check_same_thread": False} if config.is_sqlite else {}
    return create_engine(config.uri, echo=config.echo, connect_args=connect_args, future=True)


def startup(*, engine: Engine | None = None, database_uri: str | None = None) -> Database:
    """Create the engine (unless given), ensure the schema exists and return a handle."""

    resolved_engine = engine or _create_engine(database_uri)
    try:
        create_all_tables(resolved_engine)
    except SQLAlchemyError as exc:
        raise StorageError(f"Could not initialise database: {exc}") from exc
    log.info("Database ready: %s", resolved_engine.url.render_as_string(hide_password=True))
    return Database(resolved_engine)


class SqlAlchemyUnitOfWork:
    """One session and transaction around the catalog repositories.

    Any exit with an exception rolls back; the session is always closed.
    SQLAlchemy errors leave the block as ``StorageError``.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self._session: Session | None = None
        self._repositories: CatalogRepositories | None = None

    def _build_repositories(self, session: Session) -> CatalogRepositories:
        return CatalogRepositories(
            vocabularies=SqlAlchemyVocabularyRepository(session),
            episodes=SqlAlchemyEpisodeRepository(session),
            queries=SqlAlchemyEpisodeQueryRepository(session),
        )

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = self.session_factory()
        self._repositories = self._build_repositories(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        try:
            if exc_type is not None:
                self.rollback()
        finally:
            self.session.close()
            self._session = None
            self._repositories = None
        if isinstance(exc_value, SQLAlchemyError):
            raise StorageError(str(exc_value)) from exc_value
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> CatalogRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session


if TYPE_CHECKING:
    from brushwork.domain.ports.unit_of_work import CatalogUnitOfWork

    _uow_check: CatalogUnitOfWork = SqlAlchemyUnitOfWork(sessionmaker())
