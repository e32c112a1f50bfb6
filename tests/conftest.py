from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.pool import StaticPool

from brushwork.adapters.sqlalchemy import Database, SqlAlchemyUnitOfWork, startup

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def database(sqlite_engine: Engine) -> Database:
    return startup(engine=sqlite_engine)


@pytest.fixture
def sqlite_unit_of_work(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    return database.unit_of_work
