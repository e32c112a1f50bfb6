from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from brushwork.domain.filtering import FilterRequest, build_query_plan
from brushwork.domain.model import VocabularyKind
from tests.helpers.catalog import make_episode, seed_catalog

if TYPE_CHECKING:
    from collections.abc import Callable

    from brushwork.adapters.sqlalchemy import SqlAlchemyUnitOfWork


def test_vocabulary_upsert_ignores_existing_names(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        vocabularies = uow.repositories.vocabularies
        vocabularies.upsert(VocabularyKind.TAG, "TREE")
        vocabularies.upsert(VocabularyKind.TAG, "TREE")
        vocabularies.upsert(VocabularyKind.TAG, "RIVER")
        vocabularies.upsert(VocabularyKind.MATERIAL, "TREE")
        uow.commit()

    with sqlite_unit_of_work() as uow:
        vocabularies = uow.repositories.vocabularies
        assert vocabularies.names(VocabularyKind.TAG) == ["RIVER", "TREE"]
        assert vocabularies.names(VocabularyKind.MATERIAL) == ["TREE"]
        assert set(vocabularies.ids_by_name(VocabularyKind.TAG)) == {"RIVER", "TREE"}


def test_episode_insert_requires_a_broadcast_date(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow, pytest.raises(ValueError, match="no broadcast date"):
        uow.repositories.episodes.insert(make_episode("UNDATED", broadcast_date=None))


def test_links_are_idempotent_and_clear_removes_them(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.vocabularies.upsert(VocabularyKind.TAG, "TREE")
        (tag_id,) = uow.repositories.vocabularies.ids_by_name(VocabularyKind.TAG).values()
        episodes = uow.repositories.episodes
        episode_id = episodes.insert(make_episode("WINTER MIST", broadcast_date=date(1983, 2, 8)))
        episodes.link(episode_id, tag_id, VocabularyKind.TAG)
        episodes.link(episode_id, tag_id, VocabularyKind.TAG)
        uow.commit()

    plan = build_query_plan(FilterRequest(tags=frozenset({"TREE"})))
    with sqlite_unit_of_work() as uow:
        (view,) = uow.repositories.queries.filter(plan)
        assert view.tags == ("TREE",)
        assert uow.repositories.episodes.clear() == 1
        assert uow.repositories.queries.filter(plan) == []


def test_filter_hydrates_sorted_names(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    seed_catalog(sqlite_unit_of_work)
    plan = build_query_plan(FilterRequest(months=frozenset({2})))

    with sqlite_unit_of_work() as uow:
        views = uow.repositories.queries.filter(plan)

    assert [view.title for view in views] == ["EBONY SUNSET", "WINTER MIST"]
    winter = views[1]
    assert winter.broadcast_date == date(1983, 2, 8)
    assert (winter.season, winter.episode_number) == (2, 1)
    assert winter.materials == ("Titanium White", "Van Dyke Brown")
    assert winter.tags == ("RIVER", "SNOW", "TREE")
