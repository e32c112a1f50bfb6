from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from brushwork.domain.filtering import FilterRequest, build_query_plan, evaluate_plan
from tests.helpers.catalog import seed_catalog

if TYPE_CHECKING:
    from collections.abc import Callable

    from brushwork.adapters.sqlalchemy import SqlAlchemyUnitOfWork
    from brushwork.domain.model import EpisodeView


@pytest.fixture
def seeded(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    seed_catalog(sqlite_unit_of_work)
    return sqlite_unit_of_work


def _titles(uow_factory: Callable[[], SqlAlchemyUnitOfWork], request: FilterRequest) -> list[str]:
    with uow_factory() as uow:
        return [view.title for view in uow.repositories.queries.filter(build_query_plan(request))]


def _catalog(uow_factory: Callable[[], SqlAlchemyUnitOfWork]) -> list[EpisodeView]:
    with uow_factory() as uow:
        return uow.repositories.queries.filter(
            build_query_plan(FilterRequest(months=frozenset(range(1, 13))))
        )


@pytest.mark.parametrize(
    ("request_", "expected"),
    [
        (
            FilterRequest(tags=frozenset({"TREE", "RIVER"}), mode="all"),
            ["A WALK IN THE WOODS", "WINTER MIST"],
        ),
        (
            FilterRequest(tags=frozenset({"MOUNTAIN", "SUN"}), mode="any"),
            ["MOUNT MCKINLEY", "EBONY SUNSET"],
        ),
        (
            FilterRequest(months=frozenset({1}), tags=frozenset({"SNOW"}), mode="all"),
            [],
        ),
        (
            FilterRequest(months=frozenset({1}), tags=frozenset({"SNOW"}), mode="any"),
            ["A WALK IN THE WOODS", "MOUNT MCKINLEY", "WINTER MIST"],
        ),
        (
            FilterRequest(
                months=frozenset({2}),
                materials=frozenset({"Titanium White", "Van Dyke Brown"}),
            ),
            ["WINTER MIST"],
        ),
        (
            FilterRequest(
                tags=frozenset({"TREE"}),
                materials=frozenset({"Alizarin Crimson"}),
                mode="any",
            ),
            ["A WALK IN THE WOODS", "MOUNT MCKINLEY", "EBONY SUNSET", "WINTER MIST"],
        ),
    ],
)
def test_filter_results(
    seeded: Callable[[], SqlAlchemyUnitOfWork],
    request_: FilterRequest,
    expected: list[str],
) -> None:
    assert _titles(seeded, request_) == expected


@pytest.mark.parametrize("mode", ["all", "any"])
@pytest.mark.parametrize(
    "criteria",
    [
        {"months": frozenset({1, 2})},
        {"tags": frozenset({"TREE", "SNOW"})},
        {"materials": frozenset({"Van Dyke Brown"}), "tags": frozenset({"MOUNTAIN"})},
        {
            "months": frozenset({2}),
            "tags": frozenset({"TREE"}),
            "materials": frozenset({"Titanium White"}),
        },
    ],
)
def test_sql_translation_agrees_with_in_memory_evaluation(
    seeded: Callable[[], SqlAlchemyUnitOfWork],
    criteria: dict[str, frozenset[str] | frozenset[int]],
    mode: str,
) -> None:
    request = FilterRequest(mode=mode, **criteria)  # type: ignore[arg-type]
    catalog = _catalog(seeded)

    expected = [view.title for view in evaluate_plan(build_query_plan(request), catalog)]

    assert _titles(seeded, request) == expected


def test_unknown_names_match_nothing(seeded: Callable[[], SqlAlchemyUnitOfWork]) -> None:
    assert _titles(seeded, FilterRequest(tags=frozenset({"TREE", "VOLCANO"}))) == []
    assert _titles(seeded, FilterRequest(materials=frozenset({"Sap Green"}), mode="any")) == []


def test_results_are_ordered_by_season_and_episode(
    seeded: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    assert _titles(seeded, FilterRequest(materials=frozenset({"Titanium White"}))) == [
        "A WALK IN THE WOODS",
        "MOUNT MCKINLEY",
        "WINTER MIST",
    ]
