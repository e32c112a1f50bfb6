from __future__ import annotations

from datetime import date

import pytest

from brushwork.domain.filtering import (
    FilterRequest,
    MonthPredicate,
    build_query_plan,
    evaluate_plan,
    matching_ids,
)
from brushwork.domain.model import EpisodeView
from tests.helpers.catalog import make_view


@pytest.fixture
def views() -> list[EpisodeView]:
    return [
        make_view(1, broadcast_date=date(1983, 1, 11), tags=("X", "Y")),
        make_view(2, broadcast_date=date(1983, 1, 18), tags=("X",)),
        make_view(3, broadcast_date=date(1983, 2, 1), tags=("Y",)),
        make_view(4, broadcast_date=date(1983, 3, 1), tags=()),
    ]


def _ids(request: FilterRequest, views: list[EpisodeView]) -> list[int]:
    return [view.id for view in evaluate_plan(build_query_plan(request), views)]


def test_all_mode_requires_every_tag(views: list[EpisodeView]) -> None:
    assert _ids(FilterRequest(tags=frozenset({"X", "Y"}), mode="all"), views) == [1]


def test_any_mode_accepts_either_tag(views: list[EpisodeView]) -> None:
    assert _ids(FilterRequest(tags=frozenset({"X", "Y"}), mode="any"), views) == [1, 2, 3]


def test_month_and_tag_intersect_in_all_mode(views: list[EpisodeView]) -> None:
    request = FilterRequest(months=frozenset({1}), tags=frozenset({"Y"}), mode="all")

    assert _ids(request, views) == [1]


def test_month_and_tag_union_in_any_mode(views: list[EpisodeView]) -> None:
    request = FilterRequest(months=frozenset({1}), tags=frozenset({"Y"}), mode="any")

    assert _ids(request, views) == [1, 2, 3]


def test_unknown_names_match_nothing(views: list[EpisodeView]) -> None:
    assert _ids(FilterRequest(tags=frozenset({"X", "NOPE"})), views) == []
    assert _ids(FilterRequest(tags=frozenset({"NOPE"}), mode="any"), views) == []


def test_month_predicate_ignores_undated_views() -> None:
    views = [make_view(1, broadcast_date=None), make_view(2, broadcast_date=date(1983, 1, 4))]

    assert matching_ids(MonthPredicate(months=frozenset({1})), views) == {2}


def test_results_are_ordered_by_season_then_episode() -> None:
    views = [
        make_view(1, season=2, episode_number=1, tags=("X",)),
        make_view(2, season=1, episode_number=13, tags=("X",)),
        make_view(3, season=1, episode_number=2, tags=("X",)),
    ]

    assert _ids(FilterRequest(tags=frozenset({"X"})), views) == [3, 2, 1]
