"""Evaluate a query plan against episodes held in memory."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING

from brushwork.domain.model import VocabularyKind

from .plan import Combinator, LinkPredicate, MonthPredicate, SubPredicate

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from brushwork.domain.model import EpisodeView

    from .plan import QueryPlan


def _matches(predicate: SubPredicate, episode: EpisodeView) -> bool:
    match predicate:
        case MonthPredicate(months=months):
            return episode.broadcast_date is not None and episode.broadcast_date.month in months
        case LinkPredicate(kind=kind, names=names):
            linked = set(episode.materials if kind is VocabularyKind.MATERIAL else episode.tags)
            return len(linked & names) >= predicate.required_count


def matching_ids(predicate: SubPredicate, episodes: Iterable[EpisodeView]) -> set[int]:
    return {episode.id for episode in episodes if _matches(predicate, episode)}


def evaluate_plan(plan: QueryPlan, episodes: Sequence[EpisodeView]) -> list[EpisodeView]:
    """Return the episodes selected by ``plan`` ordered by season and episode number."""

    id_sets = [matching_ids(predicate, episodes) for predicate in plan.predicates]
    if plan.combinator is Combinator.INTERSECT:
        selected = reduce(set.intersection, id_sets)
    else:
        selected = reduce(set.union, id_sets)
    return sorted(
        (episode for episode in episodes if episode.id in selected),
        key=lambda episode: (episode.season, episode.episode_number),
    )
