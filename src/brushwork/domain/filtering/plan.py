"""Query plan value produced by the filter composer.

A plan is an ordered tuple of independent sub-predicates, each selecting a set
of episode ids, plus the combinator applied across those sets. Storage adapters
translate it into their own query language.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from brushwork.domain.model import MatchMode, VocabularyKind


class Combinator(StrEnum):
    INTERSECT = "intersect"
    UNION = "union"

    @classmethod
    def for_mode(cls, mode: MatchMode) -> Combinator:
        return cls.INTERSECT if mode is MatchMode.ALL else cls.UNION


@dataclass(frozen=True, slots=True)
class MonthPredicate:
    """Broadcast month is one of ``months``."""

    months: frozenset[int]


@dataclass(frozen=True, slots=True)
class LinkPredicate:
    """Episode is linked to vocabulary entries named in ``names``.

    With ``require_all`` the episode must be linked to every name (the number of
    distinct matching links equals ``len(names)``); otherwise one is enough.
    """

    kind: VocabularyKind
    names: frozenset[str]
    require_all: bool

    @property
    def required_count(self) -> int:
        return len(self.names) if self.require_all else 1


type SubPredicate = MonthPredicate | LinkPredicate


@dataclass(frozen=True, slots=True)
class QueryPlan:
    predicates: tuple[SubPredicate, ...]
    combinator: Combinator

    def __post_init__(self) -> None:
        if not self.predicates:
            raise ValueError("Query plan requires at least one predicate")
