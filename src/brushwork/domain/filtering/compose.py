"""Turn optional filter criteria into a query plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from brushwork.domain.errors import InvalidRequestError
from brushwork.domain.model import MatchMode, VocabularyKind

from .plan import Combinator, LinkPredicate, MonthPredicate, QueryPlan, SubPredicate

VALID_MONTHS: Final[range] = range(1, 13)


@dataclass(frozen=True, slots=True, kw_only=True)
class FilterRequest:
    """Filter criteria as delivered by a transport; empty sets are inactive."""

    months: frozenset[int] = field(default_factory=frozenset[int])
    tags: frozenset[str] = field(default_factory=frozenset[str])
    materials: frozenset[str] = field(default_factory=frozenset[str])
    mode: str = MatchMode.ALL.value

    @property
    def is_empty(self) -> bool:
        return not (self.months or self.tags or self.materials)


def parse_mode(value: str) -> MatchMode:
    try:
        return MatchMode(value)
    except ValueError:
        raise InvalidRequestError(
            f"mode must be {MatchMode.ANY.value!r} or {MatchMode.ALL.value!r}, got {value!r}"
        ) from None


def build_query_plan(request: FilterRequest) -> QueryPlan:
    """Validate ``request`` and compile it into a plan.

    The single ``mode`` drives both matching inside the tag and material
    dimensions and the combination across dimensions.
    """

    if request.is_empty:
        raise InvalidRequestError(
            "At least one filter (months, tags, materials) must be provided."
        )
    mode = parse_mode(request.mode)
    invalid_months = sorted(month for month in request.months if month not in VALID_MONTHS)
    if invalid_months:
        raise InvalidRequestError(f"months must be between 1 and 12, got {invalid_months}")

    require_all = mode is MatchMode.ALL
    predicates: list[SubPredicate] = []
    if request.months:
        predicates.append(MonthPredicate(months=frozenset(request.months)))
    if request.tags:
        predicates.append(
            LinkPredicate(
                kind=VocabularyKind.TAG,
                names=frozenset(request.tags),
                require_all=require_all,
            )
        )
    if request.materials:
        predicates.append(
            LinkPredicate(
                kind=VocabularyKind.MATERIAL,
                names=frozenset(request.materials),
                require_all=require_all,
            )
        )
    return QueryPlan(predicates=tuple(predicates), combinator=Combinator.for_mode(mode))
