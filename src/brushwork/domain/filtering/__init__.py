"""Multi-dimensional episode filtering."""

from __future__ import annotations

from .compose import FilterRequest, build_query_plan, parse_mode
from .evaluate import evaluate_plan, matching_ids
from .plan import Combinator, LinkPredicate, MonthPredicate, QueryPlan, SubPredicate

__all__ = [
    "Combinator",
    "FilterRequest",
    "LinkPredicate",
    "MonthPredicate",
    "QueryPlan",
    "SubPredicate",
    "build_query_plan",
    "evaluate_plan",
    "matching_ids",
    "parse_mode",
]
