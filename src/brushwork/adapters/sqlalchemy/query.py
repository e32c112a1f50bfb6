"""Translate query plans into SQLAlchemy selects.

Every sub-predicate becomes a ``SELECT episode_id``; the plan's combinator joins
them with ``INTERSECT`` or ``UNION``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import distinct, extract, func, intersect, select, union

from brushwork.adapters.sqlalchemy.mappings import VOCABULARY_TABLES, episode_table
from brushwork.domain.filtering import Combinator, LinkPredicate, MonthPredicate

if TYPE_CHECKING:
    from sqlalchemy import CompoundSelect, Select

    from brushwork.domain.filtering import QueryPlan, SubPredicate

EPISODE_ID = "episode_id"


def predicate_select(predicate: SubPredicate) -> Select[tuple[int]]:
    match predicate:
        case MonthPredicate(months=months):
            return select(episode_table.c.id.label(EPISODE_ID)).where(
                extract("month", episode_table.c.broadcast_date).in_(sorted(months))
            )
        case LinkPredicate(kind=kind, names=names, require_all=require_all):
            tables = VOCABULARY_TABLES[kind]
            link, vocabulary = tables.link, tables.vocabulary
            stmt = (
                select(link.c.episode_id.label(EPISODE_ID))
                .join(vocabulary, link.c[tables.link_column] == vocabulary.c.id)
                .where(vocabulary.c.name.in_(sorted(names)))
            )
            if require_all:
                stmt = stmt.group_by(link.c.episode_id).having(
                    func.count(distinct(vocabulary.c.name)) == len(names)
                )
            return stmt


def matching_ids_select(plan: QueryPlan) -> Select[tuple[int]]:
    """Return a select of the episode ids satisfying ``plan``."""

    selects = [predicate_select(predicate) for predicate in plan.predicates]
    if len(selects) == 1:
        return selects[0]
    compound: CompoundSelect
    if plan.combinator is Combinator.INTERSECT:
        compound = intersect(*selects)
    else:
        compound = union(*selects)
    matches = compound.subquery("matches")
    return select(matches.c[EPISODE_ID])


__all__ = ["matching_ids_select", "predicate_select"]
