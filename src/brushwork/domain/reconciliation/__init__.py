"""Reconciliation of the three catalog sources into persisted episodes.

Flow:
1) seed episodes from material records (normalized title is the key)
2) attach broadcast dates and tags to existing episodes
3) persist dated episodes, vocabularies and links in one transaction
"""

from __future__ import annotations

from .engine import ReconciliationEngine, ReconciliationResult, reconcile
from .parsing import parse_broadcast_date, parse_material_list
from .persist import PersistenceResult, collect_vocabulary, persist_catalog

__all__ = [
    "PersistenceResult",
    "ReconciliationEngine",
    "ReconciliationResult",
    "collect_vocabulary",
    "parse_broadcast_date",
    "parse_material_list",
    "persist_catalog",
    "reconcile",
]
