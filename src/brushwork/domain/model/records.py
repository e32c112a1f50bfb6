"""Typed source records, one variant per source kind.

Adapters validate raw rows into these before the reconciliation engine sees
them. Fields the engine parses itself (dates, material lists) stay raw.
"""

from __future__ import annotations

from collections.abc import Mapping  # noqa: TC003
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DateRecord:
    raw_title: str
    raw_date: str


@dataclass(frozen=True, slots=True)
class MaterialRecord:
    raw_title: str
    season: int
    episode_number: int
    colors_field: str


@dataclass(frozen=True, slots=True)
class TagRecord:
    raw_title: str
    flags: Mapping[str, str] = field(default_factory=dict[str, str])

