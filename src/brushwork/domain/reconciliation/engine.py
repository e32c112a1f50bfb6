"""Merge the three catalog sources into episodes keyed by normalized title.

Material records define which episodes exist. Date and tag records only
decorate episodes that already exist, so they are applied after every material
record has been seen and their relative order does not matter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from brushwork.domain.model import (
    DateRecord,
    Diagnostic,
    Episode,
    MaterialRecord,
    SourceKind,
    TagRecord,
    malformed,
    orphan,
)
from brushwork.domain.titles import normalize_title

from .parsing import parse_broadcast_date, parse_material_list

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

FLAG_MARKER = "1"


@dataclass(slots=True)
class ReconciliationResult:
    """Merged episodes in material first-seen order, plus batch diagnostics."""

    episodes: list[Episode] = field(default_factory=list[Episode])
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])

    @property
    def dated(self) -> list[Episode]:
        return [episode for episode in self.episodes if episode.is_dated]

    @property
    def undated(self) -> list[Episode]:
        return [episode for episode in self.episodes if not episode.is_dated]


@dataclass(slots=True)
class ReconciliationEngine:
    """Single-pass, in-memory merge of one batch."""

    flag_marker: str = FLAG_MARKER

    def reconcile(
        self,
        *,
        materials: Iterable[MaterialRecord],
        dates: Iterable[DateRecord] = (),
        tags: Iterable[TagRecord] = (),
    ) -> ReconciliationResult:
        diagnostics: list[Diagnostic] = []
        by_title = self._seed(materials, diagnostics)
        self._attach_dates(by_title, dates, diagnostics)
        self._attach_tags(by_title, tags, diagnostics)
        log.info(
            "Merged %s episodes (%s undated), %s diagnostics",
            len(by_title),
            sum(1 for episode in by_title.values() if not episode.is_dated),
            len(diagnostics),
        )
        return ReconciliationResult(episodes=list(by_title.values()), diagnostics=diagnostics)

    def _seed(
        self,
        records: Iterable[MaterialRecord],
        diagnostics: list[Diagnostic],
    ) -> dict[str, Episode]:
        by_title: dict[str, Episode] = {}
        for record in records:
            title = normalize_title(record.raw_title)
            try:
                names = parse_material_list(record.colors_field)
            except ValueError as exc:
                log.warning("Could not parse materials for title %r: %s", title, exc)
                diagnostics.append(
                    malformed(SourceKind.MATERIALS, title, record.colors_field, str(exc))
                )
                names = []
            if title in by_title:
                log.debug("Material record for %r replaces an earlier one", title)
            by_title[title] = Episode(
                title=title,
                season=record.season,
                episode_number=record.episode_number,
                materials=set(names),
            )
        return by_title

    def _attach_dates(
        self,
        by_title: dict[str, Episode],
        records: Iterable[DateRecord],
        diagnostics: list[Diagnostic],
    ) -> None:
        for record in records:
            title = normalize_title(record.raw_title)
            episode = by_title.get(title)
            if episode is None:
                log.debug("Dropping date record without episode: %r", title)
                diagnostics.append(orphan(SourceKind.DATES, title))
                continue
            try:
                episode.broadcast_date = parse_broadcast_date(record.raw_date)
            except ValueError as exc:
                log.warning("Could not parse broadcast date for title %r: %s", title, exc)
                diagnostics.append(malformed(SourceKind.DATES, title, record.raw_date, str(exc)))

    def _attach_tags(
        self,
        by_title: dict[str, Episode],
        records: Iterable[TagRecord],
        diagnostics: list[Diagnostic],
    ) -> None:
        for record in records:
            title = normalize_title(record.raw_title)
            episode = by_title.get(title)
            if episode is None:
                log.debug("Dropping tag record without episode: %r", title)
                diagnostics.append(orphan(SourceKind.TAGS, title))
                continue
            episode.tags.update(
                column for column, value in record.flags.items() if value == self.flag_marker
            )


def reconcile(
    *,
    materials: Iterable[MaterialRecord],
    dates: Iterable[DateRecord] = (),
    tags: Iterable[TagRecord] = (),
) -> ReconciliationResult:
    """Run the default engine over one batch."""

    return ReconciliationEngine().reconcile(materials=materials, dates=dates, tags=tags)
