"""Translate raw source rows into typed records.

Rows that fail validation are reported as diagnostics and skipped; they never
abort the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import ValidationError

from brushwork.domain.model import (
    DateRecord,
    Diagnostic,
    MaterialRecord,
    SourceKind,
    TagRecord,
    malformed,
)
from brushwork.domain.titles import normalize_title

from .schema import DateLine, MaterialRow, TagRow

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TranslationResult[TRecord]:
    records: list[TRecord] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])
    skipped_lines: int = 0


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'row'}: {error['msg']}"
        for error in exc.errors()
    )


def _reject(source: SourceKind, raw_title: str | None, exc: ValidationError) -> Diagnostic:
    message = _describe(exc)
    title = normalize_title(raw_title)
    log.warning("Skipping malformed %s row %r: %s", source.value, title, message)
    return malformed(source, title, raw_title, message)


def translate_material_rows(rows: Iterable[Mapping[str, str]]) -> TranslationResult[MaterialRecord]:
    result: TranslationResult[MaterialRecord] = TranslationResult()
    for row in rows:
        try:
            payload = MaterialRow.model_validate(dict(row))
        except ValidationError as exc:
            diagnostic = _reject(SourceKind.MATERIALS, row.get("painting_title"), exc)
            result.diagnostics.append(diagnostic)
            continue
        result.records.append(
            MaterialRecord(
                raw_title=payload.painting_title,
                season=payload.season,
                episode_number=payload.episode,
                colors_field=payload.colors,
            )
        )
    return result


def translate_tag_rows(rows: Iterable[Mapping[str, str]]) -> TranslationResult[TagRecord]:
    result: TranslationResult[TagRecord] = TranslationResult()
    for row in rows:
        try:
            payload = TagRow.model_validate(dict(row))
        except ValidationError as exc:
            result.diagnostics.append(_reject(SourceKind.TAGS, row.get("TITLE"), exc))
            continue
        result.records.append(TagRecord(raw_title=payload.title, flags=payload.flags))
    return result


def translate_date_lines(lines: Iterable[str]) -> TranslationResult[DateRecord]:
    result: TranslationResult[DateRecord] = TranslationResult()
    for line in lines:
        try:
            payload = DateLine.parse(line)
        except ValidationError as exc:
            result.diagnostics.append(_reject(SourceKind.DATES, line, exc))
            continue
        if payload is None:
            log.debug("Ignoring line without a title and date: %r", line)
            result.skipped_lines += 1
            continue
        result.records.append(DateRecord(raw_title=payload.title, raw_date=payload.date))
    return result
