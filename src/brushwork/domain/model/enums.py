"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class VocabularyKind(StrEnum):
    """Master vocabularies an episode can be linked to."""

    MATERIAL = "material"
    TAG = "tag"


class SourceKind(StrEnum):
    DATES = "dates"
    MATERIALS = "materials"
    TAGS = "tags"


class DiagnosticKind(StrEnum):
    MALFORMED_RECORD = "malformed_record"
    ORPHAN_RECORD = "orphan_record"


class MatchMode(StrEnum):
    """How multiple requested values (and dimensions) combine in a filter."""

    ALL = "all"
    ANY = "any"
