"""Domain model for the episode catalog."""

from __future__ import annotations

from .diagnostics import Diagnostic, malformed, orphan
from .enums import DiagnosticKind, MatchMode, SourceKind, VocabularyKind
from .episode import Episode, EpisodeView
from .records import DateRecord, MaterialRecord, TagRecord

__all__ = [
    "DateRecord",
    "Diagnostic",
    "DiagnosticKind",
    "Episode",
    "EpisodeView",
    "MatchMode",
    "MaterialRecord",
    "SourceKind",
    "TagRecord",
    "VocabularyKind",
    "malformed",
    "orphan",
]
