"""Structured per-batch diagnostics for fail-soft parsing."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DiagnosticKind, SourceKind


@dataclass(frozen=True, slots=True, kw_only=True)
class Diagnostic:
    kind: DiagnosticKind
    source: SourceKind
    title: str
    value: str | None = None
    message: str = ""


def malformed(source: SourceKind, title: str, value: str | None, message: str) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.MALFORMED_RECORD,
        source=source,
        title=title,
        value=value,
        message=message,
    )


def orphan(source: SourceKind, title: str) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.ORPHAN_RECORD,
        source=source,
        title=title,
        message="no episode with a matching title",
    )
