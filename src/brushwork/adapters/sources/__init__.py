"""Adapters for the raw catalog files (dates text, materials CSV, tags CSV)."""

from __future__ import annotations

from .reader import read_csv_rows, read_date_lines
from .schema import DateLine, MaterialRow, TagRow
from .translator import (
    TranslationResult,
    translate_date_lines,
    translate_material_rows,
    translate_tag_rows,
)

__all__ = [
    "DateLine",
    "MaterialRow",
    "TagRow",
    "TranslationResult",
    "read_csv_rows",
    "read_date_lines",
    "translate_date_lines",
    "translate_material_rows",
    "translate_tag_rows",
]
