"""Readers for the raw catalog files."""

from __future__ import annotations

import csv
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

log = logging.getLogger(__name__)


def read_csv_rows(path: Path, *, encoding: str = "utf-8-sig") -> Iterator[dict[str, str]]:
    """Yield one header-keyed mapping per non-empty CSV row."""

    with path.open(newline="", encoding=encoding) as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
                continue
            yield {key: value or "" for key, value in row.items() if key is not None}


def read_date_lines(path: Path, *, encoding: str = "utf-8") -> Iterator[str]:
    with path.open(encoding=encoding) as handle:
        for line in handle:
            stripped = line.strip()
            if stripped:
                yield stripped
