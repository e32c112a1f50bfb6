"""Field parsers for raw source values.

Both parsers raise ``ValueError`` on malformed input; callers decide how to
degrade.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Final, cast

# Line breaks, raw and backslash-escaped, removed before backslashes are dropped.
LINE_BREAKS: Final[tuple[str, ...]] = ("\r\n", "\n", "\r", "\\r\\n", "\\n", "\\r")

DATE_FORMATS: Final[tuple[str, ...]] = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%Y-%m-%d",
    "%m/%d/%Y",
)


def parse_material_list(raw: str) -> list[str]:
    """Decode a bracketed, single-quoted list such as ``['Titanium White', 'Van Dyke Brown']``."""

    cleaned = raw.replace("'", '"')
    for noise in LINE_BREAKS:
        cleaned = cleaned.replace(noise, "")
    cleaned = cleaned.replace("\\", "")
    try:
        loaded = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ValueError(f"not a list literal: {raw!r}") from exc
    if not isinstance(loaded, list):
        raise ValueError(f"expected a list, got {type(loaded).__name__}")
    items = cast(list[object], loaded)
    names: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise ValueError(f"list item is not a string: {item!r}")
        name = item.strip()
        if name and name not in names:
            names.append(name)
    return names


def parse_broadcast_date(raw: str) -> date:
    value = " ".join(raw.split())
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()  # noqa: DTZ007
        except ValueError:
            continue
    raise ValueError(f"unrecognised date: {raw!r}")
