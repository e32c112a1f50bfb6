"""Title normalization shared by every source."""

from __future__ import annotations


def normalize_title(raw: str | None) -> str:
    """Return the join key for ``raw``.

    Double quotes are dropped, the first ``Mt.`` becomes ``Mount``, and the
    result is trimmed and upper-cased. Sources whose titles differ in any other
    way will not join.
    """

    if not raw:
        return ""
    return raw.replace('"', "").replace("Mt.", "Mount", 1).strip().upper()
