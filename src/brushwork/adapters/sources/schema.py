"""Pydantic models describing rows of the three catalog sources."""

from __future__ import annotations

import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r'"([^"]+)" \(([^)]+)\)')


def _require_text(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped
    return value


class SourceBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class MaterialRow(SourceBaseModel):
    painting_title: str
    season: int
    episode: int
    colors: str = ""

    _validate_title = field_validator("painting_title", mode="before")(_require_text)

    @field_validator("season", "episode", mode="before")
    @classmethod
    def _parse_int(cls, value: int | str) -> int:
        if isinstance(value, str):
            return int(value.strip())
        return value


class TagRow(SourceBaseModel):
    """Subject-matter row: a title column plus one ``0``/``1`` column per tag."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    title: str = Field(alias="TITLE")
    episode: str | None = Field(default=None, alias="EPISODE")

    _validate_title = field_validator("title", mode="before")(_require_text)

    @property
    def flags(self) -> dict[str, str]:
        extra = self.model_extra or {}
        return {str(column): str(value) for column, value in extra.items()}


class DateLine(SourceBaseModel):
    title: str
    date: str

    _validate_fields = field_validator("title", "date", mode="before")(_require_text)

    @classmethod
    def parse(cls, line: str) -> DateLine | None:
        """Return the title/date pair in ``line``, or ``None`` when the line has none."""

        match = DATE_LINE_PATTERN.search(line)
        if match is None:
            return None
        title, date = match.groups()
        return cls(title=title, date=date)
