"""Locations of the three catalog source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

DEFAULT_SOURCE_DIR: Final[str] = "data"
DEFAULT_DATES_FILE: Final[str] = "The Joy Of Painting - Episode Dates"
DEFAULT_MATERIALS_FILE: Final[str] = "The Joy Of Painiting - Colors Used(1)"
DEFAULT_TAGS_FILE: Final[str] = "The Joy Of Painiting - Subject Matter"


@dataclass(frozen=True, slots=True)
class SourceConfig:
    dates_path: Path
    materials_path: Path
    tags_path: Path


def get_source_config(*, source_dir: Path | None = None) -> SourceConfig:
    directory = source_dir or Path(optional_env_var("BRUSHWORK_SOURCE_DIR", DEFAULT_SOURCE_DIR))
    return SourceConfig(
        dates_path=directory / optional_env_var("BRUSHWORK_DATES_FILE", DEFAULT_DATES_FILE),
        materials_path=directory
        / optional_env_var("BRUSHWORK_MATERIALS_FILE", DEFAULT_MATERIALS_FILE),
        tags_path=directory / optional_env_var("BRUSHWORK_TAGS_FILE", DEFAULT_TAGS_FILE),
    )
