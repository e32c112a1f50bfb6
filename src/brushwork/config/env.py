"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import Final

from .errors import ConfigurationError

TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _read(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def optional_env_var(name: str, default: str) -> str:
    value = _read(name)
    return default if value is None else value


def optional_int_env_var(name: str, default: int) -> int:
    raw = _read(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def optional_bool_env_var(name: str, *, default: bool) -> bool:
    raw = _read(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")
