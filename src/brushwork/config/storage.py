"""Where the catalog database lives and how the engine is opened."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_bool_env_var, optional_env_var

APP_DIR_NAME: Final[str] = "brushwork"
DEFAULT_DB_FILENAME: Final[str] = "brushwork.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Local data directory holding the default SQLite catalog."""

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    @property
    def database_path(self) -> Path:
        return self.data_dir.expanduser().resolve() / self.database_filename

    def sqlite_uri(self) -> str:
        """Return the SQLite URI for the catalog, creating the data directory first."""

        path = self.database_path
        path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{path}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.uri.startswith("sqlite")


def _platform_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Local"
    else:
        base = os.getenv("XDG_DATA_HOME")
        root = Path(base) if base else Path.home() / ".local" / "share"
    return root / APP_DIR_NAME


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("BRUSHWORK_DATA_DIR")
    return StorageConfig(
        data_dir=Path(env_dir) if env_dir else _platform_data_dir(),
        database_filename=optional_env_var("BRUSHWORK_DB_FILENAME", DEFAULT_DB_FILENAME),
    )


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` wins; otherwise the catalog is a SQLite file in the data directory."""

    echo = optional_bool_env_var("BRUSHWORK_DB_ECHO", default=False)
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri, echo=echo)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.sqlite_uri(), echo=echo)
