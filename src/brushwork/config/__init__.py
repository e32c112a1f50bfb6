"""Application configuration helpers."""

from __future__ import annotations

from .api import ApiConfig, get_api_config
from .errors import ConfigurationError
from .logging import configure_logging
from .sources import SourceConfig, get_source_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ApiConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "SourceConfig",
    "StorageConfig",
    "configure_logging",
    "get_api_config",
    "get_database_config",
    "get_source_config",
    "get_storage_config",
]
