"""HTTP server configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError

DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 5000


@dataclass(frozen=True, slots=True)
class ApiConfig:
    host: str = DEFAULT_API_HOST
    port: int = DEFAULT_API_PORT
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))


def get_api_config() -> ApiConfig:
    port = optional_int_env_var("PORT", DEFAULT_API_PORT)
    if not 0 < port < 65536:  # noqa: PLR2004
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}")
    origins = tuple(
        origin.strip()
        for origin in optional_env_var("BRUSHWORK_CORS_ORIGINS", "*").split(",")
        if origin.strip()
    )
    return ApiConfig(
        host=optional_env_var("BRUSHWORK_API_HOST", DEFAULT_API_HOST),
        port=port,
        cors_origins=origins or ("*",),
    )
