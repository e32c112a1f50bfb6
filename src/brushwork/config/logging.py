"""Logging setup for the CLI and the HTTP server."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Libraries that log every statement or request at INFO.
NOISY_LOGGERS: Final[tuple[str, ...]] = ("sqlalchemy.engine", "uvicorn.access")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for batch and server runs.

    Below DEBUG the SQL echo and per-request access lines are held back to
    WARNING so load progress stays readable. ``force=True`` replaces handlers
    installed earlier, e.g. by uvicorn or a test harness.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
