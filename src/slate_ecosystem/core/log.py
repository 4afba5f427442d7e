"""Logging configuration with Rich formatting.

The library only ever calls get_logger(); applications opt in to console
output with setup_logging().
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from slate_ecosystem.core.config import settings

ROOT_LOGGER = "slate_ecosystem"


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    # One line per request is too chatty at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
