"""Logging setup shared by vellum entry points."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vellum_config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure logging for vellum processes.

    - Console output with timestamps and module names
    - Configurable log level for vellum modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    if settings is None:
        from vellum_config.settings import get_settings

        settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("vellum", "vellum_auth", "vellum_config"):
        logging.getLogger(name).setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
