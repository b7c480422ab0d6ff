"""Logging setup for applications embedding tablequery.

Library modules only create module loggers; nothing is configured on import.
"""

import logging

from tablequery.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    Uses ``force=True`` to prevent duplicate handlers when called twice.

    Args:
        settings: Settings to read ``log_level`` from. Defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, force=True)

    # Reduce noise from the driver
    logging.getLogger("aioodbc").setLevel(logging.WARNING)
