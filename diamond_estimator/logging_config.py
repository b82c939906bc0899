from __future__ import annotations

import logging
from typing import Optional

from .settings import AppSettings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def resolve_level(name: str) -> int:
    """Map a level name such as "debug" to its logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[AppSettings] = None) -> int:
    """Set up root logging once for the app or CLI and return the level in effect."""

    global _LOGGING_CONFIGURED
    level = resolve_level((settings or get_settings()).log_level)
    if _LOGGING_CONFIGURED:
        return logging.getLogger().level

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
    return level
