"""Logging configuration utilities for Hunk Label."""

import logging
import os
from typing import Optional

_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def resolve_log_level(level: Optional[str] = None) -> str:
    """Return the level name from the argument, HUNKLABEL_LOG_LEVEL or LOG_LEVEL."""
    resolved = level or os.getenv("HUNKLABEL_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    return resolved.upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging once.

    The package logger always follows the resolved level, even when the
    root logger was configured elsewhere (for example by uvicorn).
    """
    log_level = resolve_log_level(level)
    logging.getLogger("hunklabel").setLevel(log_level)

    if logging.getLogger().handlers:
        return

    logging.basicConfig(level=log_level, format=_LOG_FORMAT)
