"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

from .config import SessionConfig

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")


@lru_cache(maxsize=1)
def get_session_config() -> SessionConfig:
    """Return the session configuration built from environment variables."""
    defaults = SessionConfig()
    suffixes = os.getenv("HUNKLABEL_DOCUMENT_SUFFIXES")

    config = SessionConfig(
        uncategorized_key=os.getenv("HUNKLABEL_UNCATEGORIZED_KEY", defaults.uncategorized_key),
        document_suffixes=(
            tuple(s.strip() for s in suffixes.split(",") if s.strip())
            if suffixes
            else defaults.document_suffixes
        ),
        export_filename=os.getenv("HUNKLABEL_EXPORT_FILENAME", defaults.export_filename),
        json_indent=int(os.getenv("HUNKLABEL_JSON_INDENT", defaults.json_indent)),
        encoding=os.getenv("HUNKLABEL_ENCODING", defaults.encoding),
    )
    logger.debug(
        "Session configuration resolved",
        extra={
            "uncategorized_key": config.uncategorized_key,
            "export_filename": config.export_filename,
        },
    )
    return config
