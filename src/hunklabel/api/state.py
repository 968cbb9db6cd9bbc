"""Process-wide labeling session used by the API routes."""

import logging

from ..session import LabelingSession
from ..settings import get_session_config

logger = logging.getLogger(__name__)

# Built at import so concurrent first requests share one session
_session = LabelingSession(get_session_config())
logger.debug("Created API labeling session")


def get_session() -> LabelingSession:
    """Return the single in-process session."""
    return _session
