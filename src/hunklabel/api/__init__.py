"""FastAPI adapter exposing a labeling session to a presentation layer."""

from .. import __version__

__all__ = ["__version__"]
