"""Hunk Label.

Split a unified diff into hunks, tag each hunk with a free-text label,
filter by label, and export the labeled result as a JSON document that
can be imported again without loss.
"""

__version__ = "1.0.0"
__author__ = "Hunk Label Team"

__all__ = []
