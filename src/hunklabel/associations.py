"""Hunk to label associations for Hunk Label."""

import logging
from typing import Dict, Optional

from .identity import HunkKey

logger = logging.getLogger(__name__)


class AssociationStore:
    """Maps hunk keys to label ids.

    A missing entry means the hunk is uncategorized. The store does not
    check that label ids exist; :class:`hunklabel.session.LabelingSession`
    does that before writing and heals dangling entries on read.
    """

    def __init__(self):
        self._entries: Dict[HunkKey, str] = {}

    def set(self, key: HunkKey, label_id: str) -> None:
        self._entries[key] = label_id

    def remove(self, key: HunkKey) -> None:
        """Clear the association for ``key``; absent keys are ignored."""
        self._entries.pop(key, None)

    def get(self, key: HunkKey) -> Optional[str]:
        return self._entries.get(key)

    def remove_label(self, label_id: str) -> int:
        """Drop every entry pointing at ``label_id``; return how many were removed."""
        stale = [key for key, value in self._entries.items() if value == label_id]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(
                "Associations cascaded for deleted label",
                extra={"label_id": label_id, "removed": len(stale)},
            )
        return len(stale)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self) -> None:
        """Clear all entries."""
        self._entries.clear()
