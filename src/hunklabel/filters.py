"""Label filter for Hunk Label."""

from typing import FrozenSet, Optional, Set


class FilterStore:
    """Set of label ids the user wants to see; empty means no restriction."""

    def __init__(self):
        self._label_ids: Set[str] = set()

    def add(self, label_id: str) -> None:
        self._label_ids.add(label_id)

    def remove(self, label_id: str) -> None:
        self._label_ids.discard(label_id)

    def contains(self, label_id: str) -> bool:
        return label_id in self._label_ids

    def is_empty(self) -> bool:
        return not self._label_ids

    def label_ids(self) -> FrozenSet[str]:
        return frozenset(self._label_ids)

    def clear(self) -> None:
        self._label_ids.clear()


def is_visible(filter_store: FilterStore, label_id: Optional[str]) -> bool:
    """Return True if a hunk labeled ``label_id`` passes the filter.

    Uncategorized hunks (``label_id`` is None) are always visible.
    """
    return filter_store.is_empty() or label_id is None or filter_store.contains(label_id)
