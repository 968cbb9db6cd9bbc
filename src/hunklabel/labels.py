"""Label storage for Hunk Label."""

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


def generate_label_id() -> str:
    """Return a fresh random label id."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Label:
    """A user-defined tag applied to hunks."""

    id: str
    text: str


class LabelStore:
    """Owns the labels of a session, keyed by id in insertion order."""

    def __init__(self, id_factory: Callable[[], str] = generate_label_id):
        """Initialize an empty store using ``id_factory`` for new ids."""
        self._id_factory = id_factory
        self._labels: Dict[str, str] = {}

    def create(self, text: str) -> str:
        """Create a label with ``text`` and return its new id.

        Label texts are opaque and need not be unique; two labels with the
        same text remain distinct.
        """
        label_id = self._id_factory()
        while label_id in self._labels:
            label_id = self._id_factory()
        self._labels[label_id] = text
        logger.debug("Label created", extra={"label_id": label_id})
        return label_id

    def rename(self, label_id: str, text: str) -> None:
        """Replace the text of ``label_id``; unknown ids are ignored."""
        if label_id not in self._labels:
            logger.debug("Rename ignored for unknown label", extra={"label_id": label_id})
            return
        self._labels[label_id] = text

    def delete(self, label_id: str) -> bool:
        """Remove ``label_id``; return True if it existed."""
        removed = self._labels.pop(label_id, None) is not None
        if removed:
            logger.debug("Label deleted", extra={"label_id": label_id})
        return removed

    def get(self, label_id: str) -> Optional[str]:
        return self._labels.get(label_id)

    def __contains__(self, label_id: object) -> bool:
        return label_id in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def list(self) -> List[Label]:
        """Return all labels in insertion order."""
        return [Label(id=label_id, text=text) for label_id, text in self._labels.items()]

    def reset(self) -> None:
        self._labels.clear()
