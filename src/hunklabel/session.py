"""Labeling session orchestration for Hunk Label."""

import logging
from pathlib import Path
from typing import Callable, Dict, FrozenSet, List, NamedTuple, Optional, Tuple, Union

from .associations import AssociationStore
from .config import SessionConfig
from .diffpack import FileDiff, Hunk, parse_unified_diff
from .document import parse_document
from .errors import HunkNotFoundError, InputReadError, LabelNotFoundError
from .filters import FilterStore, is_visible
from .identity import HunkKey, hunk_key
from .labels import Label, LabelStore, generate_label_id
from .serialize import Document, DocumentSerializer

logger = logging.getLogger(__name__)


class HunkRef(NamedTuple):
    """A hunk together with its owning file diff and identity key."""

    file_diff: FileDiff
    hunk: Hunk
    key: HunkKey


class LabelingSession:
    """Holds the diff set, labels, associations and filter of one user session.

    Every load replaces the diff set and resets labels and associations.
    The filter is kept across loads; ids that no longer name a label are
    evicted whenever the filter is read.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        id_factory: Callable[[], str] = generate_label_id,
    ):
        """Initialize an empty session."""
        self.config = config or SessionConfig()
        self.labels = LabelStore(id_factory)
        self.associations = AssociationStore()
        self.filter = FilterStore()
        self.serializer = DocumentSerializer(self.config)

        self._file_diffs: Tuple[FileDiff, ...] = ()
        self._refs: List[HunkRef] = []
        self._by_token: Dict[str, HunkRef] = {}

    @property
    def file_diffs(self) -> Tuple[FileDiff, ...]:
        return self._file_diffs

    # Loading

    def load_text(self, text: str, is_document: bool = False) -> None:
        """Replace the session contents with parsed ``text``.

        Parsing happens before any state is touched, so a ParseError leaves
        the session as it was.
        """
        if is_document:
            groups = parse_document(text)
            self._reset_stores()
            file_diffs: List[FileDiff] = []
            for group in groups:
                label_id = None
                if group.label_text != self.config.uncategorized_key:
                    label_id = self.labels.create(group.label_text)
                for file_diff in group.file_diffs:
                    if label_id is not None:
                        for hunk in file_diff.hunks:
                            self.associations.set(hunk_key(file_diff, hunk), label_id)
                    file_diffs.append(file_diff)
            self._set_file_diffs(tuple(file_diffs))
        else:
            parsed = parse_unified_diff(text)
            self._reset_stores()
            self._set_file_diffs(parsed)

        logger.info(
            "Input loaded",
            extra={
                "mode": "document" if is_document else "unified_diff",
                "files": len(self._file_diffs),
                "hunks": self.changes_count,
                "labels": len(self.labels),
            },
        )

    def load_file(self, path: Union[str, Path]) -> None:
        """Read ``path`` and load it, choosing the mode from its suffix."""
        path = Path(path)
        try:
            text = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read input file", extra={"path": str(path)})
            raise InputReadError(str(path), str(exc)) from exc

        self.load_text(text, is_document=self.config.is_document_path(path))

    def reset(self) -> None:
        """Drop the diff set, labels and associations; the filter is kept."""
        self._reset_stores()
        self._set_file_diffs(())

    def _reset_stores(self) -> None:
        self.associations.reset()
        self.labels.reset()

    def _set_file_diffs(self, file_diffs: Tuple[FileDiff, ...]) -> None:
        self._file_diffs = file_diffs
        self._refs = [
            HunkRef(file_diff, hunk, hunk_key(file_diff, hunk))
            for file_diff in file_diffs
            for hunk in file_diff.hunks
        ]
        self._by_token = {}
        for ref in self._refs:
            self._by_token.setdefault(ref.key.token, ref)

    # Labels

    def create_label(self, text: str) -> str:
        return self.labels.create(text)

    def rename_label(self, label_id: str, text: str) -> None:
        self.labels.rename(label_id, text)

    def delete_label(self, label_id: str) -> None:
        """Delete a label, uncategorize its hunks and drop it from the filter."""
        existed = self.labels.delete(label_id)
        removed = self.associations.remove_label(label_id)
        self.filter.remove(label_id)
        if existed:
            logger.info(
                "Label deleted",
                extra={"label_id": label_id, "uncategorized_hunks": removed},
            )

    def list_labels(self) -> List[Label]:
        return self.labels.list()

    # Associations

    def set_hunk_label(self, key: HunkKey, label_id: str) -> None:
        if label_id not in self.labels:
            raise LabelNotFoundError(label_id)
        self.associations.set(key, label_id)

    def clear_hunk_label(self, key: HunkKey) -> None:
        self.associations.remove(key)

    def label_for(self, key: HunkKey) -> Optional[str]:
        """Return the label id of ``key``, dropping the entry if it is dangling."""
        label_id = self.associations.get(key)
        if label_id is not None and label_id not in self.labels:
            logger.debug("Dropping dangling association", extra={"label_id": label_id})
            self.associations.remove(key)
            return None
        return label_id

    # Filter

    def add_to_filter(self, label_id: str) -> None:
        if label_id not in self.labels:
            raise LabelNotFoundError(label_id)
        self.filter.add(label_id)

    def remove_from_filter(self, label_id: str) -> None:
        self.filter.remove(label_id)

    def clear_filter(self) -> None:
        self.filter.clear()

    def filter_ids(self) -> FrozenSet[str]:
        self._evict_stale_filter_ids()
        return self.filter.label_ids()

    def _evict_stale_filter_ids(self) -> None:
        for label_id in self.filter.label_ids():
            if label_id not in self.labels:
                self.filter.remove(label_id)

    # Hunks

    def hunks(self) -> List[HunkRef]:
        """Return every hunk of the diff set in traversal order."""
        return list(self._refs)

    def find_hunk(self, token: str) -> HunkRef:
        ref = self._by_token.get(token)
        if ref is None:
            raise HunkNotFoundError(token)
        return ref

    def visible_hunks(self) -> List[HunkRef]:
        """Return the hunks that pass the current filter, in traversal order."""
        self._evict_stale_filter_ids()
        return [ref for ref in self._refs if is_visible(self.filter, self.label_for(ref.key))]

    @property
    def changes_count(self) -> int:
        return len(self._refs)

    @property
    def uncategorized_count(self) -> int:
        return sum(1 for ref in self._refs if self.label_for(ref.key) is None)

    # Export

    def export_document(self) -> Document:
        return self.serializer.serialize(self._file_diffs, self.associations, self.labels)

    def export_json(self) -> str:
        return self.serializer.to_json_string(self.export_document())

    def save_export(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the export document to ``path`` (default: configured file name)."""
        output_path = Path(path) if path is not None else Path(self.config.export_filename)
        output_path.write_text(self.export_json(), encoding=self.config.encoding)
        logger.info(
            "Export written",
            extra={"path": str(output_path), "hunks": self.changes_count},
        )
        return output_path
