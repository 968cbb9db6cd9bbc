"""Export serialization for Hunk Label."""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .associations import AssociationStore
from .config import SessionConfig
from .diffpack import FileDiff, Hunk
from .identity import hunk_key
from .labels import LabelStore

logger = logging.getLogger(__name__)

Document = Dict[str, List[Dict[str, Any]]]


class DocumentSerializer:
    """Groups labeled hunks into an export document."""

    def __init__(self, config: SessionConfig):
        """Initialize with configuration."""
        self.config = config

    def serialize(
        self,
        file_diffs: Iterable[FileDiff],
        associations: AssociationStore,
        labels: LabelStore,
    ) -> Document:
        """Build the export document for the given diff set.

        Hunks are grouped by label and file pair in traversal order. Each
        group becomes one synthetic file diff under the label's current text,
        or under the uncategorized key when the hunk has no live label.
        Labels that share a text are merged under that text.
        """
        groups: Dict[Optional[str], Dict[Tuple[str, str], Dict[str, Any]]] = {}
        hunk_count = 0

        for file_diff in file_diffs:
            for hunk in file_diff.hunks:
                label_id = associations.get(hunk_key(file_diff, hunk))
                if label_id is not None and label_id not in labels:
                    label_id = None

                by_file = groups.setdefault(label_id, {})
                synthetic = by_file.get(file_diff.file_names)
                if synthetic is None:
                    synthetic = self._serialize_file(file_diff)
                    by_file[file_diff.file_names] = synthetic
                synthetic["hunks"].append(self._serialize_hunk(hunk))
                hunk_count += 1

        document: Document = {}
        for label_id, by_file in groups.items():
            if label_id is None:
                key = self.config.uncategorized_key
            else:
                key = labels.get(label_id)
            document.setdefault(key, []).extend(by_file.values())

        logger.debug(
            "Serialization finished",
            extra={"keys": len(document), "hunks": hunk_count},
        )
        return document

    def _serialize_file(self, file_diff: FileDiff) -> Dict[str, Any]:
        """Serialize file diff header fields with an empty hunk list."""
        file_data: Dict[str, Any] = {
            "oldFileName": file_diff.old_file_name,
            "newFileName": file_diff.new_file_name,
        }

        if file_diff.index is not None:
            file_data["index"] = file_diff.index

        if file_diff.old_header is not None:
            file_data["oldHeader"] = file_diff.old_header

        if file_diff.new_header is not None:
            file_data["newHeader"] = file_diff.new_header

        file_data["hunks"] = []
        return file_data

    def _serialize_hunk(self, hunk: Hunk) -> Dict[str, Any]:
        return {
            "oldStart": hunk.old_start,
            "oldLines": hunk.old_lines,
            "newStart": hunk.new_start,
            "newLines": hunk.new_lines,
            "lines": list(hunk.lines),
        }

    def to_json_string(self, document: Document) -> str:
        """Convert document to pretty-printed JSON string."""
        logger.debug("Rendering document to JSON string")
        return json.dumps(
            document,
            ensure_ascii=False,
            indent=self.config.json_indent,
        )

