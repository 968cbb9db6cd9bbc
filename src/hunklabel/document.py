"""Labeled diff document schema and import for Hunk Label.

An exported document is a JSON object mapping label text to a list of
file diffs, each shaped like::

    {"oldFileName": "...", "newFileName": "...",
     "hunks": [{"oldStart": 1, "oldLines": 2, "newStart": 1, "newLines": 3,
                "lines": [" a", "-b", "+c", "+d"]}]}
"""

import json
import logging
from functools import lru_cache
from typing import Dict, List, NamedTuple, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from .diffpack import FileDiff, Hunk
from .errors import DocumentParseError

logger = logging.getLogger(__name__)


class ExportedHunk(BaseModel):
    """Hunk as stored in an exported document."""

    model_config = ConfigDict(populate_by_name=True)

    old_start: StrictInt = Field(..., alias="oldStart", ge=0)
    old_lines: StrictInt = Field(..., alias="oldLines", ge=0)
    new_start: StrictInt = Field(..., alias="newStart", ge=0)
    new_lines: StrictInt = Field(..., alias="newLines", ge=0)
    lines: List[StrictStr]

    def to_hunk(self) -> Hunk:
        return Hunk(
            old_start=self.old_start,
            old_lines=self.old_lines,
            new_start=self.new_start,
            new_lines=self.new_lines,
            lines=tuple(self.lines),
        )


class ExportedFileDiff(BaseModel):
    """File diff as stored in an exported document."""

    model_config = ConfigDict(populate_by_name=True)

    old_file_name: StrictStr = Field(..., alias="oldFileName")
    new_file_name: StrictStr = Field(..., alias="newFileName")
    hunks: List[ExportedHunk]
    index: Optional[StrictStr] = None
    old_header: Optional[StrictStr] = Field(None, alias="oldHeader")
    new_header: Optional[StrictStr] = Field(None, alias="newHeader")

    def to_file_diff(self) -> FileDiff:
        return FileDiff(
            old_file_name=self.old_file_name,
            new_file_name=self.new_file_name,
            hunks=tuple(hunk.to_hunk() for hunk in self.hunks),
            index=self.index,
            old_header=self.old_header,
            new_header=self.new_header,
        )


_DOCUMENT_ADAPTER = TypeAdapter(Dict[str, List[ExportedFileDiff]])


class LabeledGroup(NamedTuple):
    """File diffs exported under one top-level document key."""

    label_text: str
    file_diffs: Tuple[FileDiff, ...]


def _summarize_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Reduce pydantic validation errors to location/message pairs."""
    return [
        {
            "location": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


@lru_cache(maxsize=16)
def parse_document(text: str) -> Tuple[LabeledGroup, ...]:
    """Parse and validate an exported document, preserving key order."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Document is not valid JSON", extra={"error": str(exc)})
        raise DocumentParseError(f"not valid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(raw, dict):
        raise DocumentParseError(
            f"top-level value must be an object, got {type(raw).__name__}"
        )

    try:
        document = _DOCUMENT_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        errors = _summarize_errors(exc)
        logger.warning("Document failed validation", extra={"errors": len(errors)})
        raise DocumentParseError("unexpected document shape", errors) from exc

    groups = tuple(
        LabeledGroup(
            label_text=label_text,
            file_diffs=tuple(file_diff.to_file_diff() for file_diff in file_diffs),
        )
        for label_text, file_diffs in document.items()
    )
    logger.debug(
        "Parsed labeled document",
        extra={
            "groups": len(groups),
            "files": sum(len(group.file_diffs) for group in groups),
        },
    )
    return groups
