"""Configuration management for Hunk Label."""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Tuple, Union


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for loading, labeling and exporting diffs."""

    # Top-level document key for hunks without a label
    uncategorized_key: str = "undefined"

    # Input files with these suffixes are read as exported documents
    document_suffixes: Tuple[str, ...] = (".json",)

    # Export options
    export_filename: str = "annotated_diff.json"
    json_indent: int = 2
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.uncategorized_key:
            raise ValueError("uncategorized_key cannot be empty")
        if not self.document_suffixes:
            raise ValueError("document_suffixes cannot be empty")
        if any(not suffix.startswith(".") for suffix in self.document_suffixes):
            raise ValueError("document_suffixes must start with '.'")
        if not self.export_filename:
            raise ValueError("export_filename cannot be empty")
        if self.json_indent < 0:
            raise ValueError("json_indent cannot be negative")
        if not self.encoding:
            raise ValueError("encoding cannot be empty")

    def is_document_path(self, path: Union[str, PurePath]) -> bool:
        """Return True if the file at ``path`` holds an exported document."""
        name = PurePath(path).name.lower()
        return any(name.endswith(suffix.lower()) for suffix in self.document_suffixes)
