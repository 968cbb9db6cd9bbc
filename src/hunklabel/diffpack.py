"""Unified diff parsing into file diffs and hunks for Hunk Label."""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Tuple

from .errors import DiffParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hunk:
    """Represents a single diff hunk."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: Tuple[str, ...] = ()

    @property
    def header(self) -> str:
        """Return the ``@@`` header line for this hunk."""
        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"


@dataclass(frozen=True)
class FileDiff:
    """Represents the hunks between one pair of old and new file paths."""

    old_file_name: str
    new_file_name: str
    hunks: Tuple[Hunk, ...] = ()

    # Optional header data carried through export
    index: Optional[str] = None
    old_header: Optional[str] = None
    new_header: Optional[str] = None

    @property
    def file_names(self) -> Tuple[str, str]:
        return (self.old_file_name, self.new_file_name)


@dataclass
class _FileDiffBuilder:
    """Mutable accumulator for a file diff while its lines are consumed."""

    index: Optional[str] = None
    old_file_name: Optional[str] = None
    new_file_name: Optional[str] = None
    old_header: Optional[str] = None
    new_header: Optional[str] = None
    hunks: List[Hunk] = field(default_factory=list)

    @property
    def has_file_names(self) -> bool:
        return self.old_file_name is not None and self.new_file_name is not None

    def build(self) -> FileDiff:
        return FileDiff(
            old_file_name=self.old_file_name,
            new_file_name=self.new_file_name,
            hunks=tuple(self.hunks),
            index=self.index,
            old_header=self.old_header,
            new_header=self.new_header,
        )


class DiffParser:
    """Parses unified diff text into structured file diffs."""

    def __init__(self):
        """Initialize diff parser."""
        self.hunk_header_pattern = re.compile(
            r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@"
        )
        self.index_pattern = re.compile(r"^Index:\s+(.+?)\s*$")

    def parse(self, text: str) -> Tuple[FileDiff, ...]:
        """Parse unified diff text into an ordered tuple of file diffs."""
        lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
        if lines and lines[-1] == "":
            lines.pop()
        files: List[FileDiff] = []
        builder: Optional[_FileDiffBuilder] = None

        i = 0
        while i < len(lines):
            line = lines[i]

            if line.startswith("@@"):
                if builder is None or not builder.has_file_names:
                    raise DiffParseError("hunk found before '---'/'+++' file header", i + 1)
                hunk, i = self._parse_hunk(lines, i)
                builder.hunks.append(hunk)
                continue

            if line.startswith("--- "):
                if builder is not None and builder.old_file_name is not None:
                    self._flush(builder, files, i + 1)
                    builder = None
                if builder is None:
                    builder = _FileDiffBuilder()
                builder.old_file_name, builder.old_header = self._parse_file_name(line)
            elif line.startswith("+++ "):
                if builder is None or builder.old_file_name is None or builder.new_file_name is not None:
                    raise DiffParseError("'+++' line without a preceding '---' line", i + 1)
                builder.new_file_name, builder.new_header = self._parse_file_name(line)
            elif line.startswith("Index:") or line.startswith("diff "):
                if builder is not None:
                    self._flush(builder, files, i + 1)
                builder = _FileDiffBuilder()
                index_match = self.index_pattern.match(line)
                if index_match:
                    builder.index = index_match.group(1)
            else:
                logger.debug("Skipping non-hunk line", extra={"line_number": i + 1})

            i += 1

        if builder is not None:
            self._flush(builder, files, len(lines))

        if not files and text.strip():
            raise DiffParseError("no file diff found in input")

        logger.debug(
            "Parsed unified diff",
            extra={"files": len(files), "hunks": sum(len(f.hunks) for f in files)},
        )
        return tuple(files)

    def _flush(
        self, builder: _FileDiffBuilder, files: List[FileDiff], line_number: int
    ) -> None:
        """Append the finished file diff, skipping blocks without file headers."""
        if builder.old_file_name is not None and builder.new_file_name is None:
            raise DiffParseError("'---' line without a following '+++' line", line_number)
        if not builder.has_file_names:
            logger.debug(
                "Skipping file block without '---'/'+++' header",
                extra={"index": builder.index, "line_number": line_number},
            )
            return
        files.append(builder.build())

    def _parse_file_name(self, line: str) -> Tuple[str, Optional[str]]:
        """Split a ``---``/``+++`` line into file name and optional header."""
        name, _, header = line[4:].partition("\t")
        name = name.strip()
        if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
            name = name[1:-1]
        return name, header.strip() or None

    def _is_file_header(self, lines: List[str], i: int) -> bool:
        """Check for a ``---``/``+++`` pair followed by a hunk header at ``i``."""
        return (
            lines[i].startswith("--- ")
            and i + 2 < len(lines)
            and lines[i + 1].startswith("+++ ")
            and lines[i + 2].startswith("@@")
        )

    def _parse_hunk(self, lines: List[str], start: int) -> Tuple[Hunk, int]:
        """Parse the hunk whose header is at ``start``; return it and the next index."""
        header_match = self.hunk_header_pattern.match(lines[start])
        if not header_match:
            raise DiffParseError(f"malformed hunk header {lines[start]!r}", start + 1)

        old_start = int(header_match.group(1))
        old_lines = int(header_match.group(2) or "1")
        new_start = int(header_match.group(3))
        new_lines = int(header_match.group(4) or "1")

        removed = 0
        added = 0
        body: List[str] = []

        i = start + 1
        while i < len(lines) and (
            removed < old_lines or added < new_lines or lines[i].startswith("\\")
        ):
            line = lines[i]
            operation = line[:1] or " "
            if operation == "+":
                added += 1
            elif operation == "-":
                removed += 1
            elif operation == " ":
                removed += 1
                added += 1
            elif operation != "\\":
                raise DiffParseError(f"unexpected line in hunk: {line!r}", i + 1)
            body.append(line)
            i += 1

        if removed != old_lines:
            raise DiffParseError(
                f"removed line count {removed} does not match header count {old_lines}",
                start + 1,
            )
        if added != new_lines:
            raise DiffParseError(
                f"added line count {added} does not match header count {new_lines}",
                start + 1,
            )
        if i < len(lines) and lines[i][:1] in ("+", "-") and not self._is_file_header(lines, i):
            kind, count = ("added", new_lines) if lines[i].startswith("+") else ("removed", old_lines)
            raise DiffParseError(
                f"{kind} line count exceeds header count {count}: {lines[i]!r}",
                i + 1,
            )

        hunk = Hunk(
            old_start=old_start,
            old_lines=old_lines,
            new_start=new_start,
            new_lines=new_lines,
            lines=tuple(body),
        )
        return hunk, i


@lru_cache(maxsize=16)
def parse_unified_diff(text: str) -> Tuple[FileDiff, ...]:
    """Parse unified diff text; identical input returns the cached result."""
    return DiffParser().parse(text)
