"""Content-derived identity for diff hunks.

Hunks are plain frozen records, so two hunks parsed from the same text in
separate loads compare equal. The key combines the owning file pair, the
hunk coordinates and a digest of the hunk lines. Two textually identical
hunks at identical coordinates inside one file diff share a key; an
association set on one of them applies to both.
"""

import hashlib
from typing import NamedTuple

from .diffpack import FileDiff, Hunk


class HunkKey(NamedTuple):
    """Composite key identifying a hunk within a loaded diff set."""

    old_file_name: str
    new_file_name: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines_digest: str

    @property
    def token(self) -> str:
        """Return a stable opaque string for addressing this hunk."""
        material = "\x00".join(str(part) for part in self)
        return hashlib.sha256(material.encode("utf-8", errors="replace")).hexdigest()[:32]


def lines_digest(hunk: Hunk) -> str:
    """Compute SHA-256 digest of the hunk lines, each prefixed with its length."""
    digest = hashlib.sha256()
    for line in hunk.lines:
        encoded = line.encode("utf-8", errors="surrogatepass")
        digest.update(f"{len(encoded)}:".encode("ascii"))
        digest.update(encoded)
    return digest.hexdigest()


def hunk_key(file_diff: FileDiff, hunk: Hunk) -> HunkKey:
    """Build the identity key of ``hunk`` inside ``file_diff``."""
    return HunkKey(
        old_file_name=file_diff.old_file_name,
        new_file_name=file_diff.new_file_name,
        old_start=hunk.old_start,
        old_lines=hunk.old_lines,
        new_start=hunk.new_start,
        new_lines=hunk.new_lines,
        lines_digest=lines_digest(hunk),
    )
