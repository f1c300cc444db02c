"""Data models for parsed unified diffs."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Hunk:
    """One hunk of a file diff.

    Attributes:
        file_path: Path of the file the hunk belongs to (post-image side)
        header: Raw ``@@ ... @@`` header line
        old_start: First line of the hunk in the old file
        old_len: Number of old-file lines covered
        new_start: First line of the hunk in the new file
        new_len: Number of new-file lines covered
        lines: Raw body lines, in order, with their +/-/space prefixes
        added: Count of ``+`` lines (excluding ``+++`` markers)
        removed: Count of ``-`` lines (excluding ``---`` markers)
        hash: 8 hex chars identifying the hunk by path, header and content
        function_context: Text after the closing ``@@``, if any
    """

    file_path: str
    header: str
    old_start: int
    old_len: int
    new_start: int
    new_len: int
    lines: tuple[str, ...]
    added: int
    removed: int
    hash: str
    function_context: Optional[str] = None


@dataclass
class FileDiff:
    """All hunks for one file in a diff."""

    file_path: str
    hunks: list[Hunk] = field(default_factory=list)

    @property
    def additions(self) -> int:
        return sum(h.added for h in self.hunks)

    @property
    def deletions(self) -> int:
        return sum(h.removed for h in self.hunks)
