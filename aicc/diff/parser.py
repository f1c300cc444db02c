"""Unified diff parser.

Splits ``git diff`` output into files and hunks. Only the parts needed to
find file and hunk boundaries and count changed lines are understood;
file headers, mode lines and binary notices are skipped.
"""

import hashlib
import re
from dataclasses import dataclass, field
from typing import Optional

from aicc.diff.models import FileDiff, Hunk
from aicc.log import get_logger

logger = get_logger(__name__)

FILE_HEADER_PREFIX = "diff --git a/"
FILE_HEADER_RE = re.compile(r"diff --git a/(.+?) b/(.+)$")
HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$")

# Header lines that never belong to a hunk body
_SKIPPED_PREFIXES = ("index ", "--- ", "+++ ")


def compute_hunk_hash(file_path: str, header: str, lines: list[str]) -> str:
    """Compute the short content hash of a hunk.

    Args:
        file_path: Path of the file.
        header: Raw hunk header.
        lines: Raw hunk body lines.

    Returns:
        First 8 hex chars of the SHA-1 digest.
    """
    content = file_path + header + "\n".join(lines)
    return hashlib.sha1(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:8]


@dataclass
class _OpenHunk:
    header: str
    old_start: int
    old_len: int
    new_start: int
    new_len: int
    function_context: Optional[str]
    lines: list[str] = field(default_factory=list)
    added: int = 0
    removed: int = 0

    def append(self, line: str) -> None:
        self.lines.append(line)
        if line.startswith("+") and not line.startswith("+++"):
            self.added += 1
        elif line.startswith("-") and not line.startswith("---"):
            self.removed += 1

    def close(self, file_path: str) -> Hunk:
        return Hunk(
            file_path=file_path,
            header=self.header,
            old_start=self.old_start,
            old_len=self.old_len,
            new_start=self.new_start,
            new_len=self.new_len,
            lines=tuple(self.lines),
            added=self.added,
            removed=self.removed,
            hash=compute_hunk_hash(file_path, self.header, self.lines),
            function_context=self.function_context,
        )


def _open_hunk(line: str) -> Optional[_OpenHunk]:
    match = HUNK_HEADER_RE.match(line)
    if not match:
        return None

    context = match.group(5).strip()
    return _OpenHunk(
        header=line,
        old_start=int(match.group(1)),
        old_len=int(match.group(2)) if match.group(2) is not None else 1,
        new_start=int(match.group(3)),
        new_len=int(match.group(4)) if match.group(4) is not None else 1,
        function_context=context or None,
    )


def parse_unified_diff(raw: str) -> list[FileDiff]:
    """Parse raw unified diff text into files and hunks.

    Args:
        raw: Output of ``git diff``.

    Returns:
        FileDiff objects in order of appearance. Empty for empty input.
    """
    if not raw or not raw.strip():
        return []

    lines = raw.split("\n")
    if raw.endswith("\n"):
        lines.pop()

    files: list[FileDiff] = []
    current_file: Optional[FileDiff] = None
    current_hunk: Optional[_OpenHunk] = None

    def flush_hunk() -> None:
        nonlocal current_hunk
        if current_file is not None and current_hunk is not None:
            current_file.hunks.append(current_hunk.close(current_file.file_path))
        current_hunk = None

    for line in lines:
        if line.startswith(FILE_HEADER_PREFIX):
            flush_hunk()
            match = FILE_HEADER_RE.match(line)
            if match:
                current_file = FileDiff(file_path=match.group(2))
                files.append(current_file)
            else:
                logger.debug("Unrecognized file header skipped: %r", line)
                current_file = None
            continue

        if line.startswith(_SKIPPED_PREFIXES):
            continue

        if line.startswith("@@"):
            if current_file is None:
                logger.debug("Hunk header outside a file skipped: %r", line)
                continue
            hunk = _open_hunk(line)
            if hunk is None:
                logger.debug("Malformed hunk header skipped: %r", line)
                continue
            flush_hunk()
            current_hunk = hunk
            continue

        if current_hunk is not None:
            current_hunk.append(line)

    flush_hunk()
    return files
