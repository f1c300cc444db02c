"""Staged file status utilities.

Contains:
- get_staged_files: Paths currently staged
- has_staged_changes: Whether anything is staged
- ensure_staged_changes: Raise when nothing is staged
"""

from pathlib import Path
from typing import Optional

from aicc.git.exceptions import NoStagedChangesError
from aicc.git.runner import _run_git_command


def get_staged_files(cwd: Optional[Path] = None) -> list[str]:
    """Get the list of staged file paths.

    Renames are reported as a deletion plus an addition so both sides
    can be staged again after the index is reset.

    Returns:
        Staged paths relative to the repository root.
    """
    output = _run_git_command(
        ["diff", "--cached", "--name-only", "--no-renames", "-z"], cwd=cwd, strip=False
    )
    return [path for path in output.split("\0") if path]


def has_staged_changes(cwd: Optional[Path] = None) -> bool:
    return bool(get_staged_files(cwd))


def ensure_staged_changes(cwd: Optional[Path] = None) -> list[str]:
    """Return the staged files, raising if there are none.

    Raises:
        NoStagedChangesError: If nothing is staged.
    """
    files = get_staged_files(cwd)
    if not files:
        raise NoStagedChangesError("No staged changes.")
    return files
