"""Index and commit operations.

Contains:
- reset_index: Unstage everything, keeping the working tree
- stage_files: Stage a list of paths
- create_commit: Commit the index with a title and optional body
- amend_head_message: Replace the message of HEAD
- format_commit_message: Join title and body
"""

from pathlib import Path
from typing import Optional

from aicc.git.runner import _run_git_command


def format_commit_message(title: str, body: str = "") -> str:
    """Join a title and body into a commit message."""
    body = body.strip()
    return f"{title}\n\n{body}" if body else title


def reset_index(cwd: Optional[Path] = None) -> None:
    """Reset the index to HEAD (mixed); the working tree is untouched."""
    _run_git_command(["reset", "-q", "--mixed"], cwd=cwd)


def stage_files(files: list[str], cwd: Optional[Path] = None) -> None:
    """Stage the given paths, including deletions."""
    if not files:
        return
    _run_git_command(["add", "-A", "--"] + list(files), cwd=cwd)


def create_commit(title: str, body: str = "", cwd: Optional[Path] = None) -> str:
    """Create a commit from the current index.

    Args:
        title: Commit title line.
        body: Optional commit body.

    Returns:
        The new commit hash.

    Raises:
        GitError: If the commit fails.
    """
    _run_git_command(["commit", "-m", format_commit_message(title, body)], cwd=cwd)
    return _run_git_command(["rev-parse", "HEAD"], cwd=cwd)


def amend_head_message(title: str, body: str = "", cwd: Optional[Path] = None) -> None:
    """Replace HEAD's message without changing its tree."""
    _run_git_command(
        ["commit", "--amend", "--only", "-m", format_commit_message(title, body)],
        cwd=cwd,
    )
