"""Commit history utilities.

Contains:
- get_recent_commit_messages: Full messages of the most recent commits
- get_commit_message: Message of a single commit
- get_commit_parents: Parent hashes of a commit
- resolve_commit: Resolve a revision to a full hash
- is_ancestor: Ancestry check between two commits
- count_merges_between: Number of merge commits in a range
"""

from pathlib import Path
from typing import Optional

from aicc.git.exceptions import GitError
from aicc.git.runner import _run_git_command

# Record separator between messages in `git log` output
_RECORD_SEP = "\x1e"


def get_recent_commit_messages(limit: int, cwd: Optional[Path] = None) -> list[str]:
    """Get the most recent commit messages, newest first.

    Args:
        limit: Maximum number of messages to return.

    Returns:
        Full commit messages. Empty for a repository without commits.
    """
    if limit <= 0:
        return []

    try:
        output = _run_git_command(
            ["log", f"-n{limit}", "--format=%B%x1e"],
            cwd=cwd,
            strip=False,
        )
    except GitError:
        # No commits yet
        return []

    messages = [record.strip() for record in output.split(_RECORD_SEP)]
    return [message for message in messages if message]


def resolve_commit(rev: str, cwd: Optional[Path] = None) -> str:
    """Resolve a revision to its full commit hash.

    Raises:
        GitError: If the revision does not name a commit.
    """
    return _run_git_command(["rev-parse", "--verify", f"{rev}^{{commit}}"], cwd=cwd)


def get_commit_message(rev: str, cwd: Optional[Path] = None) -> str:
    return _run_git_command(["log", "-n1", "--format=%B", rev], cwd=cwd)


def get_commit_parents(rev: str, cwd: Optional[Path] = None) -> list[str]:
    output = _run_git_command(["log", "-n1", "--format=%P", rev], cwd=cwd)
    return output.split()


def is_ancestor(ancestor: str, descendant: str, cwd: Optional[Path] = None) -> bool:
    """Check whether one commit is an ancestor of another."""
    try:
        _run_git_command(["merge-base", "--is-ancestor", ancestor, descendant], cwd=cwd)
        return True
    except GitError:
        return False


def count_merges_between(base: str, head: str, cwd: Optional[Path] = None) -> int:
    """Count merge commits reachable from head but not from base."""
    output = _run_git_command(["rev-list", "--merges", f"{base}..{head}"], cwd=cwd)
    return len([line for line in output.split("\n") if line.strip()])
