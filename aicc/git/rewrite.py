"""History rewriting for message-only edits.

Contains:
- reword_commit: Replace the message of HEAD or of a linear ancestor
"""

from pathlib import Path
from typing import Optional

from aicc.git.exceptions import GitError
from aicc.git.history import (
    count_merges_between,
    get_commit_parents,
    is_ancestor,
    resolve_commit,
)
from aicc.git.index import amend_head_message, format_commit_message
from aicc.git.runner import _run_git_command
from aicc.log import get_logger

logger = get_logger(__name__)


class MergeInRangeError(GitError):
    """Raised when merge commits sit between the target and HEAD."""

    pass


def reword_commit(rev: str, title: str, body: str = "", cwd: Optional[Path] = None) -> str:
    """Rewrite the message of a commit.

    HEAD is amended in place. An older commit is recreated with
    ``git commit-tree`` and the commits above it are replayed with
    ``git rebase --onto``; this requires a linear history up to HEAD.

    Args:
        rev: Revision of the commit to reword.
        title: New title.
        body: New body.

    Returns:
        The hash of the rewritten commit.

    Raises:
        GitError: If the commit is a merge, is not an ancestor of HEAD, or
            the rewrite fails.
        MergeInRangeError: If merges exist between the commit and HEAD.
    """
    target = resolve_commit(rev, cwd=cwd)
    head = resolve_commit("HEAD", cwd=cwd)

    parents = get_commit_parents(target, cwd=cwd)
    if len(parents) > 1:
        raise GitError("Refusing to reword a merge commit.")

    if target == head:
        amend_head_message(title, body, cwd=cwd)
        return resolve_commit("HEAD", cwd=cwd)

    if not is_ancestor(target, head, cwd=cwd):
        raise GitError(f"Commit {target[:12]} is not an ancestor of HEAD.")

    if count_merges_between(target, head, cwd=cwd) > 0:
        raise MergeInRangeError(
            f"Merge commits found between {target[:12]} and HEAD; reword it manually with:\n"
            f"  git rebase -i {target[:12]}^"
        )

    tree = _run_git_command(["rev-parse", f"{target}^{{tree}}"], cwd=cwd)
    args = ["commit-tree", tree]
    for parent in parents:
        args += ["-p", parent]
    args += ["-m", format_commit_message(title, body)]
    new_commit = _run_git_command(args, cwd=cwd)
    logger.debug("Recreated %s as %s", target[:12], new_commit[:12])

    branch = _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
    rebase_args = ["rebase", "--onto", new_commit, target]
    if branch != "HEAD":
        rebase_args.append(branch)
    _run_git_command(rebase_args, cwd=cwd)

    return new_commit
