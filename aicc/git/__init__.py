"""Git porcelain wrappers for aicc.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root
- diff: get_staged_diff
- status: get_staged_files, has_staged_changes, ensure_staged_changes
- history: get_recent_commit_messages, get_commit_message, get_commit_parents,
           resolve_commit, is_ancestor, count_merges_between
- index: reset_index, stage_files, create_commit, amend_head_message,
         format_commit_message
- rewrite: reword_commit, MergeInRangeError
"""

# Exceptions
from aicc.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from aicc.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Diff
from aicc.git.diff import get_staged_diff

# Status utilities
from aicc.git.status import (
    get_staged_files,
    has_staged_changes,
    ensure_staged_changes,
)

# History
from aicc.git.history import (
    get_recent_commit_messages,
    get_commit_message,
    get_commit_parents,
    resolve_commit,
    is_ancestor,
    count_merges_between,
)

# Index and commits
from aicc.git.index import (
    reset_index,
    stage_files,
    create_commit,
    amend_head_message,
    format_commit_message,
)

# Rewriting
from aicc.git.rewrite import (
    MergeInRangeError,
    reword_commit,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    "MergeInRangeError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Diff
    "get_staged_diff",
    # Status
    "get_staged_files",
    "has_staged_changes",
    "ensure_staged_changes",
    # History
    "get_recent_commit_messages",
    "get_commit_message",
    "get_commit_parents",
    "resolve_commit",
    "is_ancestor",
    "count_merges_between",
    # Index
    "reset_index",
    "stage_files",
    "create_commit",
    "amend_head_message",
    "format_commit_message",
    # Rewrite
    "reword_commit",
]
