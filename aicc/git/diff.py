"""Staged diff retrieval.

Contains:
- get_staged_diff: Raw unified diff of the index against HEAD
"""

from pathlib import Path
from typing import Optional

from aicc.git.runner import _run_git_command

STAGED_DIFF_ARGS = [
    "diff",
    "--cached",
    "--unified=3",
    "--no-color",
    "--no-ext-diff",
    "--no-renames",
    "--src-prefix=a/",
    "--dst-prefix=b/",
]


def get_staged_diff(cwd: Optional[Path] = None) -> str:
    """Get the staged diff with three lines of context.

    Output is returned unstripped so trailing context lines survive.

    Returns:
        The raw unified diff text.

    Raises:
        GitError: If the git command fails.
    """
    return _run_git_command(STAGED_DIFF_ARGS, cwd=cwd, strip=False)
