"""Helpers shared by tests that drive real git repositories."""

import subprocess
from pathlib import Path


def run_git(repo: Path, *args: str) -> str:
    """Run a git command in a test repository and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout
