"""Cache file path utilities for aicc.

Contains functions for getting paths to cache files:
- get_cache_dir: The configured cache directory inside the repository
- get_session_file: Path to the last-session snapshot
"""

from pathlib import Path

from aicc.config import DEFAULT_CACHE_DIR

SESSION_FILE_NAME = "last-session.json"


def get_cache_dir(repo_root: Path, cache_dir: str = DEFAULT_CACHE_DIR) -> Path:
    """Return the cache directory, creating it if needed.

    Args:
        repo_root: The root directory of the git repository.
        cache_dir: Cache directory, relative to repo_root unless absolute.

    Returns:
        Path to the cache directory.
    """
    path = Path(cache_dir).expanduser()
    if not path.is_absolute():
        path = repo_root / path
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_session_file(repo_root: Path, cache_dir: str = DEFAULT_CACHE_DIR) -> Path:
    """Return path to the last-session snapshot file."""
    return get_cache_dir(repo_root, cache_dir) / SESSION_FILE_NAME
