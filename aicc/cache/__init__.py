"""Session cache for aicc.

This package provides:
- models: SessionSnapshot
- paths: get_cache_dir, get_session_file
- session: save_session, load_session, replace_session_commit
"""

from aicc.cache.models import SessionSnapshot
from aicc.cache.paths import (
    SESSION_FILE_NAME,
    get_cache_dir,
    get_session_file,
)
from aicc.cache.session import (
    load_session,
    replace_session_commit,
    save_session,
)

__all__ = [
    "SessionSnapshot",
    "SESSION_FILE_NAME",
    "get_cache_dir",
    "get_session_file",
    "load_session",
    "replace_session_commit",
    "save_session",
]
