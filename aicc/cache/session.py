"""Session snapshot persistence.

Only the most recent session is kept; each generate or split run
overwrites it, and refine updates it in place.
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from aicc.cache.models import SessionSnapshot
from aicc.cache.paths import get_session_file
from aicc.compose.models import CommitCandidate
from aicc.config import DEFAULT_CACHE_DIR
from aicc.log import get_logger

logger = get_logger(__name__)


def save_session(repo_root: Path, session: SessionSnapshot, cache_dir: str = DEFAULT_CACHE_DIR) -> Path:
    """Write the session snapshot, replacing any previous one.

    Returns:
        Path to the written file.
    """
    session_file = get_session_file(repo_root, cache_dir)
    session_file.write_text(session.model_dump_json(by_alias=True, indent=2))
    return session_file


def load_session(repo_root: Path, cache_dir: str = DEFAULT_CACHE_DIR) -> Optional[SessionSnapshot]:
    """Load the last session snapshot.

    Returns:
        The snapshot, or None if it is missing or unreadable.
    """
    session_file = get_session_file(repo_root, cache_dir)
    if not session_file.exists():
        return None

    try:
        return SessionSnapshot.model_validate_json(session_file.read_text())
    except (OSError, ValidationError) as e:
        logger.warning("Ignoring unreadable session file %s: %s", session_file, e)
        return None


def replace_session_commit(
    repo_root: Path,
    session: SessionSnapshot,
    index: int,
    candidate: CommitCandidate,
    cache_dir: str = DEFAULT_CACHE_DIR,
) -> SessionSnapshot:
    """Replace one commit of the session's plan and save it.

    Args:
        repo_root: The root directory of the git repository.
        session: The loaded session.
        index: 0-based index into the plan's commits.
        candidate: The replacement candidate.

    Returns:
        The updated session.

    Raises:
        IndexError: If index is out of range.
    """
    commits = list(session.plan.commits)
    if not 0 <= index < len(commits):
        raise IndexError(f"Commit index {index} out of range (plan has {len(commits)} commits)")
    commits[index] = candidate

    plan = session.plan.model_copy(update={"commits": commits})
    updated = session.model_copy(update={"plan": plan})
    save_session(repo_root, updated, cache_dir)
    return updated
