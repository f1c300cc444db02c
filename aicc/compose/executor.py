"""Split executor: turn a multi-commit plan into real commits.

Each candidate is committed in turn by resetting the index, staging only
that candidate's files and committing. The working tree is never touched.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from aicc.compose.models import CommitCandidate
from aicc.git import (
    GitError,
    create_commit,
    get_staged_files,
    reset_index,
    stage_files,
)
from aicc.log import get_logger

logger = get_logger(__name__)


@dataclass
class SplitResult:
    """Outcome of executing a split plan.

    Attributes:
        created: (candidate, files, commit hash) for each commit made
        skipped: (candidate, reason) for each candidate not committed
        unassigned: Originally staged files no candidate claimed; they are
            left unstaged
    """

    created: list[tuple[CommitCandidate, list[str], str]] = field(default_factory=list)
    skipped: list[tuple[CommitCandidate, str]] = field(default_factory=list)
    unassigned: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.created)


def assignments_are_valid(candidates: list[CommitCandidate], staged_files: list[str]) -> bool:
    """Whether the model's file assignments can be used as-is.

    Every candidate needs a non-empty files list, and every listed path
    must be among the staged files.
    """
    if not candidates:
        return False
    staged = set(staged_files)
    for candidate in candidates:
        if not candidate.files:
            return False
        if not set(candidate.files) <= staged:
            return False
    return True


def round_robin_assignments(count: int, staged_files: list[str]) -> list[list[str]]:
    """Deal staged files out to count buckets in order."""
    buckets: list[list[str]] = [[] for _ in range(count)]
    if count == 0:
        return buckets
    for i, file_path in enumerate(staged_files):
        buckets[i % count].append(file_path)
    return buckets


def resolve_file_assignments(candidates: list[CommitCandidate], staged_files: list[str]) -> list[list[str]]:
    """Decide which files each candidate commits.

    Uses the model's ``files`` arrays when they are valid for the staged
    set, otherwise falls back to round-robin over the staged files.

    Args:
        candidates: Split candidates, in commit order.
        staged_files: Files staged before the split.

    Returns:
        One file list per candidate.
    """
    if assignments_are_valid(candidates, staged_files):
        return [list(dict.fromkeys(c.files)) for c in candidates]

    logger.debug("Model file assignments unusable; falling back to round-robin")
    return round_robin_assignments(len(candidates), staged_files)


def execute_split(
    candidates: list[CommitCandidate],
    staged_files: list[str],
    repo_root: Optional[Path] = None,
    assignments: Optional[list[list[str]]] = None,
) -> SplitResult:
    """Create one commit per candidate from the staged files.

    Args:
        candidates: Candidates with final titles, in commit order.
        staged_files: Files staged before the split.
        repo_root: Repository to operate on.
        assignments: Precomputed file lists; resolved when omitted.

    Returns:
        A SplitResult. Failures on individual candidates are recorded as
        skipped rather than raised.
    """
    if assignments is None:
        assignments = resolve_file_assignments(candidates, staged_files)

    result = SplitResult()
    claimed = {f for files in assignments for f in files}
    result.unassigned = [f for f in staged_files if f not in claimed]

    for candidate, files in zip(candidates, assignments):
        try:
            reset_index(cwd=repo_root)
            if not files:
                result.skipped.append((candidate, "no files assigned"))
                continue

            stage_files(files, cwd=repo_root)
            if not get_staged_files(cwd=repo_root):
                result.skipped.append((candidate, "nothing staged"))
                continue

            commit_hash = create_commit(candidate.title, candidate.body, cwd=repo_root)
        except GitError as e:
            logger.warning("Commit '%s' failed: %s", candidate.title, e)
            result.skipped.append((candidate, str(e)))
            continue

        logger.debug("Created %s for %s", commit_hash[:8], files)
        result.created.append((candidate, files, commit_hash))

    return result
