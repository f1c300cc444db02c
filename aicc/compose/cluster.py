"""Directory-based hunk clustering.

A cheap pre-pass that groups hunks into proposed commit buckets before the
model is asked to split. The result is advisory only.
"""

from aicc.compose.models import Cluster
from aicc.diff.models import FileDiff, Hunk

# Directories with more hunks than this are split per file
MAX_HUNKS_PER_DIRECTORY = 5


def top_level_dir(file_path: str) -> str:
    """First path segment; the file name itself for top-level files."""
    return file_path.split("/")[0]


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def cluster_hunks(files: list[FileDiff]) -> list[Cluster]:
    """Group hunks by top-level directory.

    Args:
        files: Parsed file diffs.

    Returns:
        One cluster per top-level directory with at most
        MAX_HUNKS_PER_DIRECTORY hunks; larger directories yield one
        cluster per file instead. Order follows first appearance.
    """
    by_dir: dict[str, list[Hunk]] = {}
    for file_diff in files:
        for hunk in file_diff.hunks:
            by_dir.setdefault(top_level_dir(hunk.file_path), []).append(hunk)

    clusters = []
    for directory, hunks in by_dir.items():
        if len(hunks) <= MAX_HUNKS_PER_DIRECTORY:
            clusters.append(
                Cluster(
                    id=f"dir-{directory}",
                    files=_unique([h.file_path for h in hunks]),
                    hunk_hashes=[h.hash for h in hunks],
                    rationale=f"Changes grouped by directory {directory}",
                )
            )
            continue

        by_file: dict[str, list[Hunk]] = {}
        for hunk in hunks:
            by_file.setdefault(hunk.file_path, []).append(hunk)
        for file_path, file_hunks in by_file.items():
            clusters.append(
                Cluster(
                    id=f"file-{file_path}",
                    files=[file_path],
                    hunk_hashes=[h.hash for h in file_hunks],
                    rationale=f"Large directory; grouped by file {file_path}",
                )
            )

    return clusters
