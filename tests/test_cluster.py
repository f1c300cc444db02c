"""Tests for aicc.compose.cluster."""

from aicc.compose import MAX_HUNKS_PER_DIRECTORY, cluster_hunks
from aicc.compose.cluster import top_level_dir
from aicc.diff import parse_unified_diff


def _diff_with_hunks(file_path: str, count: int) -> str:
    parts = [f"diff --git a/{file_path} b/{file_path}", f"--- a/{file_path}", f"+++ b/{file_path}"]
    for i in range(count):
        start = i * 10 + 1
        parts.append(f"@@ -{start},1 +{start},2 @@")
        parts.append(" context")
        parts.append(f"+added {i}")
    return "\n".join(parts) + "\n"


class TestTopLevelDir:
    def test_nested(self):
        assert top_level_dir("src/pkg/mod.py") == "src"

    def test_top_level_file(self):
        assert top_level_dir("README.md") == "README.md"


class TestClusterHunks:
    """Tests for directory-based clustering."""

    def test_groups_by_directory(self, sample_diff):
        files = parse_unified_diff(sample_diff)

        clusters = cluster_hunks(files)

        assert [c.id for c in clusters] == ["dir-src", "dir-tests"]
        assert clusters[0].files == ["src/main.py"]
        assert clusters[0].hunk_hashes == [h.hash for h in files[0].hunks]
        assert clusters[1].files == ["tests/test_main.py"]
        assert "src" in clusters[0].rationale

    def test_every_hunk_assigned_once(self, sample_diff):
        files = parse_unified_diff(sample_diff)

        clusters = cluster_hunks(files)

        hashes = [h for c in clusters for h in c.hunk_hashes]
        assert sorted(hashes) == sorted(h.hash for f in files for h in f.hunks)

    def test_directory_at_limit_stays_whole(self):
        diff = _diff_with_hunks("lib/a.py", 3) + _diff_with_hunks("lib/b.py", MAX_HUNKS_PER_DIRECTORY - 3)

        clusters = cluster_hunks(parse_unified_diff(diff))

        assert len(clusters) == 1
        assert clusters[0].id == "dir-lib"
        assert clusters[0].files == ["lib/a.py", "lib/b.py"]

    def test_large_directory_split_per_file(self):
        diff = _diff_with_hunks("lib/a.py", 4) + _diff_with_hunks("lib/b.py", 2) + _diff_with_hunks("docs/x.md", 1)

        clusters = cluster_hunks(parse_unified_diff(diff))

        assert [c.id for c in clusters] == ["file-lib/a.py", "file-lib/b.py", "dir-docs"]
        assert len(clusters[0].hunk_hashes) == 4
        assert clusters[1].files == ["lib/b.py"]

    def test_empty_input(self):
        assert cluster_hunks([]) == []
