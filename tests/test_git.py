"""Tests for aicc.git against real temporary repositories."""

import pytest

from aicc.diff import parse_unified_diff
from aicc.git import (
    GitError,
    MergeInRangeError,
    NoStagedChangesError,
    create_commit,
    ensure_staged_changes,
    format_commit_message,
    get_commit_message,
    get_recent_commit_messages,
    get_repo_root,
    get_staged_diff,
    get_staged_files,
    has_staged_changes,
    reset_index,
    reword_commit,
    stage_files,
)
from aicc.git.runner import _run_git_command
from tests.helpers import run_git


def _commit_file(repo, name, content, message):
    (repo / name).write_text(content)
    run_git(repo, "add", name)
    run_git(repo, "commit", "-q", "-m", message)
    return run_git(repo, "rev-parse", "HEAD").strip()


class TestRunner:
    """Tests for the git command runner."""

    def test_get_repo_root(self, temp_repo):
        nested = temp_repo / "a" / "b"
        nested.mkdir(parents=True)

        assert get_repo_root(nested).resolve() == temp_repo.resolve()

    def test_not_a_repo(self, tmp_path):
        outside = tmp_path / "plain"
        outside.mkdir()

        with pytest.raises(GitError, match="Not in a git repository"):
            get_repo_root(outside)

    def test_failed_command_raises(self, temp_repo):
        with pytest.raises(GitError, match="git rev-parse"):
            _run_git_command(["rev-parse", "--verify", "no-such-ref"], cwd=temp_repo)

    def test_missing_git_binary(self, mocker):
        mocker.patch("aicc.git.runner.subprocess.run", side_effect=FileNotFoundError)

        with pytest.raises(GitError, match="not installed"):
            _run_git_command(["status"])


class TestStagedChanges:
    """Tests for staged file and diff helpers."""

    def test_nothing_staged(self, temp_repo):
        assert get_staged_files(cwd=temp_repo) == []
        assert has_staged_changes(cwd=temp_repo) is False
        with pytest.raises(NoStagedChangesError):
            ensure_staged_changes(cwd=temp_repo)

    def test_staged_files_and_diff(self, temp_repo):
        (temp_repo / "README.md").write_text("# Test Repo\nMore\n")
        (temp_repo / "new.py").write_text("x = 1\n")
        run_git(temp_repo, "add", "-A")

        assert get_staged_files(cwd=temp_repo) == ["README.md", "new.py"]
        diff = get_staged_diff(cwd=temp_repo)
        assert "diff --git a/README.md b/README.md" in diff
        assert "+More" in diff
        assert diff.endswith("\n")

    def test_unstaged_changes_excluded(self, temp_repo):
        (temp_repo / "README.md").write_text("changed\n")

        assert get_staged_diff(cwd=temp_repo) == ""

    def test_reset_and_stage(self, temp_repo):
        (temp_repo / "a.txt").write_text("a\n")
        (temp_repo / "b.txt").write_text("b\n")
        run_git(temp_repo, "add", "-A")

        reset_index(cwd=temp_repo)
        assert get_staged_files(cwd=temp_repo) == []
        assert (temp_repo / "a.txt").exists()

        stage_files(["b.txt"], cwd=temp_repo)
        assert get_staged_files(cwd=temp_repo) == ["b.txt"]

    def test_stage_deletion(self, temp_repo):
        (temp_repo / "README.md").unlink()

        stage_files(["README.md"], cwd=temp_repo)

        assert get_staged_files(cwd=temp_repo) == ["README.md"]

    def test_non_ascii_path_not_quoted(self, temp_repo):
        (temp_repo / "café.txt").write_text("bonjour\n")
        run_git(temp_repo, "add", "-A")

        assert get_staged_files(cwd=temp_repo) == ["café.txt"]
        diff = get_staged_diff(cwd=temp_repo)
        assert "diff --git a/café.txt b/café.txt" in diff
        assert [f.file_path for f in parse_unified_diff(diff)] == ["café.txt"]

    def test_rename_listed_as_deletion_and_addition(self, temp_repo):
        run_git(temp_repo, "mv", "README.md", "GUIDE.md")

        assert get_staged_files(cwd=temp_repo) == ["GUIDE.md", "README.md"]
        diff = get_staged_diff(cwd=temp_repo)
        assert "deleted file mode" in diff
        assert [f.file_path for f in parse_unified_diff(diff)] == ["GUIDE.md", "README.md"]


class TestHistory:
    """Tests for commit history helpers."""

    def test_recent_messages_newest_first(self, temp_repo):
        _commit_file(temp_repo, "a.txt", "a", "feat: add a\n\nWith a body.")
        _commit_file(temp_repo, "b.txt", "b", "fix: repair b")

        messages = get_recent_commit_messages(5, cwd=temp_repo)

        assert messages == ["fix: repair b", "feat: add a\n\nWith a body.", "Initial commit"]

    def test_recent_messages_limited(self, temp_repo):
        _commit_file(temp_repo, "a.txt", "a", "feat: add a")

        assert get_recent_commit_messages(1, cwd=temp_repo) == ["feat: add a"]
        assert get_recent_commit_messages(0, cwd=temp_repo) == []

    def test_recent_messages_empty_repo(self, tmp_path):
        repo = tmp_path / "empty"
        repo.mkdir()
        run_git(repo, "init", "-q")

        assert get_recent_commit_messages(10, cwd=repo) == []


class TestCommits:
    """Tests for commit creation and rewording."""

    def test_format_commit_message(self):
        assert format_commit_message("feat: x") == "feat: x"
        assert format_commit_message("feat: x", "  body \n") == "feat: x\n\nbody"

    def test_create_commit(self, temp_repo):
        (temp_repo / "a.txt").write_text("a\n")
        run_git(temp_repo, "add", "a.txt")

        commit_hash = create_commit("feat: add a", "Body text", cwd=temp_repo)

        assert commit_hash == run_git(temp_repo, "rev-parse", "HEAD").strip()
        assert get_commit_message("HEAD", cwd=temp_repo) == "feat: add a\n\nBody text"

    def test_reword_head(self, temp_repo):
        _commit_file(temp_repo, "a.txt", "a", "wip")

        reword_commit("HEAD", "feat: add a", cwd=temp_repo)

        assert get_commit_message("HEAD", cwd=temp_repo) == "feat: add a"
        assert run_git(temp_repo, "rev-list", "--count", "HEAD").strip() == "2"

    def test_reword_ancestor_keeps_descendants(self, temp_repo):
        target = _commit_file(temp_repo, "a.txt", "a", "wip a")
        _commit_file(temp_repo, "b.txt", "b", "feat: add b")
        _commit_file(temp_repo, "c.txt", "c", "feat: add c")

        reword_commit(target, "feat: add a", "Reworded.", cwd=temp_repo)

        log = run_git(temp_repo, "log", "--format=%s").split("\n")
        assert log[:4] == ["feat: add c", "feat: add b", "feat: add a", "Initial commit"]
        assert get_commit_message("HEAD~2", cwd=temp_repo) == "feat: add a\n\nReworded."
        assert (temp_repo / "c.txt").read_text() == "c"

    def test_reword_rejects_non_ancestor(self, temp_repo):
        base = run_git(temp_repo, "rev-parse", "HEAD").strip()
        run_git(temp_repo, "checkout", "-q", "-b", "side")
        side = _commit_file(temp_repo, "s.txt", "s", "side work")
        run_git(temp_repo, "checkout", "-q", base)

        with pytest.raises(GitError, match="not an ancestor"):
            reword_commit(side, "feat: side", cwd=temp_repo)

    def test_reword_refuses_merge_in_range(self, temp_repo):
        main_branch = run_git(temp_repo, "rev-parse", "--abbrev-ref", "HEAD").strip()
        target = _commit_file(temp_repo, "a.txt", "a", "wip a")
        run_git(temp_repo, "checkout", "-q", "-b", "feature")
        _commit_file(temp_repo, "f.txt", "f", "feat: f")
        run_git(temp_repo, "checkout", "-q", main_branch)
        _commit_file(temp_repo, "m.txt", "m", "feat: m")
        run_git(temp_repo, "merge", "-q", "--no-ff", "-m", "merge feature", "feature")

        with pytest.raises(MergeInRangeError):
            reword_commit(target, "feat: add a", cwd=temp_repo)

    def test_reword_refuses_merge_commit(self, temp_repo):
        main_branch = run_git(temp_repo, "rev-parse", "--abbrev-ref", "HEAD").strip()
        run_git(temp_repo, "checkout", "-q", "-b", "feature")
        _commit_file(temp_repo, "f.txt", "f", "feat: f")
        run_git(temp_repo, "checkout", "-q", main_branch)
        _commit_file(temp_repo, "m.txt", "m", "feat: m")
        run_git(temp_repo, "merge", "-q", "--no-ff", "-m", "merge feature", "feature")

        with pytest.raises(GitError, match="merge commit"):
            reword_commit("HEAD", "chore: merge", cwd=temp_repo)
