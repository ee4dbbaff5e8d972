"""Integration tests for release commits.

Requires git on PATH.
"""

import shutil
from pathlib import Path

import pytest
import sh

from bumpnotes.lib.git import commit_release

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git not installed"),
]


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """An empty git repository with a committer identity."""
    git = sh.Command("git").bake(_cwd=str(tmp_path))
    git.init("-q")
    git.config("user.email", "dev@example.com")
    git.config("user.name", "Dev")
    git.config("commit.gpgsign", "false")
    return tmp_path


class TestCommitRelease:
    def test_commits_release_files(self, repo: Path) -> None:
        notes = repo / "PatchNotes" / "Game - v1.0.0 patch notes.txt"
        notes.parent.mkdir()
        notes.write_text("first release", encoding="utf-8")

        assert commit_release([notes], "1.0.0", cwd=repo)

        git = sh.Command("git").bake(_cwd=str(repo))
        assert str(git.log("-1", "--format=%s")).strip() == "release: v1.0.0"

    def test_unrelated_staged_work_left_out(self, repo: Path) -> None:
        """Only the release files go into the release commit."""
        git = sh.Command("git").bake(_cwd=str(repo))
        (repo / "README.md").write_text("base", encoding="utf-8")
        git.add("README.md")
        git.commit("-q", "-m", "initial")

        (repo / "wip.py").write_text("print(1)", encoding="utf-8")
        git.add("wip.py")
        notes = repo / "notes.txt"
        notes.write_text("release notes", encoding="utf-8")

        assert commit_release([notes], "1.0.0", cwd=repo)

        committed = str(git.show("--name-only", "--format=", "HEAD")).split()
        assert committed == ["notes.txt"]
        staged = str(git.diff("--cached", "--name-only")).split()
        assert staged == ["wip.py"]

    def test_nothing_to_commit(self, repo: Path) -> None:
        notes = repo / "notes.txt"
        notes.write_text("x", encoding="utf-8")
        assert commit_release([notes], "1.0.0", cwd=repo)

        assert not commit_release([notes], "1.0.0", cwd=repo)

    def test_failure_is_reported_not_raised(self, tmp_path: Path) -> None:
        assert not commit_release([tmp_path / "missing.txt"], "1.0.0", cwd=tmp_path)
