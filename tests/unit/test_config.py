"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from bumpnotes.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in (
            "BUMPNOTES_PROJECT_ROOT",
            "BUMPNOTES_STORE",
            "BUMPNOTES_SETTINGS_FILE",
            "BUMPNOTES_NOTES_DIR",
            "BUMPNOTES_PRODUCT_NAME",
            "BUMPNOTES_AUTO_COMMIT",
        ):
            monkeypatch.delenv(name, raising=False)

        s = Settings()

        assert s.project_root is None
        assert s.store == "auto"
        assert s.notes_dir == Path("PatchNotes")
        assert s.product_name is None
        assert s.auto_commit is False

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BUMPNOTES_STORE", "json")
        monkeypatch.setenv("BUMPNOTES_NOTES_DIR", "Docs/Notes")
        monkeypatch.setenv("BUMPNOTES_PRODUCT_NAME", "Space Game")
        monkeypatch.setenv("BUMPNOTES_AUTO_COMMIT", "true")

        s = Settings()

        assert s.store == "json"
        assert s.notes_dir == Path("Docs/Notes")
        assert s.product_name == "Space Game"
        assert s.auto_commit is True

    def test_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("BUMPNOTES_PRODUCT_NAME", raising=False)
        (tmp_path / ".env").write_text("BUMPNOTES_PRODUCT_NAME=From Env File\n")

        assert Settings().product_name == "From Env File"

    def test_invalid_store(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BUMPNOTES_STORE", "yaml")
        with pytest.raises(ValueError):
            Settings()
