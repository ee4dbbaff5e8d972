"""Shared test fixtures.

Add fixtures here that are used across multiple test files.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

from bumpnotes.editor import VersionEditor
from bumpnotes.lib import paths
from bumpnotes.lib.store import MemorySettingsStore

UNITY_ASSET_TEMPLATE = """%YAML 1.1
%TAG !u! tag:unity3d.com,2011:
--- !u!129 &1
PlayerSettings:
  m_ObjectHideFlags: 0
  serializedVersion: 26
  companyName: Output Enable
  productName: {product}
  defaultCursor: {{fileID: 0}}
  bundleVersion: {version}
  preloadedAssets: []
  metroPackageVersion: 1.0.0.0
"""


@pytest.fixture(autouse=True)
def _reset_paths() -> Iterator[None]:
    """Forget configured project paths between tests."""
    paths.reset()
    yield
    paths.reset()


@pytest.fixture
def store() -> MemorySettingsStore:
    """In-memory store at version 1.2.3."""
    return MemorySettingsStore(version="1.2.3", product_name="Test Game")


@pytest.fixture
def editor(store: MemorySettingsStore, tmp_path: Path) -> VersionEditor:
    """Editor over the in-memory store, writing notes under tmp_path."""
    return VersionEditor(store, notes_dir=tmp_path / "PatchNotes")


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """A minimal Unity project at version 0.4.2."""
    root = tmp_path / "MyGame"
    asset = root / "ProjectSettings" / "ProjectSettings.asset"
    asset.parent.mkdir(parents=True)
    asset.write_text(
        UNITY_ASSET_TEMPLATE.format(product="My Game", version="0.4.2"),
        encoding="utf-8",
    )
    return root
