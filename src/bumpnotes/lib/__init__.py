"""Library utilities for version bumping.

Modules:
- git: Release commits via sh
- notes: Patch notes filenames, async write, listing
- paths: Project root detection (configurable via configure())
- semver: Version value type and parsing
- store: SettingsStore protocol and implementations
"""

from bumpnotes.lib.git import commit_release
from bumpnotes.lib.notes import (
    InvalidProductNameError,
    list_patch_notes,
    patch_notes_filename,
    patch_notes_path,
    write_patch_notes,
)
from bumpnotes.lib.semver import Part, Version, VersionParseError, parse_version
from bumpnotes.lib.store import (
    JsonSettingsStore,
    MemorySettingsStore,
    SettingsStore,
    SettingsStoreError,
    UnityProjectSettingsStore,
    open_store,
)

__all__ = [
    # Git
    "commit_release",
    # Notes
    "InvalidProductNameError",
    "list_patch_notes",
    "patch_notes_filename",
    "patch_notes_path",
    "write_patch_notes",
    # Semver
    "Part",
    "Version",
    "VersionParseError",
    "parse_version",
    # Store
    "JsonSettingsStore",
    "MemorySettingsStore",
    "SettingsStore",
    "SettingsStoreError",
    "UnityProjectSettingsStore",
    "open_store",
]
