"""Centralized path helpers for the project being versioned.

The project root is auto-detected on first use by walking up from the
current directory to a Unity ``ProjectSettings/ProjectSettings.asset`` or a
``version.json``. Both the root and the notes directory can be overridden
via :func:`configure`::

    from bumpnotes.lib.paths import configure
    configure(root=Path("/my/game"), notes_dir=Path("/my/game/Docs/Notes"))

Layout:
    <root>/ProjectSettings/ProjectSettings.asset
    <root>/version.json
    <root>/PatchNotes/<product> - v<version> patch notes.txt
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

UNITY_SETTINGS_RELPATH = Path("ProjectSettings") / "ProjectSettings.asset"
JSON_SETTINGS_NAME = "version.json"
DEFAULT_NOTES_DIRNAME = "PatchNotes"


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (default: cwd) to a directory holding settings.

    Falls back to ``start`` itself when no marker is found.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        if (parent / UNITY_SETTINGS_RELPATH).exists():
            return parent
        if (parent / JSON_SETTINGS_NAME).exists():
            return parent
    logger.debug("No settings marker found above %s; using it as root", current)
    return current


# -- Mutable path state -------------------------------------------------------
# Detected lazily; overridable via configure().

PROJECT_ROOT: Path | None = None
NOTES_DIR: Path | None = None


def configure(
    *,
    root: Path | None = None,
    notes_dir: Path | None = None,
) -> None:
    """Override auto-detected paths.

    Args:
        root: Project root directory. Resets the notes directory to
            ``root/PatchNotes`` unless ``notes_dir`` is also given.
        notes_dir: Override the notes directory independently. Relative
            paths are resolved against the project root.
    """
    global PROJECT_ROOT, NOTES_DIR  # noqa: PLW0603

    if root is not None:
        PROJECT_ROOT = root
        NOTES_DIR = None

    if notes_dir is not None:
        NOTES_DIR = notes_dir if notes_dir.is_absolute() else project_root() / notes_dir


def reset() -> None:
    """Forget configured paths so the next lookup auto-detects again."""
    global PROJECT_ROOT, NOTES_DIR  # noqa: PLW0603
    PROJECT_ROOT = None
    NOTES_DIR = None


def project_root() -> Path:
    """Return the project root, detecting it on first call."""
    global PROJECT_ROOT  # noqa: PLW0603
    if PROJECT_ROOT is None:
        PROJECT_ROOT = find_project_root()
    return PROJECT_ROOT


def patch_notes_dir() -> Path:
    """Return the notes directory (``<root>/PatchNotes`` by default)."""
    return NOTES_DIR if NOTES_DIR is not None else project_root() / DEFAULT_NOTES_DIRNAME
