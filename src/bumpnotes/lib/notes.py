"""Patch notes files.

One UTF-8 text file per release, named after the product and version and
containing exactly the notes text::

    PatchNotes/My Game - v1.3.0 patch notes.txt

Usage:
    from bumpnotes.lib.notes import patch_notes_path, write_patch_notes

    path = patch_notes_path("My Game", version)
    await write_patch_notes(path, "Fixed the jump bug.")
"""

import asyncio
import logging
import re
from pathlib import Path

from bumpnotes.lib.paths import patch_notes_dir
from bumpnotes.lib.semver import Version, parse_version

logger = logging.getLogger(__name__)

_FILENAME_RE = re.compile(r"^(?P<product>.*) - v(?P<version>\d+\.\d+\.\d+) patch notes\.txt$")
_FORBIDDEN_CHARS = ("/", "\\", "\0")


class InvalidProductNameError(ValueError):
    """Raised when a product name cannot be used inside a filename."""


def patch_notes_filename(product_name: str, version: Version | str) -> str:
    """Compose ``"<product> - v<version> patch notes.txt"``.

    Raises:
        InvalidProductNameError: If the product name is empty or contains a
            path separator, which would place the file outside the notes
            directory.
    """
    if not product_name.strip() or any(c in product_name for c in _FORBIDDEN_CHARS):
        raise InvalidProductNameError(
            f"Product name {product_name!r} cannot be used in a notes filename"
        )
    return f"{product_name} - v{version} patch notes.txt"


def patch_notes_path(
    product_name: str,
    version: Version | str,
    notes_dir: Path | None = None,
) -> Path:
    """Full path of the notes file for a release.

    Args:
        product_name: Product name embedded in the filename.
        version: Release version.
        notes_dir: Directory for notes files; defaults to
            :func:`bumpnotes.lib.paths.patch_notes_dir`.
    """
    return (notes_dir or patch_notes_dir()) / patch_notes_filename(product_name, version)


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="")


async def write_patch_notes(path: Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating the directory and overwriting.

    The blocking write runs in a worker thread so callers on an event loop
    stay responsive. Errors from directory creation or the write propagate.
    """
    await asyncio.to_thread(_write, path, text)
    logger.info("Wrote patch notes to %s", path)
    return path


def list_patch_notes(
    notes_dir: Path | None = None,
    product_name: str | None = None,
) -> list[tuple[Version, Path]]:
    """Return previously written notes files sorted by version (oldest first).

    Files whose names do not follow the notes naming scheme are skipped.
    """
    base = notes_dir or patch_notes_dir()
    if not base.exists():
        return []

    found: list[tuple[Version, Path]] = []
    for path in base.glob("*.txt"):
        m = _FILENAME_RE.match(path.name)
        if m is None:
            continue
        if product_name is not None and m.group("product") != product_name:
            continue
        found.append((parse_version(m.group("version")), path))

    found.sort(key=lambda item: (item[0].as_tuple(), item[1].name))
    return found
