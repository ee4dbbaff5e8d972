"""Version editor: pending version, patch notes, and apply.

The editor holds the version being prepared and its notes, compares it
against the version in a :class:`~bumpnotes.lib.store.SettingsStore`, and
on :meth:`VersionEditor.apply` writes the notes file and then the new
version. Presentation layers (the CLI here) call its public methods in
response to user actions.

Examples:
    >>> store = MemorySettingsStore(version="1.2.3", product_name="Game")
    >>> editor = VersionEditor(store, notes_dir=Path("/tmp/notes"))
    >>> editor.increment_minor()
    >>> str(editor.pending), editor.is_different()
    ('1.3.0', True)
    >>> editor.is_ready_to_apply()
    False
    >>> editor.set_patch_notes("Fixed a bug")
    >>> editor.is_ready_to_apply()
    True
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from bumpnotes.lib.notes import patch_notes_path, write_patch_notes
from bumpnotes.lib.paths import patch_notes_dir
from bumpnotes.lib.semver import Part, Version, parse_version
from bumpnotes.lib.store import MemorySettingsStore, SettingsStore

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100


class EditorSnapshot(BaseModel):
    """Undoable editor state."""

    model_config = ConfigDict(frozen=True)

    label: str
    major: int
    minor: int
    patch: int
    patch_notes: str


class ApplyResult(BaseModel):
    """Outcome of a successful apply."""

    previous_version: str
    version: str
    notes_path: Path = Field(description="Notes file that was written")


class VersionEditor:
    """Editing session for the next release version.

    Args:
        store: Settings store holding the current version and product name.
        notes_dir: Directory for notes files (default: project ``PatchNotes``).
        product_name: Overrides the store's product name in notes filenames.
        history_limit: Maximum number of undo steps kept.

    Raises:
        VersionParseError: If the stored version is malformed.
    """

    def __init__(
        self,
        store: SettingsStore,
        *,
        notes_dir: Path | None = None,
        product_name: str | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.store = store
        self.notes_dir = notes_dir or patch_notes_dir()
        self.product_name = product_name
        self.history_limit = history_limit

        self.major = 0
        self.minor = 0
        self.patch = 0
        self.patch_notes = ""
        self._current = Version()

        self._undo: list[EditorSnapshot] = []
        self._redo: list[EditorSnapshot] = []
        self._applying = False

        self.reset()

    # -- State ---------------------------------------------------------------

    @property
    def pending(self) -> Version:
        return Version(major=self.major, minor=self.minor, patch=self.patch)

    @property
    def current(self) -> Version:
        return self._current

    @property
    def applying(self) -> bool:
        """True while an apply is writing files."""
        return self._applying

    def reset(self) -> Version:
        """Re-read the stored version and copy it into the pending fields."""
        self._current = parse_version(self.store.get_version())
        self.major = self._current.major
        self.minor = self._current.minor
        self.patch = self._current.patch
        return self._current

    def is_different(self) -> bool:
        return self.pending > self._current

    def is_ready_to_apply(self) -> bool:
        return self.is_different() and bool(self.patch_notes)

    # -- Edits ---------------------------------------------------------------

    def _set_pending(self, version: Version) -> None:
        self.major, self.minor, self.patch = version.as_tuple()

    def _bump(self, part: Part) -> None:
        bumped = self.pending.bump(part)
        self._record(f"Increment {part} version")
        self._set_pending(bumped)

    def increment_major(self) -> None:
        self._bump("major")

    def increment_minor(self) -> None:
        self._bump("minor")

    def increment_patch(self) -> None:
        self._bump("patch")

    def increment(self, part: Part) -> None:
        """Increment by part name (``major``, ``minor`` or ``patch``)."""
        self._bump(part)

    def revert(self) -> Version:
        """Discard pending increments, keeping the step undoable."""
        self._record("Revert version")
        return self.reset()

    def set_patch_notes(self, text: str) -> None:
        if text == self.patch_notes:
            return
        self._record("Change patch note text")
        self.patch_notes = text

    # -- Undo / redo ---------------------------------------------------------

    def _snapshot(self, label: str) -> EditorSnapshot:
        return EditorSnapshot(
            label=label,
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            patch_notes=self.patch_notes,
        )

    def _restore(self, snapshot: EditorSnapshot) -> None:
        self.major = snapshot.major
        self.minor = snapshot.minor
        self.patch = snapshot.patch
        self.patch_notes = snapshot.patch_notes

    def _record(self, label: str) -> None:
        self._undo.append(self._snapshot(label))
        if len(self._undo) > self.history_limit:
            del self._undo[0]
        self._redo.clear()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> bool:
        """Restore the state before the last edit. Returns False if none."""
        if not self._undo:
            return False
        snapshot = self._undo.pop()
        self._redo.append(self._snapshot(snapshot.label))
        self._restore(snapshot)
        logger.debug("Undid: %s", snapshot.label)
        return True

    def redo(self) -> bool:
        """Re-apply the last undone edit. Returns False if none."""
        if not self._redo:
            return False
        snapshot = self._redo.pop()
        self._undo.append(self._snapshot(snapshot.label))
        self._restore(snapshot)
        logger.debug("Redid: %s", snapshot.label)
        return True

    # -- Apply ---------------------------------------------------------------

    def get_product_name(self) -> str:
        return self.product_name or self.store.get_product_name()

    def notes_path(self) -> Path:
        """Where the notes for the pending version will be written."""
        return patch_notes_path(
            self.get_product_name(), self.pending, notes_dir=self.notes_dir
        )

    async def apply(self) -> ApplyResult | None:
        """Write the notes file, then store the pending version.

        Returns None without side effects when the editor is not ready or
        another apply is still running. The store is only updated after the
        notes are on disk; if the store update fails, a notes file created
        by this call is removed before the error propagates.

        Raises:
            OSError: If the notes directory or file cannot be written.
            SettingsStoreError: If the store cannot be updated.
        """
        if not self.is_ready_to_apply():
            logger.debug("Apply skipped: nothing ready to apply")
            return None
        if self._applying:
            logger.warning("Apply already in progress; ignoring")
            return None

        self._applying = True
        try:
            previous = self._current
            version = self.pending
            path = self.notes_path()
            existed = path.exists()

            await write_patch_notes(path, self.patch_notes)
            try:
                self.store.set_version(str(version))
            except Exception:
                if not existed:
                    path.unlink(missing_ok=True)
                raise
            logger.info("Updated version %s -> %s", previous, version)
        finally:
            self._applying = False

        self.reset()
        self.patch_notes = ""
        self._undo.clear()
        self._redo.clear()

        return ApplyResult(
            previous_version=str(previous),
            version=str(version),
            notes_path=path,
        )


def create_editor(
    version: str = "0.1.0",
    product_name: str = "Product",
    *,
    notes_dir: Path | None = None,
) -> VersionEditor:
    """Editor over an in-memory store, for embedding and scripting."""
    return VersionEditor(
        MemorySettingsStore(version=version, product_name=product_name),
        notes_dir=notes_dir,
    )
