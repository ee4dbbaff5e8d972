"""Command-line interface for bumping versions and writing patch notes.

Usage:
    uv run bumpnotes show
    uv run bumpnotes bump minor --notes "Fixed the jump bug"
    uv run bumpnotes bump major --notes-file CHANGES.txt --commit
    uv run bumpnotes edit
    uv run bumpnotes list
    uv run python -m bumpnotes.cli --project-root ~/MyGame show
"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from bumpnotes.config import settings
from bumpnotes.editor import ApplyResult, VersionEditor
from bumpnotes.lib import paths
from bumpnotes.lib.git import commit_release
from bumpnotes.lib.notes import (
    InvalidProductNameError,
    list_patch_notes,
    patch_notes_filename,
)
from bumpnotes.lib.semver import VersionParseError
from bumpnotes.lib.store import SettingsStoreError, open_store
from bumpnotes.version import TOOL_VERSION

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bumpnotes",
    help="Bump the project version and write patch notes",
    no_args_is_help=True,
    add_completion=False,
    pretty_exceptions_show_locals=False,
)
console = Console()


class PartChoice(str, Enum):
    major = "major"
    minor = "minor"
    patch = "patch"


class StoreChoice(str, Enum):
    auto = "auto"
    unity = "unity"
    json = "json"


class CliState(BaseModel):
    """Options shared by all commands."""

    store: Literal["auto", "unity", "json"] = "auto"
    settings_file: Path | None = None
    product_name: str | None = None
    auto_commit: bool = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bumpnotes {TOOL_VERSION}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    project_root: Annotated[
        Path | None,
        typer.Option("--project-root", "-C", help="Project root directory"),
    ] = None,
    store: Annotated[
        StoreChoice | None,
        typer.Option("--store", help="Settings store holding the version"),
    ] = None,
    settings_file: Annotated[
        Path | None,
        typer.Option("--settings-file", help="Explicit settings file"),
    ] = None,
    product_name: Annotated[
        str | None,
        typer.Option("--product-name", help="Product name used in notes filenames"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the bumpnotes version",
        ),
    ] = False,
) -> None:
    """Bump the project version and write patch notes."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    root = project_root or settings.project_root
    if root is not None:
        paths.configure(root=root.resolve())
    paths.configure(notes_dir=settings.notes_dir)

    ctx.obj = CliState(
        store=store.value if store else settings.store,
        settings_file=settings_file or settings.settings_file,
        product_name=product_name or settings.product_name,
        auto_commit=settings.auto_commit,
    )


def _open_editor(state: CliState) -> VersionEditor:
    """Build an editor for the configured project, exiting on bad settings."""
    try:
        store = open_store(state.store, settings_file=state.settings_file)
        return VersionEditor(store, product_name=state.product_name)
    except (SettingsStoreError, VersionParseError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _product_name(editor: VersionEditor) -> str:
    try:
        return editor.get_product_name()
    except SettingsStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _apply(editor: VersionEditor) -> ApplyResult | None:
    try:
        return asyncio.run(editor.apply())
    except (SettingsStoreError, InvalidProductNameError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _report(editor: VersionEditor, result: ApplyResult, *, commit: bool) -> None:
    typer.echo(f"Version {result.previous_version} -> {result.version}")
    typer.echo(f"Saved {result.notes_path}")

    if commit:
        release_files = [result.notes_path]
        store_path = getattr(editor.store, "path", None)
        if isinstance(store_path, Path):
            release_files.append(store_path)
        if commit_release(release_files, result.version, cwd=paths.project_root()):
            typer.echo(f"Committed release v{result.version}.")


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the current version and where notes are written."""
    editor = _open_editor(ctx.obj)
    typer.echo(f"Product: {_product_name(editor)}")
    typer.echo(f"Version: {editor.current}")
    typer.echo(f"Notes directory: {editor.notes_dir}")


@app.command()
def bump(
    ctx: typer.Context,
    parts: Annotated[
        list[PartChoice],
        typer.Argument(help="Parts to increment, in order (major, minor, patch)"),
    ],
    notes: Annotated[
        str | None,
        typer.Option("--notes", "-m", help="Patch notes text"),
    ] = None,
    notes_file: Annotated[
        Path | None,
        typer.Option(
            "--notes-file",
            "-F",
            exists=True,
            dir_okay=False,
            help="Read patch notes from a file",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be written"),
    ] = False,
    commit: Annotated[
        bool,
        typer.Option("--commit", help="Commit the release files with git"),
    ] = False,
) -> None:
    """Increment the version and write its patch notes.

    Without --notes or --notes-file, $EDITOR is opened for the notes.
    """
    state: CliState = ctx.obj
    editor = _open_editor(state)

    for part in parts:
        editor.increment(part.value)

    if notes is None and notes_file is not None:
        notes = notes_file.read_text(encoding="utf-8")
    if notes is None and not dry_run:
        marker = f"# Patch notes for {editor.pending}"
        notes = typer.edit(f"\n{marker}\n")
        if notes is not None:
            notes = "\n".join(
                line for line in notes.splitlines() if line.rstrip() != marker
            ).strip()
    editor.set_patch_notes(notes or "")

    if dry_run:
        typer.echo(f"Would update version {editor.current} -> {editor.pending}")
        product = _product_name(editor)
        try:
            filename = patch_notes_filename(product, editor.pending)
        except InvalidProductNameError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        typer.echo(f"Would write {editor.notes_dir / filename}")
        return

    if not editor.is_ready_to_apply():
        typer.echo("Error: patch notes are required.", err=True)
        raise typer.Exit(1)

    result = _apply(editor)
    if result is not None:
        _report(editor, result, commit=commit or state.auto_commit)


@app.command("list")
def list_notes(
    ctx: typer.Context,
    all_products: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include notes for other product names"),
    ] = False,
) -> None:
    """List previously written patch notes, oldest first."""
    state: CliState = ctx.obj
    product: str | None = None
    if not all_products:
        editor = _open_editor(state)
        product = _product_name(editor)

    found = list_patch_notes(paths.patch_notes_dir(), product_name=product)
    if not found:
        typer.echo("No patch notes found.")
        return
    for version, path in found:
        typer.echo(f"v{version}\t{path.name}")


# -- Interactive session ------------------------------------------------------

EDIT_HELP = """Commands:
  major, minor, patch   increment that part of the version
  revert                discard increments and re-read the stored version
  notes [TEXT]          set patch notes (multi-line input ends with '.')
  undo, redo            step through edit history
  apply                 write notes and store the version
  quit                  leave without applying"""


def _print_status(editor: VersionEditor) -> None:
    body = Text()
    body.append(f"Current version - {editor.current}\n")
    body.append(f"Pending version - {editor.pending}\n")
    if editor.is_different():
        lines = editor.patch_notes.count("\n") + 1 if editor.patch_notes else 0
        body.append(f"Patch notes: {lines} line(s)\n")
    body.append(
        "Ready to apply" if editor.is_ready_to_apply() else "Not ready to apply",
        style="green" if editor.is_ready_to_apply() else "yellow",
    )
    console.print(Panel(body, title="Update game version", expand=False))


def _read_multiline() -> str:
    typer.echo("Enter patch notes; finish with a single '.' line.")
    lines: list[str] = []
    while True:
        line = typer.prompt("", default="", show_default=False, prompt_suffix="")
        if line == ".":
            break
        lines.append(line)
    return "\n".join(lines).strip()


@app.command()
def edit(ctx: typer.Context) -> None:
    """Interactively bump the version and write patch notes."""
    state: CliState = ctx.obj
    editor = _open_editor(state)
    typer.echo(EDIT_HELP)

    while True:
        _print_status(editor)
        raw = typer.prompt("Command", default="", show_default=False).strip()
        command, _, arg = raw.partition(" ")
        command = command.lower()

        if command in ("major", "minor", "patch"):
            editor.increment(command)
        elif command == "revert":
            if editor.is_different():
                editor.revert()
            else:
                typer.echo("Nothing to revert.")
        elif command == "notes":
            if not editor.is_different():
                typer.echo("Increment the version before writing notes.")
                continue
            editor.set_patch_notes(arg.strip() or _read_multiline())
        elif command == "undo":
            if not editor.undo():
                typer.echo("Nothing to undo.")
        elif command == "redo":
            if not editor.redo():
                typer.echo("Nothing to redo.")
        elif command == "apply":
            if not editor.is_ready_to_apply():
                typer.echo("Increment the version and write patch notes first.")
                continue
            result = _apply(editor)
            if result is not None:
                _report(editor, result, commit=state.auto_commit)
            return
        elif command in ("quit", "exit", "q"):
            return
        elif command in ("help", "?"):
            typer.echo(EDIT_HELP)
        elif command:
            typer.echo(f"Unknown command: {command}")


if __name__ == "__main__":
    app()
