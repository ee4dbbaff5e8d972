"""Version bumping with patch notes.

Increments the semantic version stored in a project's settings and writes
the release's patch notes to ``PatchNotes/<product> - v<version> patch notes.txt``.

Structure:
- bumpnotes/editor.py: VersionEditor, the pending-version editing session
- bumpnotes/config.py: Configuration via pydantic-settings
- bumpnotes/version.py: This tool's own version

- bumpnotes/lib/: Reusable pieces the editor is built from
  - semver.py: Version value type and parsing
  - store.py: Settings stores (memory, JSON, Unity ProjectSettings.asset)
  - notes.py: Notes filenames, async write, listing
  - paths.py: Project root and notes directory
  - git.py: Release commits

- bumpnotes/cli/: typer command-line interface
"""
