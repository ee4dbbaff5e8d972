"""Tool version tracking.

This is the version of bumpnotes itself, not of the projects it edits.
"""

TOOL_VERSION = "0.1.0"
