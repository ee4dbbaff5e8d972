"""Git operations for release files."""

import logging
from collections.abc import Iterable
from pathlib import Path

import sh

logger = logging.getLogger(__name__)


def commit_release(paths: Iterable[Path], version: str, *, cwd: Path | None = None) -> bool:
    """Stage the release files and commit them as ``release: v<version>``.

    Returns True if a commit was made. Git failures are logged, not raised:
    the version and notes are already written by the time this runs.
    """
    release_files = [str(path) for path in paths]
    try:
        git = sh.Command("git").bake(_cwd=str(cwd) if cwd else None)
        git.add("--", *release_files)

        # Other staged changes stay in the index.
        diff = str(
            git.diff("--cached", "--stat", "--", *release_files, _ok_code=[0, 1])
        ).strip()
        if not diff:
            logger.info("Nothing staged for v%s", version)
            return False

        git.commit("-m", f"release: v{version}", "--", *release_files)
    except (sh.ErrorReturnCode, sh.CommandNotFound) as e:
        logger.warning("Release commit failed: %s", e)
        return False

    logger.info("Committed release v%s", version)
    return True
