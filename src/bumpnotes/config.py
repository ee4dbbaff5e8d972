"""Configuration management using pydantic-settings.

Values come from the environment or from ``.env`` / ``.env.local`` in the
working directory (local overrides shared). CLI options take precedence over
everything here.

Usage:
    from bumpnotes.config import settings
    print(settings.notes_dir)
"""

import logging
from pathlib import Path
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bumpnotes.lib.paths import DEFAULT_NOTES_DIRNAME

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Tool settings loaded from ``BUMPNOTES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def warn_conflicting_store(self) -> Self:
        """Warn when an explicit settings file contradicts the store kind."""
        if self.settings_file is not None and self.store != "auto":
            suffix_kind = "json" if self.settings_file.suffix == ".json" else "unity"
            if suffix_kind != self.store:
                logger.warning(
                    "BUMPNOTES_SETTINGS_FILE %s looks like a %s file but "
                    "BUMPNOTES_STORE is %s",
                    self.settings_file,
                    suffix_kind,
                    self.store,
                )
        return self

    # ==========================================================================
    # PROJECT
    # ==========================================================================

    project_root: Path | None = Field(
        default=None,
        validation_alias="BUMPNOTES_PROJECT_ROOT",
        description="Project root (None = walk up from cwd)",
    )

    store: Literal["auto", "unity", "json"] = Field(
        default="auto",
        validation_alias="BUMPNOTES_STORE",
        description="Which settings store holds the version",
    )

    settings_file: Path | None = Field(
        default=None,
        validation_alias="BUMPNOTES_SETTINGS_FILE",
        description="Explicit settings file (None = default location under root)",
    )

    # ==========================================================================
    # NOTES
    # ==========================================================================

    notes_dir: Path = Field(
        default=Path(DEFAULT_NOTES_DIRNAME),
        validation_alias="BUMPNOTES_NOTES_DIR",
        description="Patch notes directory, relative to the project root",
    )

    product_name: str | None = Field(
        default=None,
        validation_alias="BUMPNOTES_PRODUCT_NAME",
        description="Product name for notes files (None = read from the store)",
    )

    # ==========================================================================
    # GIT
    # ==========================================================================

    auto_commit: bool = Field(
        default=False,
        validation_alias="BUMPNOTES_AUTO_COMMIT",
        description="Commit the notes and settings files after applying",
    )


# Singleton instance
settings = Settings()
