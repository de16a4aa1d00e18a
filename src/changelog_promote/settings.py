"""Runtime settings for changelog promotion."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    changelog_path: str
    project_file: str
    log_level: str


def load_settings() -> Settings:
    return Settings(
        changelog_path=os.getenv("CHANGELOG_PROMOTE_CHANGELOG_PATH", "CHANGELOG.md"),
        project_file=os.getenv("CHANGELOG_PROMOTE_PROJECT_FILE", "pyproject.toml"),
        log_level=os.getenv("CHANGELOG_PROMOTE_LOG_LEVEL", "WARNING").upper(),
    )
