"""Result models for changelog promotion and inspection."""

from __future__ import annotations

from pydantic import BaseModel, Field

from changelog_promote.release import Category


class PromotionReport(BaseModel):
    changelog_path: str
    version: str
    release_date: str
    previous_version: str | None = None
    released_categories: list[Category] = Field(default_factory=list)
    entry_count: int = Field(default=0, ge=0)
    written: bool = False


class ChangelogStatus(BaseModel):
    changelog_path: str
    latest_version: str | None = None
    pending: dict[Category, list[str]] = Field(default_factory=dict)
    pending_count: int = Field(default=0, ge=0)
