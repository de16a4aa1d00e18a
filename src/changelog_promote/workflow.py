"""File-level changelog promotion workflow."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from changelog_promote.models import ChangelogStatus, PromotionReport
from changelog_promote.release import (
    Category,
    check_release_version,
    extract_unreleased_changes,
    latest_release_version,
    promote_unreleased,
    release_date_text,
)
from changelog_promote.versioning import prefixed_version

LOGGER = logging.getLogger("changelog_promote.workflow")


def pending_entries(changes: dict[Category, str]) -> dict[Category, list[str]]:
    return {
        category: [line for line in text.splitlines() if line.strip()]
        for category, text in changes.items()
        if text
    }


def promote_changelog_file(
    changelog_path: str | Path,
    version: str,
    release_date: date | str | None = None,
    dry_run: bool = False,
) -> tuple[PromotionReport, str]:
    """Promote the Unreleased section of ``changelog_path`` to ``version``.

    The file is only rewritten when the promotion succeeds and ``dry_run`` is
    false. Returns the report together with the updated document text.
    """
    path = Path(changelog_path)
    original = path.read_text(encoding="utf-8")
    effective_date = release_date_text(release_date)

    updated = promote_unreleased(original, version, effective_date)
    previous_version = latest_release_version(original)
    entries = pending_entries(extract_unreleased_changes(original))

    if not dry_run:
        path.write_text(updated, encoding="utf-8")

    report = PromotionReport(
        changelog_path=str(path),
        version=prefixed_version(version),
        release_date=effective_date,
        previous_version=prefixed_version(previous_version) if previous_version else None,
        released_categories=list(entries),
        entry_count=sum(len(lines) for lines in entries.values()),
        written=not dry_run,
    )
    LOGGER.info(
        "changelog_promoted %s",
        json.dumps(report.model_dump(mode="json"), sort_keys=True),
    )
    return report, updated


def inspect_changelog_file(
    changelog_path: str | Path,
    version: str | None = None,
) -> ChangelogStatus:
    """Report the latest release and pending entries without writing.

    When ``version`` is given it is validated the same way a promotion
    would validate it, so conflicts surface before anything is changed.
    """
    path = Path(changelog_path)
    text = path.read_text(encoding="utf-8")
    if version is not None:
        check_release_version(text, version)
    entries = pending_entries(extract_unreleased_changes(text))
    latest = latest_release_version(text)

    status = ChangelogStatus(
        changelog_path=str(path),
        latest_version=prefixed_version(latest) if latest else None,
        pending=entries,
        pending_count=sum(len(lines) for lines in entries.values()),
    )
    LOGGER.info(
        "changelog_inspected %s",
        json.dumps(
            {
                "changelog_path": status.changelog_path,
                "latest_version": status.latest_version,
                "pending_count": status.pending_count,
            },
            sort_keys=True,
        ),
    )
    return status
