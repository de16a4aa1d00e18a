"""Promote the Unreleased changelog section to a dated release."""

from __future__ import annotations

import re
from datetime import date
from enum import StrEnum

from changelog_promote.errors import StructureError, VersionConflictError
from changelog_promote.versioning import is_higher_version, prefixed_version


class Category(StrEnum):
    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    REMOVED = "Removed"
    FIXED = "Fixed"
    SECURITY = "Security"


UNRELEASED_HEADING = "## [Unreleased]"

RELEASE_HEADER_PATTERN = re.compile(
    r"^##\s*\[(?:V)?(?P<version>\d+\.\d+\.\d+)\]\s*-\s*\d{4}-\d{2}-\d{2}",
    re.MULTILINE,
)
# Runs to the next top-level heading, or to the end of the document when the
# Unreleased section is the last one.
UNRELEASED_PATTERN = re.compile(
    r"^## \[Unreleased\](?:\n|\Z)(?P<body>.*?)(?=^## |\Z)",
    re.MULTILINE | re.DOTALL,
)
CATEGORY_HEADER_PATTERN = re.compile(r"###[ \t]*(?P<name>\w+)[ \t]*")

_CATEGORY_NAMES = {category.value: category for category in Category}


def latest_release_version(changelog_text: str) -> str | None:
    """Return the numeric version of the first release heading, if any."""
    match = RELEASE_HEADER_PATTERN.search(changelog_text)
    return match.group("version") if match else None


def check_release_version(changelog_text: str, version: str) -> str | None:
    """Validate ``version`` against the latest release and return that release."""
    current = latest_release_version(changelog_text)
    if current is None:
        return None

    new_version = prefixed_version(version)
    if new_version == prefixed_version(current):
        raise VersionConflictError(f"Version conflict: {new_version} is already in CHANGELOG.md")
    if not is_higher_version(version, current):
        raise VersionConflictError(
            f"Version conflict: {new_version} is not higher than {prefixed_version(current)}"
        )
    return current


def find_unreleased_block(changelog_text: str) -> re.Match[str]:
    match = UNRELEASED_PATTERN.search(changelog_text)
    if match is None:
        raise StructureError('Could not find "Unreleased" section in CHANGELOG.md')
    return match


def bucket_unreleased_entries(body: str) -> dict[Category, str]:
    """Group the lines of an Unreleased body under their category headings.

    Category headings are dropped from the output. Lines that appear before
    the first recognised heading are discarded. Each bucket is stripped of
    surrounding whitespace but keeps its interior blank lines.
    """
    buffers: dict[Category, list[str]] = {category: [] for category in Category}
    current: Category | None = None
    for line in body.split("\n"):
        heading = CATEGORY_HEADER_PATTERN.fullmatch(line)
        if heading and heading.group("name") in _CATEGORY_NAMES:
            current = _CATEGORY_NAMES[heading.group("name")]
            continue
        if current is not None:
            buffers[current].append(line + "\n")
    return {category: "".join(lines).strip() for category, lines in buffers.items()}


def extract_unreleased_changes(changelog_text: str) -> dict[Category, str]:
    match = find_unreleased_block(changelog_text)
    return bucket_unreleased_entries(match.group("body"))


def release_date_text(release_date: date | str | None = None) -> str:
    if release_date is None:
        return date.today().isoformat()
    if isinstance(release_date, date):
        return release_date.isoformat()
    return release_date


def changelog_heading(version: str, release_date: date | str | None = None) -> str:
    return f"## [{prefixed_version(version)}] - {release_date_text(release_date)}"


def render_unreleased_section() -> str:
    parts = [f"{UNRELEASED_HEADING}\n\n"]
    parts.extend(f"### {category}\n\n" for category in Category)
    return "".join(parts)


def render_release_section(
    version: str,
    release_date: date | str | None,
    changes: dict[Category, str],
) -> str:
    parts = [f"{changelog_heading(version, release_date)}\n\n"]
    for category in Category:
        bullets = changes.get(category, "")
        if bullets:
            parts.append(f"### {category}\n\n{bullets}\n\n")
    return "".join(parts)


def promote_unreleased(
    changelog_text: str,
    version: str,
    release_date: date | str | None = None,
) -> str:
    """Move pending Unreleased entries into a new release section.

    The Unreleased section is replaced with empty category headings and the
    new release is inserted directly after it. Text before the Unreleased
    heading and after its body is returned unchanged.

    Raises ``VersionConflictError`` when ``version`` is already the latest
    release or is not higher than it, and ``StructureError`` when the
    document has no Unreleased section.
    """
    check_release_version(changelog_text, version)
    match = find_unreleased_block(changelog_text)
    changes = bucket_unreleased_entries(match.group("body"))
    return (
        changelog_text[: match.start()]
        + render_unreleased_section()
        + "\n"
        + render_release_section(version, release_date, changes)
        + changelog_text[match.end() :]
    )
