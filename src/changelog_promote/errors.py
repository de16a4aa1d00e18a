"""Errors raised while promoting changelog entries."""

from __future__ import annotations


class ChangelogError(ValueError):
    """Base class for changelog structure and versioning failures."""


class VersionConflictError(ChangelogError):
    """The target version is already released or not above the latest release."""


class StructureError(ChangelogError):
    """The changelog is missing a section the promotion depends on."""
