"""Version string helpers for changelog releases."""

from __future__ import annotations

import re

VERSION_PREFIX = "V"
VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")


def validate_release_version(version: str) -> None:
    if not VERSION_PATTERN.match(version):
        raise ValueError("version must match MAJOR.MINOR.PATCH (e.g. 0.2.0)")


def prefixed_version(version: str) -> str:
    return f"{VERSION_PREFIX}{version}"


def _coerce_segment(segment: str) -> int:
    try:
        return int(segment)
    except ValueError:
        return 0


def version_parts(version: str) -> tuple[int, ...]:
    """Split a dotted version into integers; non-numeric segments count as 0."""
    return tuple(_coerce_segment(segment) for segment in version.split("."))


def is_higher_version(version: str, current: str) -> bool:
    """Return True when ``version`` is strictly greater than ``current``.

    Segments are compared left to right as integers. A missing trailing
    segment is treated as 0, so ``1.0`` and ``1.0.0`` are equal.
    """
    version_values = version_parts(version)
    current_values = version_parts(current)
    width = max(len(version_values), len(current_values))
    for index in range(width):
        left = version_values[index] if index < len(version_values) else 0
        right = current_values[index] if index < len(current_values) else 0
        if left > right:
            return True
        if left < right:
            return False
    return False
