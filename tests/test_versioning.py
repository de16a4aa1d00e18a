from __future__ import annotations

import pytest

from changelog_promote.versioning import (
    is_higher_version,
    prefixed_version,
    validate_release_version,
    version_parts,
)


@pytest.mark.parametrize(
    ("version", "current", "expected"),
    [
        ("1.2.0", "1.1.9", True),
        ("1.1.9", "1.2.0", False),
        ("1.0.10", "1.0.9", True),
        ("2.0.0", "1.99.99", True),
        ("1.0.1", "1.0.1", False),
        ("1.0", "1.0.0", False),
        ("1.0.0", "1.0", False),
        ("1.0.0.1", "1.0.0", True),
    ],
)
def test_is_higher_version(version: str, current: str, expected: bool) -> None:
    assert is_higher_version(version, current) is expected


def test_non_numeric_segments_count_as_zero() -> None:
    assert version_parts("1.x.3") == (1, 0, 3)
    assert version_parts("") == (0,)
    assert is_higher_version("1.x.0", "1.0.0") is False
    assert is_higher_version("1.0.1", "1.beta.0") is True


def test_is_higher_version_is_antisymmetric() -> None:
    pairs = [("0.1.0", "0.0.9"), ("3.2.1", "3.10.0"), ("1.0", "1.0.0")]
    for left, right in pairs:
        assert not (is_higher_version(left, right) and is_higher_version(right, left))


def test_validate_release_version() -> None:
    validate_release_version("1.2.3")
    with pytest.raises(ValueError):
        validate_release_version("1.2")
    with pytest.raises(ValueError):
        validate_release_version("1.2.3-rc.1")


def test_prefixed_version() -> None:
    assert prefixed_version("1.0.2") == "V1.0.2"
