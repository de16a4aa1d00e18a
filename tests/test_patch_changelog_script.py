from __future__ import annotations

from pathlib import Path

import pytest

import patch_changelog

CHANGELOG = """# Changelog

## [Unreleased]

### Security
- rotate signing keys

## [V1.0.1] - 2024-02-14
"""


def test_script_promotes_using_pyproject(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\nversion = "1.0.2"\n', encoding="utf-8"
    )

    status = patch_changelog.main(["--root", str(tmp_path)])

    assert status == 0
    updated = (tmp_path / "CHANGELOG.md").read_text(encoding="utf-8")
    assert "## [V1.0.2] - " in updated
    assert "### Security\n\n- rotate signing keys" in updated
    assert "New version: V1.0.2" in capsys.readouterr().out


def test_script_reports_failure_without_writing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    (tmp_path / "package.json").write_text('{"version": "1.0.1"}', encoding="utf-8")

    status = patch_changelog.main(["--root", str(tmp_path)])

    assert status == 1
    assert "Changelog update failed: Version conflict" in capsys.readouterr().err
    assert (tmp_path / "CHANGELOG.md").read_text(encoding="utf-8") == CHANGELOG
