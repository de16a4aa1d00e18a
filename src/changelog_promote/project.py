"""Resolve the release version declared by the project."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from changelog_promote.versioning import validate_release_version


def _json_version(payload: Any) -> object:
    if not isinstance(payload, dict):
        return None
    return payload.get("version")


def _toml_version(payload: dict[str, Any]) -> object:
    project = payload.get("project")
    if isinstance(project, dict) and project.get("version"):
        return project["version"]
    poetry = payload.get("tool", {}).get("poetry")
    if isinstance(poetry, dict):
        return poetry.get("version")
    return None


def read_project_version(path: str | Path) -> str:
    """Return the MAJOR.MINOR.PATCH version from ``package.json`` or ``pyproject.toml``.

    JSON files are read for a top-level ``version`` key. Anything else is
    parsed as TOML, checking ``[project]`` before ``[tool.poetry]``.
    """
    project_file = Path(path)
    raw = project_file.read_text(encoding="utf-8")
    try:
        if project_file.suffix == ".json":
            version = _json_version(json.loads(raw))
        else:
            version = _toml_version(tomllib.loads(raw))
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ValueError(f"unable to parse {project_file}: {exc}") from exc

    if not isinstance(version, str) or not version:
        raise ValueError(f"unable to find version field in {project_file}")
    validate_release_version(version)
    return version
