#!/usr/bin/env python3
"""Promote CHANGELOG.md Unreleased entries to the project's declared version."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from changelog_promote.project import read_project_version
from changelog_promote.workflow import promote_changelog_file

PROJECT_FILES = ("pyproject.toml", "package.json")


def _default_project_file(root: Path) -> Path:
    for name in PROJECT_FILES:
        candidate = root / name
        if candidate.exists():
            return candidate
    return root / PROJECT_FILES[0]


def run(args: argparse.Namespace) -> int:
    root = Path(args.root)
    project_file = Path(args.project_file) if args.project_file else _default_project_file(root)
    changelog_path = root / args.changelog

    version = read_project_version(project_file)
    report, _ = promote_changelog_file(changelog_path=changelog_path, version=version)

    print(f"Changelog updated successfully. New version: {report.version}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Promote Unreleased changelog entries.")
    parser.add_argument("--root", default=".", help="Project root holding the changelog")
    parser.add_argument("--changelog", default="CHANGELOG.md")
    parser.add_argument(
        "--project-file",
        default="",
        help="Defaults to pyproject.toml, then package.json, under --root",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except (OSError, ValueError) as exc:
        print(f"Changelog update failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
