"""changelog-promote command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from changelog_promote.models import ChangelogStatus
from changelog_promote.project import read_project_version
from changelog_promote.settings import Settings, load_settings
from changelog_promote.versioning import prefixed_version, validate_release_version
from changelog_promote.workflow import inspect_changelog_file, promote_changelog_file


def _parse_date_arg(raw: str) -> str:
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {raw!r}, expected YYYY-MM-DD") from exc


def _parse_version_arg(raw: str) -> str:
    try:
        validate_release_version(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return raw


def _add_source_arguments(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument("--changelog", default=settings.changelog_path)
    parser.add_argument(
        "--project-file",
        default=settings.project_file,
        help="pyproject.toml or package.json holding the release version",
    )
    parser.add_argument(
        "--version",
        type=_parse_version_arg,
        default=None,
        help="Release version (MAJOR.MINOR.PATCH); defaults to the project file version",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON report")


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or load_settings()
    parser = argparse.ArgumentParser(description="Promote Unreleased changelog entries")
    subparsers = parser.add_subparsers(dest="command", required=True)

    promote = subparsers.add_parser(
        "promote",
        help="Move Unreleased entries into a new dated release section",
    )
    _add_source_arguments(promote, settings)
    promote.add_argument(
        "--date",
        type=_parse_date_arg,
        default=None,
        help="Release date (YYYY-MM-DD); defaults to today",
    )
    promote.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the updated changelog instead of writing it",
    )

    check = subparsers.add_parser(
        "check",
        help="Show pending entries and validate the release version",
    )
    _add_source_arguments(check, settings)

    return parser


def _print_status(status: ChangelogStatus, version: str | None) -> None:
    print(f"Changelog: {status.changelog_path}")
    print(f"Latest release: {status.latest_version or 'none'}")
    if version is not None:
        print(f"Target version: {prefixed_version(version)}")
    print(f"Pending entries: {status.pending_count}")
    for category, lines in status.pending.items():
        print(f"### {category}")
        for line in lines:
            print(line)


def _run_promote(args: argparse.Namespace) -> int:
    version = args.version or read_project_version(args.project_file)
    report, updated = promote_changelog_file(
        changelog_path=args.changelog,
        version=version,
        release_date=args.date,
        dry_run=args.dry_run,
    )
    if args.json:
        print(json.dumps(report.model_dump(mode="json"), indent=2))
    elif args.dry_run:
        print(f"Dry run: {report.version} not written to {report.changelog_path}")
        print(updated, end="")
    else:
        print(f"Changelog updated successfully. New version: {report.version}")
    return 0


def _run_check(args: argparse.Namespace) -> int:
    version = args.version
    if version is None and Path(args.project_file).exists():
        version = read_project_version(args.project_file)
    status = inspect_changelog_file(args.changelog, version=version)
    if args.json:
        print(json.dumps(status.model_dump(mode="json"), indent=2))
    else:
        _print_status(status, version)
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    try:
        if args.command == "promote":
            return _run_promote(args)
        if args.command == "check":
            return _run_check(args)
    except (OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
