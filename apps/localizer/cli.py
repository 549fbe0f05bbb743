#!/usr/bin/env python3
"""Report localization keys used by a Lua addon but missing from its translation tables."""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .parser.errors import LocalizationScanError
from .parser.report import RULE, format_missing_report
from .parser.service import LuaLocalizationParser
from .settings import settings


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find L[\"...\"] keys with no translation-table definition.")
    parser.add_argument("addon_dir", help="Root directory of the addon to scan.")
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        help=f"Subdirectory name to skip (repeatable; default: {settings.EXCLUDED_SUBDIRS}).",
    )
    parser.add_argument(
        "--definitions",
        action="append",
        default=None,
        help="Translation-table file, relative to addon_dir unless absolute (repeatable).",
    )
    parser.add_argument("--limit", type=int, default=settings.REPORT_KEY_LIMIT, help="Max plain keys to list.")
    parser.add_argument("--concat-limit", type=int, default=settings.REPORT_CONCAT_LIMIT, help="Max concatenated keys to list.")
    parser.add_argument("--location-limit", type=int, default=settings.REPORT_LOCATION_LIMIT, help="Max locations per concatenated key.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    for flag, value in (("--limit", args.limit), ("--concat-limit", args.concat_limit), ("--location-limit", args.location_limit)):
        if value < 0:
            arg_parser.error(f"{flag} must be >= 0")
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    exclude = settings.excluded_subdirs if args.exclude is None else args.exclude
    definition_files = settings.definition_files if args.definitions is None else args.definitions

    print(f"Parsing addon directory: {args.addon_dir}")
    if exclude:
        print(f"Excluding: {', '.join(exclude)}")
    print(RULE)

    parser = LuaLocalizationParser()
    try:
        report = parser.find_missing_keys(args.addon_dir, definition_files, exclude)
    except LocalizationScanError as e:
        print(f"Error: {e}")
        return 2

    for path, count in report.definition_counts.items():
        print(f"Found {count} defined keys in {os.path.basename(path)}")
    print(f"Total unique defined localization keys: {report.defined_keys}")
    print(RULE)
    for line in format_missing_report(
        report,
        key_limit=args.limit,
        concat_limit=args.concat_limit,
        location_limit=args.location_limit,
    ):
        print(line)

    return 1 if report.missing else 0


if __name__ == "__main__":
    raise SystemExit(main())
