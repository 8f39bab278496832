# hoi4loc/app.py
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Dict, List, Optional

from hoi4loc.parsers.paradox_yaml import (
    Localization,
    LocalisationError,
    parse,
    parse_report,
)
from hoi4loc.utils.env import get_lenient_default, get_log_dir, get_log_level
from hoi4loc.utils.fs import collect_localisation_files, read_localisation_file
from hoi4loc.utils.logging_config import LOG_LEVELS, log_manager, setup_logging
from hoi4loc.utils.validation import (
    LOCALISATION_EXTENSIONS,
    PathValidator,
    ValidationError,
)

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_BAD_PATH = 2
EXIT_READ_ERROR = 3

MAX_FILE_SIZE = 64 * 1024 * 1024


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoi4loc",
        description="Parse Hearts of Iron IV localisation files.",
    )
    parser.add_argument("paths", nargs="+", help="localisation files or directories")
    parser.add_argument("--json", action="store_true", help="print parsed units as JSON")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--lenient",
        dest="lenient",
        action="store_true",
        help="skip malformed lines instead of failing",
    )
    mode.add_argument(
        "--strict",
        dest="lenient",
        action="store_false",
        help="fail on the first malformed line (overrides HOI4LOC_LENIENT)",
    )
    parser.set_defaults(lenient=get_lenient_default())
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=get_log_level(),
    )
    parser.add_argument("--log-dir", default=get_log_dir())
    return parser


def _resolve_files(paths: List[str]) -> List[str]:
    files: List[str] = []
    for p in paths:
        if os.path.isdir(p):
            found = collect_localisation_files(str(PathValidator.validate_directory(p)))
        else:
            found = [p]
        for f in found:
            files.append(str(PathValidator.validate_file(
                f, allowed_extensions=LOCALISATION_EXTENSIONS, max_size=MAX_FILE_SIZE
            )))
    return files


def _summary(path: str, locs: List[Localization]) -> str:
    parts = [f"{loc.lang}={len(loc.units)}" for loc in locs]
    return f"{path}: {', '.join(parts) if parts else 'no language headers'}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    setup_logging(log_dir=args.log_dir, level=args.log_level)

    try:
        files = _resolve_files(args.paths)
    except ValidationError as e:
        log_manager.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_PATH

    results: Dict[str, List[dict]] = {}
    status = EXIT_OK
    for path in files:
        try:
            content = read_localisation_file(path)
        except (UnicodeDecodeError, OSError) as e:
            log_manager.error(f"{path}: {e}")
            print(f"error: {path}: {e}", file=sys.stderr)
            return EXIT_READ_ERROR
        if args.lenient:
            report = parse_report(content)
            locs = report.localizations
            if not report.ok:
                status = EXIT_FORMAT_ERROR
        else:
            try:
                locs = parse(content)
            except LocalisationError as e:
                log_manager.error(f"{path}: {e}")
                print(f"error: {path}: {e}", file=sys.stderr)
                return EXIT_FORMAT_ERROR
        results[path] = [loc.to_dict() for loc in locs]
        if not args.json:
            print(_summary(path, locs))

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())
