# report/main.py
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from datebook.config import DatebookConfig
from datebook.errors import DatebookError
from datebook.io_rce import load_directory
from datebook.upcoming import next_by_kind, upcoming_frame

from .console import format_agenda, format_summary

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_CONFIG = 2


def _parse_today(value: str) -> date:
    try:
        return datetime.strptime(value, "%d/%m/%Y").date()
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected DD/MM/YYYY, got {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datebook",
        description="Show the next birthdays, saint days, anniversaries, holidays and special dates.",
    )
    parser.add_argument("--dir", help="directory holding the entry files (default: $DATEBOOK_DIR or ./data)")
    parser.add_argument("--ext", help="entry file extension (default: $DATEBOOK_EXT or .rce)")
    parser.add_argument("--today", type=_parse_today, help="reference day as DD/MM/YYYY")
    parser.add_argument("--agenda", action="store_true", help="list every upcoming event instead of a summary")
    parser.add_argument("--limit", type=int, default=None, help="max agenda lines")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DatebookConfig.from_env().replace(directory=args.dir, extension=args.ext)
    _LOGGER.debug("using %s", config)
    try:
        result = load_directory(config)
    except DatebookError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    for problem in result.problems:
        print(problem, file=sys.stderr)

    frame = upcoming_frame(result.events, args.today)
    lines = format_agenda(frame, args.limit) if args.agenda else format_summary(next_by_kind(frame))
    for line in lines:
        print(line)
    return EXIT_OK if result.ok else EXIT_PROBLEMS


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
