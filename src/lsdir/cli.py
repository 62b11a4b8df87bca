from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import __version__
from .constants import (
    TEXT_ARG_ALL,
    TEXT_ARG_DESC,
    TEXT_ARG_HUMAN,
    TEXT_ARG_LOG_FILE,
    TEXT_ARG_LOG_LEVEL,
    TEXT_ARG_LONG,
    TEXT_ARG_PATHS,
)
from .listing import run_listing
from .logging_config import configure_logging
from .settings import settings
from .types import ListingOptions, ListingRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lsdir", description=TEXT_ARG_DESC)
    parser.add_argument("paths", nargs="*", metavar="PATH", help=TEXT_ARG_PATHS)
    parser.add_argument("-a", "--all", action="store_true", help=TEXT_ARG_ALL)
    parser.add_argument("-l", "--long", action="store_true", help=TEXT_ARG_LONG)
    parser.add_argument(
        "-H",
        "--human-readable",
        action="store_true",
        help=TEXT_ARG_HUMAN,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=TEXT_ARG_LOG_LEVEL,
    )
    parser.add_argument(
        "--log-file",
        default=settings.log_file,
        help=TEXT_ARG_LOG_FILE,
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse CLI arguments for a listing run.

    Logging defaults come from LSDIR_* environment settings.
    """
    return build_parser().parse_args(argv)


def build_request(args: argparse.Namespace) -> ListingRequest:
    """
    Convert parsed arguments into a listing request.

    No positional paths means the current directory.
    """
    options = ListingOptions(
        show_hidden=args.all,
        long_format=args.long,
        human_readable=args.human_readable,
    )
    return ListingRequest.from_paths(args.paths, options)


def main(argv: Sequence[str] | None = None) -> None:
    """
    Entry point for the lsdir command.

    Unreadable targets are reported inline; only unexpected errors exit 1.
    """
    try:
        args = parse_args(argv)
        configure_logging(level=args.log_level, log_file=args.log_file)
        run_listing(build_request(args))
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
