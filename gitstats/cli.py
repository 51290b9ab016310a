#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from gitstats.analysis.stats import run_stats
from gitstats.constants import DEFAULT_TOP_FILES
from gitstats.utils.common import add_common_args, setup_logging
from gitstats.utils.config import get_stats_config

logger = logging.getLogger(__name__)


def add_stats_command(
    subparsers: argparse._SubParsersAction, top_files: int = DEFAULT_TOP_FILES
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "stats",
        help="Show Git repo stats",
        description=(
            "Analyze a Git repository and show useful insights like contributors and commits."
        ),
    )
    parser.add_argument("-p", "--path", dest="path", default="", help="Path to local git repo")
    parser.set_defaults(handler=_handle_stats, top_files=top_files)
    return parser


def _handle_stats(args: argparse.Namespace) -> int:
    return run_stats(args.path, top_files=args.top_files)


def build_parser() -> argparse.ArgumentParser:
    log_level, log_file, top_files = get_stats_config()
    parser = argparse.ArgumentParser(prog="gitstats", description="Git repository insights")
    add_common_args(parser, log_level=log_level, log_file=log_file)
    subparsers = parser.add_subparsers(dest="command")
    add_stats_command(subparsers, top_files=top_files)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    logger.debug("Running %s command", args.command)
    sys.exit(handler(args))


if __name__ == "__main__":
    main()
