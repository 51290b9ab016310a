#!/usr/bin/env python3
"""
Common utilities shared across git-stats commands.
"""

import argparse
import logging
import sys
from pathlib import Path

from gitstats.constants import LOG_FORMAT


def setup_logging(log_level: str | int = "WARNING", log_file: str | None = None) -> None:
    """Setup logging configuration consistently across commands.

    Console output goes to stderr so report tables on stdout stay clean.

    Args:
        log_level: Logging level as string ("INFO", "DEBUG") or integer constant
        log_file: Optional path to log file for file output
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            # If path invalid, keep console logging only
            pass
        else:
            handlers.append(logging.FileHandler(log_file))

    # Handle both string levels ("INFO") and integer levels (logging.INFO)
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, log_level.upper(), logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def add_common_args(
    parser: argparse.ArgumentParser, log_level: str = "WARNING", log_file: str | None = None
) -> None:
    """Add common command-line arguments to an ArgumentParser.

    Args:
        parser: ArgumentParser instance to add arguments to
        log_level: Default for --log-level (usually from the environment)
        log_file: Default for --log-file
    """
    parser.add_argument("--log-level", default=log_level, help="Logging level")
    parser.add_argument("--log-file", default=log_file, help="Optional log file")
