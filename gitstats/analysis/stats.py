#!/usr/bin/env python3
"""
Body of the ``stats`` command: contributors and most modified files.

History is walked twice from HEAD, once per table. Failures print a single
line prefixed with the failure marker and end the command.
"""

from __future__ import annotations

import logging
from pathlib import Path

from git import Repo

from gitstats.analysis.aggregation import count_authors, count_file_changes
from gitstats.analysis.errors import GitStatsError, MissingInputError
from gitstats.analysis.git_reader import iter_commit_records, open_repository, resolve_head
from gitstats.analysis.report import print_table, rank_counts
from gitstats.analysis.types import CountTable
from gitstats.constants import (
    CONTRIBUTORS_TITLE,
    CONTRIBUTORS_UNDERLINE,
    CONTRIBUTORS_UNIT,
    DEFAULT_TOP_FILES,
    FAILURE_MARKER,
    FILE_STATS_FAILED_MESSAGE,
    FILES_TITLE,
    FILES_UNDERLINE,
    FILES_UNIT,
    HEAD_FAILED_MESSAGE,
    ITERATE_FAILED_MESSAGE,
    MISSING_PATH_MESSAGE,
    OPEN_FAILED_MESSAGE,
    READ_FAILED_MESSAGE,
)

logger = logging.getLogger(__name__)


def _fail(message: str, exc: Exception | None = None) -> int:
    if exc is None:
        print(f"{FAILURE_MARKER} {message}")
    else:
        logger.debug("%s", message, exc_info=exc)
        # One line per failure, whatever the underlying error text looks like
        detail = " ".join(str(exc).split())
        print(f"{FAILURE_MARKER} {message} {detail}")
    return 1


def collect_stats(repo_path: str | Path | None) -> tuple[CountTable, CountTable]:
    """Return (commits per author, changes per file) without printing anything.

    Library entry point for callers that want the tables as data. Raises the
    ``GitStatsError`` subclasses instead of printing failure lines.
    """
    if not repo_path:
        raise MissingInputError(MISSING_PATH_MESSAGE)
    repo = open_repository(repo_path)
    try:
        head = resolve_head(repo)
        authors = count_authors(iter_commit_records(repo, head))
        files = count_file_changes(iter_commit_records(repo, head, with_changes=True))
    finally:
        repo.close()
    return authors, files


def run_stats(repo_path: str | Path | None, *, top_files: int = DEFAULT_TOP_FILES) -> int:
    """Print both tables for the repository at ``repo_path``.

    Returns 0 on success and 1 after printing an error line.
    """
    if not repo_path:
        return _fail(MISSING_PATH_MESSAGE)

    try:
        repo = open_repository(repo_path)
    except GitStatsError as exc:
        return _fail(OPEN_FAILED_MESSAGE, exc)

    try:
        return _report(repo, top_files)
    finally:
        repo.close()


def _report(repo: Repo, top_files: int) -> int:
    try:
        head = resolve_head(repo)
    except GitStatsError as exc:
        return _fail(HEAD_FAILED_MESSAGE, exc)

    try:
        records = iter_commit_records(repo, head)
    except GitStatsError as exc:
        return _fail(READ_FAILED_MESSAGE, exc)
    try:
        authors = count_authors(records)
    except GitStatsError as exc:
        return _fail(ITERATE_FAILED_MESSAGE, exc)

    print_table(
        CONTRIBUTORS_TITLE, CONTRIBUTORS_UNDERLINE, rank_counts(authors), CONTRIBUTORS_UNIT
    )

    try:
        records = iter_commit_records(repo, head, with_changes=True)
    except GitStatsError as exc:
        return _fail(READ_FAILED_MESSAGE, exc)
    try:
        files = count_file_changes(records)
    except GitStatsError as exc:
        return _fail(FILE_STATS_FAILED_MESSAGE, exc)

    print()
    print_table(FILES_TITLE, FILES_UNDERLINE, rank_counts(files, top_files), FILES_UNIT)
    return 0
