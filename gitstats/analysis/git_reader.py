from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from pathlib import Path

from git import Commit, Repo
from git.exc import (
    BadName,
    BadObject,
    GitCommandError,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

from gitstats.analysis.errors import (
    DiffComputationError,
    HeadResolutionError,
    HistoryReadError,
    RepositoryOpenError,
)
from gitstats.analysis.types import CommitRecord
from gitstats.constants import DEFAULT_REVISION

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    """Collapse a GitPython error into a single line of text."""
    text = str(exc)
    if isinstance(exc, GitCommandError) and exc.stderr:
        # GitPython stores stderr as "\n  stderr: '...'"; keep only git's own text
        text = str(exc.stderr).strip()
        if text.startswith("stderr:"):
            text = text[len("stderr:") :].strip()
        text = text.strip("'")
    return " ".join(text.split())


def open_repository(repo_path: str | Path) -> Repo:
    """Open the repository at ``repo_path`` (made absolute, no parent search)."""
    abs_path = Path(repo_path).expanduser().absolute()
    try:
        repo = Repo(abs_path)
    except NoSuchPathError as exc:
        raise RepositoryOpenError(f"no such path: {abs_path}") from exc
    except InvalidGitRepositoryError as exc:
        raise RepositoryOpenError(f"not a git repository: {abs_path}") from exc
    except OSError as exc:
        raise RepositoryOpenError(f"cannot read {abs_path}: {_describe(exc)}") from exc
    logger.info("📁 Using local repository: %s", abs_path)
    return repo


def resolve_head(repo: Repo) -> str:
    """Return the hex SHA of the commit HEAD points to."""
    try:
        sha = repo.head.commit.hexsha
    except (ValueError, BadName, BadObject, GitCommandError) as exc:
        # An unborn branch (no commits yet) surfaces as ValueError.
        raise HeadResolutionError(_describe(exc) or "reference not found") from exc
    logger.debug("HEAD resolved to %s", sha)
    return sha


def changed_paths(commit: Commit) -> frozenset[str]:
    """Paths added, deleted or modified relative to the first parent."""
    if not commit.parents:
        return frozenset()
    parent = commit.parents[0]
    try:
        diff_index = parent.diff(commit)
    except (GitCommandError, ValueError) as exc:
        raise DiffComputationError(
            f"cannot diff {commit.hexsha[:7]} against {parent.hexsha[:7]}: {_describe(exc)}"
        ) from exc
    # Renames are reported once, under the new path.
    return frozenset(d.b_path or d.a_path for d in diff_index if d.b_path or d.a_path)


def iter_commit_records(
    repo: Repo, start: str = DEFAULT_REVISION, *, with_changes: bool = False
) -> Iterator[CommitRecord]:
    """Lazily yield a ``CommitRecord`` per commit reachable from ``start``.

    The starting commit is read eagerly so an unreadable revision fails before
    anything is yielded. Records come back in ``git rev-list`` order. Each
    call starts an independent traversal.
    """
    try:
        start_commit = repo.commit(start)
    except (ValueError, BadName, BadObject, GitCommandError) as exc:
        raise HistoryReadError(f"cannot read commit {start}: {_describe(exc)}") from exc
    return _walk(repo, start_commit, with_changes)


def _walk(repo: Repo, start_commit: Commit, with_changes: bool) -> Iterator[CommitRecord]:
    start_time = time.time()
    walked = 0
    try:
        for commit in repo.iter_commits(start_commit):
            parents = commit.parents
            yield CommitRecord(
                sha=commit.hexsha,
                author_name=commit.author.name or "",
                parent_shas=tuple(p.hexsha for p in parents),
                changed_paths=changed_paths(commit) if with_changes else frozenset(),
            )
            walked += 1
    except (ValueError, BadObject, GitCommandError) as exc:
        raise HistoryReadError(_describe(exc)) from exc
    logger.info(
        "Walked %d commits from %s in %.2fs",
        walked,
        start_commit.hexsha[:7],
        time.time() - start_time,
    )
