from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from gitstats.analysis.types import CommitRecord, CountTable

logger = logging.getLogger(__name__)


def count_authors(records: Iterable[CommitRecord]) -> CountTable:
    """Count commits per author display name (exact match, no normalization)."""
    counts: Counter[str] = Counter()
    for record in records:
        counts[record.author_name] += 1
    logger.info("Counted %d commits from %d authors", sum(counts.values()), len(counts))
    return dict(counts)


def count_file_changes(records: Iterable[CommitRecord]) -> CountTable:
    """Count, per path, the commits that changed it.

    Root commits are skipped since there is no tree to diff against.
    """
    counts: Counter[str] = Counter()
    commits_seen = 0
    for record in records:
        if record.is_root:
            continue
        commits_seen += 1
        # changed_paths is a set, so each path counts once per commit
        counts.update(record.changed_paths)
    logger.info("Counted changes to %d files across %d commits", len(counts), commits_seen)
    return dict(counts)
