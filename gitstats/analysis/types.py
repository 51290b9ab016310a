"""
Typed data structures flowing through the stats pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

# Author name or file path -> number of commits / changes.
CountTable = dict[str, int]


@dataclass(frozen=True)
class CommitRecord:
    """Read-only view of one commit produced while walking history.

    ``changed_paths`` holds the paths that differ from the first parent. It is
    empty for root commits and when the traversal was run without diffs.
    """

    sha: str
    author_name: str
    parent_shas: tuple[str, ...] = ()
    changed_paths: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_root(self) -> bool:
        return not self.parent_shas


class RankedEntry(NamedTuple):
    rank: int
    key: str
    count: int
