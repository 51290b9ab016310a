"""
Ranking and plain-text rendering of count tables.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from gitstats.analysis.types import RankedEntry


def rank_counts(table: Mapping[str, int], limit: int | None = None) -> list[RankedEntry]:
    """Order entries by descending count, keeping at most ``limit`` of them.

    Entries with equal counts have no defined relative order.
    """
    ordered = sorted(table.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return [RankedEntry(rank, key, count) for rank, (key, count) in enumerate(ordered, 1)]


def format_table(
    title: str, underline: str, entries: Sequence[RankedEntry], unit: str
) -> list[str]:
    lines = [title, underline]
    lines.extend(f"{entry.key}: {entry.count} {unit}" for entry in entries)
    return lines


def print_table(
    title: str, underline: str, entries: Sequence[RankedEntry], unit: str
) -> None:
    for line in format_table(title, underline, entries, unit):
        print(line)
