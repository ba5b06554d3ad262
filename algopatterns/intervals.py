"""Inserting and merging closed integer intervals."""

from __future__ import annotations

from collections.abc import Sequence


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, non-overlapping ``intervals``.

    The new interval is merged into the first interval whose end is not
    before its start. It is merged with that one interval only. When every
    interval ends before the new one starts, the intervals are returned
    unchanged.
    """
    new_start, new_end = new_interval[0], new_interval[1]
    result: list[list[int]] = []
    for position, interval in enumerate(intervals):
        start, end = interval[0], interval[1]
        if end >= new_start:
            result.append([min(start, new_start), max(end, new_end)])
            result.extend(list(rest) for rest in intervals[position + 1:])
            return result
        result.append(list(interval))
    return result


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge all overlapping intervals, returned in order of their start.

    Raises ValueError for an empty list.
    """
    if not intervals:
        raise ValueError("no intervals to merge")
    ordered = sorted(intervals, key=lambda interval: interval[0])
    start, end = ordered[0][0], ordered[0][-1]
    result: list[list[int]] = []
    for interval in ordered[1:]:
        if interval[0] <= end:
            end = max(interval[-1], end)
        else:
            result.append([start, end])
            start, end = interval[0], interval[-1]
    result.append([start, end])
    return result