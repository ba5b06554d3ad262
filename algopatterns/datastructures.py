"""Exercises on plain integer lists."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def remove_even(arr: Sequence[int]) -> list[int]:
    """Return the odd values of ``arr`` in their original order."""
    return [value for value in arr if value % 2 != 0]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted lists; on ties the value from ``first`` comes first."""
    return list(heapq.merge(first, second))


def two_sum(arr: Sequence[int], k: int) -> tuple[int, int]:
    """Return the first pair ``(value, k - value)`` found whose sum is ``k``.

    Raises ValueError when no such pair exists.
    """
    seen: set[int] = set()
    for value in arr:
        if k - value in seen:
            return value, k - value
        seen.add(value)
    raise ValueError("not found")


def two_sum_or_empty(arr: Sequence[int], k: int) -> list[int]:
    """Like :func:`two_sum`, but return the pair as a list, or ``[]`` if none."""
    try:
        return list(two_sum(arr, k))
    except ValueError:
        return []


def products_except_self(arr: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    result: list[int] = []
    left = 1
    for value in arr:
        result.append(left)
        left *= value

    right = 1
    for position in reversed(range(len(arr))):
        result[position] *= right
        right *= arr[position]
    return result


def find_minimum(arr: Sequence[int]) -> int:
    """Return the smallest value; raises ValueError for an empty list."""
    if not arr:
        raise ValueError("empty list has no minimum")
    return min(arr)


def find_second_maximum(arr: Sequence[int]) -> int:
    """Return the second largest value.

    Both trackers start at the first element, so a list whose first element
    is its maximum yields that maximum.
    """
    if not arr:
        raise ValueError("empty list has no second maximum")
    largest = second = arr[0]
    for value in arr:
        if value > largest:
            second, largest = largest, value
        elif value > second:
            second = value
    return second


def rotate_right(arr: Sequence[int], k: int) -> list[int]:
    """Rotate ``arr`` to the right by ``k`` positions."""
    items = list(arr)
    if k <= 0:
        return items
    if not items:
        raise ValueError("cannot rotate an empty list")
    shift = k % len(items)
    return items[len(items) - shift:] + items[: len(items) - shift]


def rotate_left(arr: Sequence[int], k: int) -> list[int]:
    """Rotate ``arr`` to the left by ``k`` positions."""
    items = list(arr)
    if k <= 0:
        return items
    if not items:
        raise ValueError("cannot rotate an empty list")
    shift = k % len(items)
    return items[shift:] + items[:shift]


def _rearrange(arr: Sequence[int], keep_at_back) -> list[int]:
    front: list[int] = []
    back: list[int] = []
    for value in arr:
        if keep_at_back(value):
            back.append(value)
        else:
            front.append(value)
    # Values sent to the front are prepended one by one, so they end reversed.
    return front[::-1] + back


def rearrange_array(arr: Sequence[int]) -> list[int]:
    """Move negative values to the front; zero counts as non-negative."""
    return _rearrange(arr, lambda value: value >= 0)


def rearrange_array_strict(arr: Sequence[int]) -> list[int]:
    """Move non-positive values to the front; zero goes with the negatives."""
    return _rearrange(arr, lambda value: value > 0)


def arrange_max_min(arr: Sequence[int]) -> list[int]:
    """Alternate elements from the back and the front of a sorted list."""
    result: list[int] = []
    for low, high in zip(arr, reversed(arr)):
        result.append(high)
        if len(result) == len(arr):
            break
        result.append(low)
    return result


def max_sum_sublist(arr: Sequence[int]) -> tuple[list[int], int]:
    """Return the best contiguous sublist found and its running sum.

    The running sum starts from the first element and the scan then visits
    that element again, so a positive first element is counted twice.
    """
    if not arr:
        raise ValueError("empty list has no sublist")
    best_sum = current_sum = arr[0]
    current: list[int] = []
    best: list[int] = []
    for value in arr:
        if current_sum + value > value:
            current_sum += value
            current = [*current, value]
        else:
            current_sum = value
            current = [value]
        if current_sum > best_sum:
            best_sum = current_sum
            best = current
    return best, best_sum


def max_sum_sublist_from_zero(arr: Sequence[int]) -> tuple[list[int], int]:
    """Kadane's scan with the best sum starting at zero.

    Returns the sublist running at the end of the scan and the best sum seen.
    """
    current: list[int] = []
    current_sum = 0
    best_sum = 0
    for value in arr:
        current_sum += value
        if current_sum > value:
            current.append(value)
        else:
            current_sum = value
            current = [value]
        best_sum = max(best_sum, current_sum)
    return current, best_sum