"""Sliding window problems over lists and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def average_of_subarrays(arr: Sequence[int], k: int) -> list[float]:
    """Return the average of every contiguous window of ``k`` elements."""
    if k <= 0:
        return []
    result: list[float] = []
    total = 0
    for end, value in enumerate(arr):
        total += value
        if end >= k - 1:
            result.append(total / k)
            total -= arr[end - k + 1]
    return result


def max_fruits_in_baskets(fruits: Sequence[str]) -> int:
    """Return the longest run of trees holding at most two fruit types."""
    best = 0
    left = 0
    counts: Counter[str] = Counter()
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        while len(counts) > 2:
            dropped = fruits[left]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
            left += 1
        best = max(best, right + 1 - left)
    return best


def longest_distinct_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    left = 0
    best = 0
    last_seen: dict[str, int] = {}
    for index, char in enumerate(s):
        if char in last_seen:
            left = max(left, last_seen[char] + 1)
        last_seen[char] = index
        best = max(best, index - left + 1)
    return best


def longest_substring_with_k_distinct(s: str, k: int) -> int:
    """Return the length of the longest substring with at most ``k`` distinct characters."""
    left = 0
    best = 0
    counts: Counter[str] = Counter()
    for index, char in enumerate(s):
        counts[char] += 1
        while len(counts) > k:
            dropped = s[left]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
            left += 1
        best = max(best, index + 1 - left)
    return best


def max_subarray_of_size_k(arr: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive elements, never below 0."""
    if k <= 0:
        return 0
    best = 0
    total = 0
    for end, value in enumerate(arr):
        total += value
        if end >= k - 1:
            best = max(best, total)
            total -= arr[end - k + 1]
    return best


def _max_contiguous_sum(arr: Sequence[int]) -> int:
    best = ending_here = arr[0]
    for value in arr[1:]:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best


def max_subarray_with_max_k(arr: Sequence[int], k: int) -> int:
    """Return the best contiguous sum found in windows of up to ``k`` elements.

    The window grows from the start of the list and slides forward once it
    reaches ``k`` elements. Raises ValueError for an empty list.
    """
    if not arr:
        raise ValueError("empty list has no subarray")
    best = arr[0]
    left = 0
    for right in range(1, len(arr)):
        window = arr[left:right + 1]
        if len(window) == k:
            left += 1
        best = max(best, _max_contiguous_sum(window))
    return best


def smallest_subarray_with_sum(nums: Sequence[int], s: int) -> int:
    """Return the length of the shortest window whose sum is at least ``s``, or 0."""
    best: int | None = None
    left = 0
    total = 0
    for right, value in enumerate(nums):
        total += value
        while total >= s:
            length = right + 1 - left
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return 0 if best is None else best