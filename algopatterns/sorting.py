"""Simple sorts and searches."""

from __future__ import annotations

from collections.abc import Sequence


def insertion_sort(arr: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``arr`` built by insertion sort."""
    items = list(arr)
    for index in range(1, len(items)):
        value = items[index]
        position = index - 1
        while position >= 0 and items[position] > value:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = value
    return items


def selection_sort(arr: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``arr`` built by selection sort."""
    items = list(arr)
    for index in range(len(items) - 1):
        smallest = min(range(index, len(items)), key=items.__getitem__)
        items[index], items[smallest] = items[smallest], items[index]
    return items


def find_two_numbers_adding_to(arr: Sequence[int], k: int) -> tuple[int, int]:
    """Return the first pair ``(value, k - value)`` summing to ``k``, or ``(0, 0)``."""
    seen: set[int] = set()
    for value in arr:
        if k - value in seen:
            return value, k - value
        seen.add(value)
    return 0, 0


def find_pivot_index(arr: Sequence[int]) -> int:
    """Return the index of the smallest element of a rotated sorted list.

    Returns -1 for an empty list and 0 for a list that is not rotated.
    """
    if not arr:
        return -1
    if len(arr) == 1 or arr[0] < arr[-1]:
        return 0
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if arr[mid] > arr[mid + 1]:
            return mid + 1
        if mid == 0:
            raise IndexError("pivot search ran past the start of the list")
        if arr[mid] < arr[mid - 1]:
            return mid
        if arr[mid] > arr[0]:
            left = mid + 1
        else:
            right = mid - 1
    return 0


def binary_search(arr: Sequence[int], num: int) -> int:
    """Return the index of ``num`` in sorted ``arr``, or -1 if absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == num:
            return mid
        if arr[mid] < num:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def group_anagrams(words: Sequence[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())