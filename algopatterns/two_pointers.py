"""Two-pointer techniques on arrays."""

from __future__ import annotations


def remove_duplicates(arr: list[int]) -> int:
    """Compact the unique values of sorted ``arr`` to its front, in place.

    Returns the length of the duplicate-free prefix.
    """
    next_free = 1
    for value in arr:
        if value != arr[next_free - 1]:
            arr[next_free] = value
            next_free += 1
    return next_free