"""Subsets and permutations of integer lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def find_subsets(arr: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``arr``, built by extending earlier subsets."""
    subsets: list[list[int]] = [[]]
    for value in arr:
        subsets.extend([*subset, value] for subset in list(subsets))
    return subsets


def find_subsets_without_duplicates(arr: Sequence[int]) -> list[list[int]]:
    """Return subsets of the sorted values, skipping the first two seeds on repeats.

    When a value repeats the one before it, it is not added to the first two
    subsets built so far.
    """
    values = sorted(arr)
    subsets: list[list[int]] = [[]]
    for position, value in enumerate(values):
        repeated = position > 0 and value == values[position - 1]
        subsets.extend(
            [*subset, value]
            for index, subset in enumerate(list(subsets))
            if not (repeated and index < 2)
        )
    return subsets


def _permutations(
    arr: Sequence[int], index: int, current: list[int]
) -> Iterator[list[int]]:
    if index == len(arr):
        yield current
        return
    for position in range(len(current) + 1):
        yield from _permutations(
            arr, index + 1, [*current[:position], arr[index], *current[position:]]
        )


def generate_permutations(arr: Sequence[int]) -> list[list[int]]:
    """Return every permutation of ``arr`` by inserting each value at every position."""
    return list(_permutations(arr, 0, []))