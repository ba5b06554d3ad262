"""Command that prints the maximum-sum sublist of a list of integers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algopatterns.datastructures import max_sum_sublist, max_sum_sublist_from_zero

DEFAULT_VALUES = (-2, 10, 7, -5, 15, 6)


def _format(result: tuple[list[int], int]) -> str:
    sublist, total = result
    return f"[{' '.join(str(value) for value in sublist)}] {total}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print both maximum-sum sublist results for the given integers."""
    parser = argparse.ArgumentParser(
        prog="algopatterns",
        description="Find the maximum-sum contiguous sublist.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        default=list(DEFAULT_VALUES),
        help="integers to scan",
    )
    args = parser.parse_args(argv)
    print(_format(max_sum_sublist(args.values)))
    print(_format(max_sum_sublist_from_zero(args.values)))
    return 0