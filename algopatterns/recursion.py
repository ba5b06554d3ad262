"""Small recursive classics."""

from __future__ import annotations

import math


def factorial(n: int) -> int:
    """Return ``n!``; raises ValueError for negative ``n``."""
    return math.factorial(n)


def is_palindrome(word: str) -> bool:
    """Return True if ``word`` reads the same in both directions."""
    if len(word) < 2:
        return True
    if word[0] != word[-1]:
        return False
    return is_palindrome(word[1:-1])


def power(x: int, n: int) -> int:
    """Return ``x`` raised to the non-negative integer ``n``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    return math.prod(x for _ in range(n))