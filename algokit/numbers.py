"""Integer algorithms: palindromes, stair climbing, bit counting and square roots."""

from __future__ import annotations

import math


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two steps at a time."""
    if n < 1:
        raise ValueError("number of steps must be at least 1")
    if n == 1:
        return 1
    first, second = 1, 2
    for _ in range(3, n + 1):
        first, second = second, first + second
    return second


def hamming_weight(n: int) -> int:
    """Return the number of set bits in the non-negative integer ``n``."""
    if n < 0:
        raise ValueError("hamming weight is defined for non-negative integers")
    return bin(n).count("1")


def integer_sqrt(x: int) -> int:
    """Return the floor of the square root of the non-negative integer ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)