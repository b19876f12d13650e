"""Algorithms over integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect_left(nums, target)


def _format_range(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}->{end}"


def summary_ranges(nums: Iterable[int]) -> list[str]:
    """Summarise runs of consecutive integers as ``"a->b"`` or ``"a"``."""
    ranges: list[str] = []
    start: int | None = None
    prev: int | None = None
    for n in nums:
        if prev is not None and n == prev + 1:
            prev = n
            continue
        if start is not None and prev is not None:
            ranges.append(_format_range(start, prev))
        start = prev = n
    if start is not None and prev is not None:
        ranges.append(_format_range(start, prev))
    return ranges


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for n in nums:
        if n in seen:
            return True
        seen.add(n)
    return False


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits`` (most significant first)."""
    trailing_nines = 0
    for d in reversed(digits):
        if (d + 1) % 10 != 0:
            break
        trailing_nines += 1
    if trailing_nines == len(digits):
        return [1] + [0] * len(digits)
    bumped = len(digits) - trailing_nines - 1
    return [*digits[:bumped], (digits[bumped] + 1) % 10] + [0] * trailing_nines