"""String algorithms: bracket matching and binary addition."""

from __future__ import annotations

_OPENING = frozenset("([{")
_MATCHING_OPEN = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed by its matching kind in order.

    Any character that is not an opening bracket is treated as a closing one,
    so characters other than brackets make the string invalid.
    """
    if len(s) % 2 == 1:
        return False
    stack: list[str] = []
    for ch in s:
        if ch in _OPENING:
            stack.append(ch)
        elif not stack or stack.pop() != _MATCHING_OPEN.get(ch):
            return False
    return not stack


def add_binary(a: str, b: str) -> str:
    """Add two binary strings and return their sum as a binary string.

    The result is at least as wide as the wider operand; leading zeros of the
    operands are kept.
    """
    for operand in (a, b):
        if any(ch not in "01" for ch in operand):
            raise ValueError(f"not a binary string: {operand!r}")
    width = max(len(a), len(b))
    bits: list[str] = []
    carry = 0
    for x, y in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        carry += int(x) + int(y)
        bits.append(str(carry % 2))
        carry //= 2
    if carry:
        bits.append("1")
    return "".join(reversed(bits))