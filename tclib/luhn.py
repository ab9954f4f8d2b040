"""Luhn check digit validation."""

from __future__ import annotations

from tclib.ctype import is_digit

_DOUBLED = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


def luhn_check(s: str) -> bool:
    """Return True if s is two or more ASCII digits with a valid Luhn check digit."""
    if len(s) < 2 or not all(is_digit(ch) for ch in s):
        return False
    digits = [int(ch) for ch in s]
    check_digit = digits[-1]
    total = sum(
        _DOUBLED[d] if position % 2 == 0 else d
        for position, d in enumerate(reversed(digits[:-1]))
    )
    return (10 - total % 10) % 10 == check_digit