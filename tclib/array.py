"""Helpers for sequences of strings."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


def _three_way(a: str, b: str) -> int:
    return (a > b) - (a < b)


def index_of(
    haystack: Optional[Sequence[T]],
    needle: T,
    compar: Optional[Callable[[T, T], int]] = None,
) -> int:
    """Return the index of the first element that compar finds equal to needle.

    compar returns 0 for a match; by default a three-way string comparison.
    Returns -1 when there is no match or no haystack.
    """
    if haystack is None:
        return -1
    compare = compar or _three_way
    return next(
        (i for i, item in enumerate(haystack) if compare(item, needle) == 0),
        -1,
    )


def append(array: Sequence[T], element: T) -> list[T]:
    """Return a new list holding the elements of array followed by element."""
    if array is None:
        raise TypeError("cannot append to a missing array")
    return [*array, element]