"""Integer helpers and a table-driven sine."""

from __future__ import annotations

import math

_TABLE_SIZE = 1000

# sin() sampled at 1000 evenly spaced angles over one turn, to six decimals.
_SIN_TABLE = tuple(
    round(math.sin((i / _TABLE_SIZE) * (2.0 * math.pi)), 6)
    for i in range(_TABLE_SIZE)
)


def int_abs(x: int) -> int:
    """Return the absolute value of x."""
    return -x if x < 0 else x


def int_max(x: int, y: int) -> int:
    """Return the larger of x and y."""
    return x if x > y else y


def int_min(x: int, y: int) -> int:
    """Return the smaller of x and y."""
    return x if x < y else y


def float_abs(x: float) -> float:
    """Return the absolute value of a float."""
    return -x if x < 0.0 else x


def table_sin(x: float) -> float:
    """Return an approximate sine of x, looked up in a 1000-entry table."""
    index = math.trunc((x / (2.0 * math.pi)) * _TABLE_SIZE) % _TABLE_SIZE
    return _SIN_TABLE[index]