import math

import pytest

from tclib.mathutil import float_abs, int_abs, int_max, int_min, table_sin


@pytest.mark.parametrize(
    "x, y, expected",
    [(4, -3, -3), (-4, -3, -4), (4, 3, 3), (-4, 3, -4)],
)
def test_int_min(x, y, expected):
    assert int_min(x, y) == expected


@pytest.mark.parametrize(
    "x, y, expected",
    [(4, -3, 4), (-4, -3, -3), (4, 3, 4), (-4, 3, 3)],
)
def test_int_max(x, y, expected):
    assert int_max(x, y) == expected


@pytest.mark.parametrize("x, expected", [(4, 4), (-4, 4), (0, 0)])
def test_int_abs(x, expected):
    assert int_abs(x) == expected


@pytest.mark.parametrize("x, expected", [(2.5, 2.5), (-2.5, 2.5), (0.0, 0.0)])
def test_float_abs(x, expected):
    assert float_abs(x) == expected


def test_table_sin_zero():
    assert table_sin(0.0) == 0.0


def test_table_sin_quarter_turn():
    assert table_sin(math.pi / 2) == 1.0


def test_table_sin_negative_quarter_turn():
    assert table_sin(-math.pi / 2) == -1.0


def test_table_sin_full_turn_wraps():
    assert table_sin(2.0 * math.pi) == 0.0


def test_table_sin_truncates_to_table_entry():
    assert table_sin(math.pi / 6) == 0.498185


@pytest.mark.parametrize("x", [0.1, 0.7, 1.3, 2.9, 4.2, 5.5, 6.1])
def test_table_sin_close_to_sine(x):
    assert abs(table_sin(x) - math.sin(x)) < 0.01