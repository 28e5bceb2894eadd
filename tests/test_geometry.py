# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

import math

import pytest

from svg_path_draw.geometry import Point, format_number, round_number


def test_point_arithmetic() -> None:
    a, b = Point(1, 2), Point(3, 5)
    assert a + b == Point(4, 7)
    assert b - a == Point(2, 3)
    assert a * 3 == 3 * a == Point(3, 6)
    assert b / 2 == Point(1.5, 2.5)
    assert -a == Point(-1, -2)


def test_point_iter_str() -> None:
    assert tuple(Point(1, 2)) == (1, 2)
    assert str(Point(1.0, 2.5)) == "(1, 2.5)"


def test_point_reflect() -> None:
    """Reflection through a point, as used by smooth curve commands."""
    assert Point(10, 10).reflect(Point(20, 10)) == Point(30, 10)
    assert Point(1, 2).reflect(Point(1, 2)) == Point(1, 2)


def test_point_is_hashable_value() -> None:
    assert Point(1, 2) == Point(1.0, 2.0)
    assert len({Point(1, 2), Point(1.0, 2.0)}) == 1
    with pytest.raises(AttributeError):
        Point(1, 2).x = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    ("value", "decimals", "expected"),
    [
        (6.666666666666666, 2, 6.67),
        (13.333333333333332, 2, 13.33),
        (2.675, 2, 2.68),
        (-2.675, 2, -2.68),
        (0.125, 2, 0.13),
        (1.5, 0, 2.0),
        (1.23456, None, 1.23456),
    ],
)
def test_round_number(value: float, decimals: int | None, expected: float) -> None:
    """Rounding is half away from zero on the decimal representation."""
    assert round_number(value, decimals) == expected


def test_point_rounded() -> None:
    assert Point(2 / 3, -1 / 3).rounded(2) == Point(0.67, -0.33)
    assert Point(2 / 3, 1).rounded(None) == Point(2 / 3, 1)


def test_format_number() -> None:
    assert format_number(1.0) == "1"
    assert format_number(-0.0) == "0"
    assert format_number(0.5) == "0.5"
    assert format_number(2 / 3, 3) == "0.667"
    assert format_number(12.5, 3) == "12.5"


def test_round_number_extremes() -> None:
    """Values without fractional digits are returned unchanged."""
    assert round_number(1e27, 2) == 1e27
    assert round_number(-(2.0**60), 2) == -(2.0**60)
    assert round_number(math.inf, 2) == math.inf
    assert math.isnan(round_number(math.nan, 2))
    assert round_number(4503599627370495.5, 0) == 4503599627370496.0
    assert round_number(2 / 3, 30) == 2 / 3
