# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from typing import Final

import pytest

from svg_path_draw import (
    LineTo,
    MalformedPathError,
    MoveTo,
    PieSlice,
    Point,
    parse_path,
)
from svg_path_draw.arc import arc_angles

centre: Final = Point(0, 0)

# (large_arc, sweep) -> (start_angle, end_angle) for a quarter arc from (10, 0)
# to (0, 10) around the origin.
quarter_arcs: Final = [
    ((0, 1), (0, -90)),
    ((1, 1), (270, 0)),
    ((0, 0), (0, -90)),
    ((1, 0), (90, 180)),
]


@pytest.mark.parametrize(("flags", "angles"), quarter_arcs)
def test_arc_angles(flags: tuple[int, int], angles: tuple[float, float]) -> None:
    """Each flag combination uses its own angle formula."""
    result = arc_angles(Point(10, 0), Point(0, 10), centre, 10, *flags)
    assert result == pytest.approx(angles)


def test_arc_angles_non_zero_flags() -> None:
    """Any non-zero flag counts as set."""
    assert arc_angles(Point(10, 0), Point(0, 10), centre, 10, 2, 0.5) == pytest.approx(
        (270, 0)
    )


def test_arc_angles_unreachable() -> None:
    """Cosine arguments outside ``[-1, 1]`` are clamped instead of failing."""
    result = arc_angles(Point(0, 0), Point(50, 0), centre, 1, 0, 1)
    assert result == pytest.approx((0, 90))


def test_arc_pie_slice() -> None:
    """An arc becomes a pie slice around the point of the following ``L``."""
    assert parse_path("M10 0 A10 5 30 0 1 0 10 L0 0") == [
        MoveTo(Point(10, 0)),
        PieSlice(Point(0, 0), 10, 10, pytest.approx(0), pytest.approx(-90)),
        LineTo(Point(0, 0)),
    ]


def test_arc_repetition() -> None:
    """Extra groups of seven values repeat the arc from the same pen position."""
    calls = parse_path("M10 0 A10 10 0 0 1 0 10 10 10 0 1 0 0 10 L0 0")
    slices = [call for call in calls if isinstance(call, PieSlice)]
    angles = [angle for s in slices for angle in (s.start_angle, s.end_angle)]
    assert angles == pytest.approx([0, -90, 90, 180])


def test_relative_arc() -> None:
    """The endpoint of ``a`` is relative to the pen position."""
    assert parse_path("M10 0 a10 10 0 0 1 -10 10 L0 0") == parse_path(
        "M10 0 A10 10 0 0 1 0 10 L0 0"
    )


def test_arc_keeps_pen_position() -> None:
    """Arcs do not move the pen."""
    calls = parse_path("M10 0 A10 10 0 0 1 0 10 l5 5 L0 0")
    assert calls[2] == LineTo(Point(15, 5))


def test_arc_centre_per_command() -> None:
    """Every arc command uses the next ``L`` after it."""
    calls = parse_path("M10 0 A5 5 0 1 0 0 10 L1 2 A5 5 0 1 0 0 10 L3 4")
    slices = [call for call in calls if isinstance(call, PieSlice)]
    assert [s.center for s in slices] == [Point(1, 2), Point(3, 4)]


def test_degenerate_arc() -> None:
    """An arc with zero x radius is skipped."""
    assert parse_path("M0 0 A0 0 0 0 1 10 10 L5 5") == [
        MoveTo(Point(0, 0)),
        LineTo(Point(5, 5)),
    ]


def test_arc_without_centre() -> None:
    """An arc needs an absolute ``L`` after it."""
    with pytest.raises(MalformedPathError, match="'L'"):
        parse_path("M0 0 A10 10 0 0 1 10 10")
    with pytest.raises(MalformedPathError):
        parse_path("M0 0 L5 5 A10 10 0 0 1 10 10")
    with pytest.raises(MalformedPathError):
        parse_path("M0 0 A10 10 0 0 1 10 10 l5 5")
    with pytest.raises(MalformedPathError):
        parse_path("M0 0 A0 0 0 0 1 10 10")
