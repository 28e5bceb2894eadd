# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""
Start and end angles of the pie slice an elliptical arc command is drawn as.

The arc is approximated by a circular sector around a centre that is taken
from the path data rather than derived from the arc parameters.
Only ``rx`` is used as the radius; ``ry`` and the x-axis rotation are ignored.
The formulas below depend on the ``(large_arc, sweep)`` flag combination:

``(0, 1)``
    Sweep below 180° clockwise. The arc runs from the endpoint back to the
    current point, and the angles are swapped so that the slice is always
    drawn anticlockwise.
``(1, 1)``
    Sweep above 180° clockwise, from the endpoint back to the current point.
``(0, 0)``
    Sweep below 180° anticlockwise, from the current point to the endpoint.
``(1, 0)``
    Sweep above 180° anticlockwise, from the current point to the endpoint.

Angles are in degrees; SVG's y axis points down, so points with
``y > centre.y`` lie below the centre.
"""

from __future__ import annotations

import logging
import math

from .geometry import Point

_logger = logging.getLogger(__name__)


def _acos_degrees(v: float) -> float:
    """:math:`\\arccos v` in degrees, with ``v`` clamped to :math:`[-1, 1]`."""
    if not -1 <= v <= 1:
        _logger.debug("clamping arc cosine argument %r", v)
        v = max(-1.0, min(1.0, v))
    return math.degrees(math.acos(v))


def _flag(v: float) -> int:
    return 0 if v == 0 else 1


def _small_clockwise(
    current: Point, endpoint: Point, centre: Point, rx: float
) -> tuple[float, float]:
    start, end = endpoint, current
    dx_start = start.x - centre.x
    dx_end = end.x - centre.x
    flip_start = -1 if start.y > centre.y else 1
    flip_end = -1 if end.y > centre.y else 1

    start_angle = _acos_degrees(dx_start / rx) * flip_start
    end_angle = _acos_degrees(dx_end / rx) * flip_end

    # Slices are always drawn anticlockwise.
    if dx_start < dx_end:
        start_angle, end_angle = end_angle, start_angle
    return start_angle, end_angle


def _large_clockwise(
    current: Point, endpoint: Point, centre: Point, rx: float
) -> tuple[float, float]:
    start, end = endpoint, current
    dx_start = start.x - centre.x
    dx_end = end.x - centre.x
    if start.x < centre.x and start.y > centre.y:
        dx_start = -dx_start
    if end.x < centre.x:
        dx_end = -dx_end
    flip_start = 180 if start.y > centre.y else 0

    return _acos_degrees(dx_start / rx) + flip_start, _acos_degrees(dx_end / rx)


def _small_anticlockwise(
    current: Point, endpoint: Point, centre: Point, rx: float
) -> tuple[float, float]:
    start, end = current, endpoint
    sum_start = start.x + centre.x
    sum_end = end.x + centre.x
    flip_start = -1 if start.y > centre.y else 1
    flip_end = -1 if end.y > centre.y else 1

    return (
        _acos_degrees(sum_start / rx) * flip_start,
        _acos_degrees(sum_end / rx) * flip_end,
    )


def _large_anticlockwise(
    current: Point, endpoint: Point, centre: Point, rx: float
) -> tuple[float, float]:
    flip_start = 180 if current.y > centre.y else 0
    flip_end = 180 if endpoint.y > centre.y else 0

    # Raw endpoint coordinates, not offsets from the centre.
    return (
        _acos_degrees(endpoint.x / rx) + flip_start,
        _acos_degrees(endpoint.y / rx) + flip_end,
    )


def arc_angles(
    current: Point,
    endpoint: Point,
    centre: Point,
    rx: float,
    large_arc: float,
    sweep: float,
) -> tuple[float, float]:
    """
    Start and end angle in degrees of the slice for an arc from ``current`` to
    ``endpoint`` around ``centre``.

    Any non-zero flag counts as set. ``rx`` must be non-zero.
    """
    match _flag(large_arc), _flag(sweep):
        case (0, 1):
            return _small_clockwise(current, endpoint, centre, rx)
        case (1, 1):
            return _large_clockwise(current, endpoint, centre, rx)
        case (0, 0):
            return _small_anticlockwise(current, endpoint, centre, rx)
        case _:
            return _large_anticlockwise(current, endpoint, centre, rx)
