# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final

from .arc import arc_angles
from .calls import ClosePath, CurveTo, DrawCall, LineTo, MoveTo, PieSlice
from .errors import MalformedPathError
from .geometry import Point
from .options import DEFAULT_OPTIONS, ParserOptions
from .tokenizer import (
    Command,
    LineTarget,
    arc_centre_for,
    index_line_targets,
    tokenize,
)

_logger = logging.getLogger(__name__)

# Number of values consumed by one invocation of each command.
_arity: Final[dict[str, int]] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

_cubic_keys: Final = frozenset("CS")
_quadratic_keys: Final = frozenset("QT")


@dataclass
class ParserState:
    """
    Cursor state threaded through the commands of a single path.

    :ivar last_point: Current pen position; ``None`` before the first move.
    :ivar subpath_initial_point: Start of the current subpath, for closing it.
    :ivar previous_cubic_control_point: Second control point of the last cubic
        curve, mirrored by smooth cubic curves.
    :ivar previous_quadratic_control_point: Control point of the last quadratic
        curve, mirrored by smooth quadratic curves.
    :ivar arc_centre: Centre of the arc command being processed.
    """

    last_point: Point | None = None
    subpath_initial_point: Point | None = None
    previous_cubic_control_point: Point | None = None
    previous_quadratic_control_point: Point | None = None
    arc_centre: Point | None = None
    calls: list[DrawCall] = field(default_factory=list)

    @property
    def current(self) -> Point:
        """Current pen position; only valid once a move has been made."""
        assert self.last_point is not None
        return self.last_point

    def resolve(self, point: Point, relative: bool) -> Point:
        """Make ``point`` absolute if it is given relative to the pen position."""
        if relative and self.last_point is not None:
            return point + self.last_point
        return point


def _pairs(values: Sequence[float]) -> list[Point]:
    return [Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]


class PathParser:
    """
    Turns SVG path data into a flat list of :class:`~svg_path_draw.calls.DrawCall`.

    A parser holds only its options, so one instance may be used for any number
    of paths, also concurrently: every :meth:`parse` call works on its own
    :class:`ParserState`.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options: ParserOptions = options or DEFAULT_OPTIONS

    def parse(self, data: str) -> list[DrawCall]:
        """
        Parse ``data`` into drawing calls in path order.

        :raises MalformedPathError: If ``data`` is not valid path data.
        """
        commands = tokenize(data)
        if not commands:
            return []
        if commands[0].key != "M":
            raise MalformedPathError(
                f"path must start with a move, not {commands[0].letter!r}",
                commands[0].offset,
            )

        line_targets = index_line_targets(commands)
        state = ParserState()
        for position, cmd in enumerate(commands):
            self._check_arguments(cmd)
            if cmd.key == "A":
                state.arc_centre = self._arc_centre(line_targets, position, cmd)
            self._run(state, cmd)
        return state.calls

    @staticmethod
    def _check_arguments(cmd: Command) -> None:
        arity = _arity.get(cmd.key)
        if arity is None:
            raise MalformedPathError(f"unknown command {cmd.letter!r}", cmd.offset)
        if arity == 0:
            if cmd.values:
                raise MalformedPathError(
                    f"command {cmd.letter!r} takes no arguments", cmd.offset
                )
            return
        if not cmd.values or len(cmd.values) % arity:
            raise MalformedPathError(
                f"command {cmd.letter!r} expects a multiple of {arity} arguments, "
                f"got {len(cmd.values)}",
                cmd.offset,
            )

    @staticmethod
    def _arc_centre(
        line_targets: Sequence[LineTarget], position: int, cmd: Command
    ) -> Point:
        centre = arc_centre_for(line_targets, position)
        if centre is None:
            raise MalformedPathError(
                f"arc command {cmd.letter!r} requires a following 'L' command "
                "specifying its centre",
                cmd.offset,
            )
        _logger.debug("arc at offset %d uses centre %s", cmd.offset, centre)
        return centre

    def _run(self, state: ParserState, cmd: Command) -> None:
        values = cmd.values
        relative = cmd.relative

        match cmd.key:
            case "M":
                self._move_to(state, values[:2], relative)
                # Further pairs are implicit absolute line-to commands, also
                # after a relative move.
                self._line_to(state, values[2:], False)
            case "L":
                self._line_to(state, values, relative)
            case "H":
                self._horizontal_line_to(state, values, relative)
            case "V":
                self._vertical_line_to(state, values, relative)
            case "Z":
                self._close_path(state)
            case "C":
                self._curve_to(state, values, relative)
            case "S":
                self._smooth_curve_to(state, values, relative)
            case "Q":
                self._quadratic_curve_to(state, values, relative)
            case "T":
                self._smooth_quadratic_curve_to(state, values, relative)
            case "A":
                self._arc(state, values, relative)

        if cmd.key not in _cubic_keys:
            state.previous_cubic_control_point = None
        if cmd.key not in _quadratic_keys:
            state.previous_quadratic_control_point = None

    # ---- lines -------------------------------------------------------------------

    def _move_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        point = state.resolve(Point(values[0], values[1]), relative)
        state.last_point = state.subpath_initial_point = point
        state.calls.append(MoveTo(point))

    def _line_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for point in _pairs(values):
            state.last_point = state.resolve(point, relative)
            state.calls.append(LineTo(state.last_point))

    def _horizontal_line_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for x in values:
            current = state.current
            if relative:
                x += current.x
            state.last_point = Point(x, current.y)
            state.calls.append(LineTo(state.last_point))

    def _vertical_line_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for y in values:
            current = state.current
            if relative:
                y += current.y
            state.last_point = Point(current.x, y)
            state.calls.append(LineTo(state.last_point))

    def _close_path(self, state: ParserState) -> None:
        if state.subpath_initial_point is None:
            return
        state.calls.append(ClosePath())
        state.last_point = state.subpath_initial_point

    # ---- curves ------------------------------------------------------------------

    def _emit_curve(
        self, state: ParserState, endpoint: Point, control1: Point, control2: Point
    ) -> None:
        d = self.options.decimals
        state.last_point = endpoint
        state.calls.append(
            CurveTo(endpoint.rounded(d), control1.rounded(d), control2.rounded(d))
        )

    def _curve_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for i in range(0, len(values), 6):
            control1, control2, endpoint = (
                state.resolve(p, relative) for p in _pairs(values[i : i + 6])
            )
            state.previous_cubic_control_point = control2
            self._emit_curve(state, endpoint, control1, control2)

    def _smooth_curve_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for i in range(0, len(values), 4):
            control2, endpoint = (
                state.resolve(p, relative) for p in _pairs(values[i : i + 4])
            )
            current = state.current
            previous = state.previous_cubic_control_point
            control1 = previous.reflect(current) if previous is not None else current
            state.previous_cubic_control_point = control2
            self._emit_curve(state, endpoint, control1, control2)

    def _elevate_quadratic(
        self, state: ParserState, control: Point, endpoint: Point
    ) -> None:
        """Emit a quadratic curve as the equivalent cubic curve."""
        current = state.current
        control1 = current + (control - current) * (2 / 3)
        control2 = control1 + (endpoint - current) / 3
        state.previous_quadratic_control_point = control
        self._emit_curve(state, endpoint, control1, control2)

    def _quadratic_curve_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for i in range(0, len(values), 4):
            control, endpoint = (
                state.resolve(p, relative) for p in _pairs(values[i : i + 4])
            )
            self._elevate_quadratic(state, control, endpoint)

    def _smooth_quadratic_curve_to(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        for endpoint in _pairs(values):
            endpoint = state.resolve(endpoint, relative)
            current = state.current
            previous = state.previous_quadratic_control_point
            control = previous.reflect(current) if previous is not None else current
            self._elevate_quadratic(state, control, endpoint)

    # ---- arcs --------------------------------------------------------------------

    def _arc(
        self, state: ParserState, values: Sequence[float], relative: bool
    ) -> None:
        centre = state.arc_centre
        assert centre is not None
        for i in range(0, len(values), 7):
            rx, _ry, _rotation, large_arc, sweep, x, y = values[i : i + 7]
            if rx == 0:
                _logger.debug("skipping arc with zero x radius")
                continue
            endpoint = state.resolve(Point(x, y), relative)
            start_angle, end_angle = arc_angles(
                state.current, endpoint, centre, rx, large_arc, sweep
            )
            # The pen position is left unchanged by arcs.
            state.calls.append(PieSlice(centre, rx, rx, start_angle, end_angle))


def parse_path(data: str, options: ParserOptions | None = None) -> list[DrawCall]:
    """Parse SVG path data into drawing calls; see :meth:`PathParser.parse`."""
    return PathParser(options).parse(data)
