# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Protocol, final, override

from .geometry import Point, format_number


class Renderer(Protocol):
    """
    Drawing backend the emitted calls are replayed onto.

    Angles passed to :meth:`pie_slice` are in degrees.
    """

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def curve_to(self, endpoint: Point, control1: Point, control2: Point) -> None: ...

    def close_path(self) -> None: ...

    def pie_slice(
        self,
        center: Point,
        radius_x: float,
        radius_y: float,
        start_angle: float,
        end_angle: float,
    ) -> None: ...


CallTree = tuple[str] | tuple[str, list[float]]


class DrawCall:
    """Base class for a single drawing call produced from path data."""

    name: ClassVar[str]

    def replay(self, renderer: Renderer) -> None:
        """Invoke the matching method of ``renderer``."""
        raise NotImplementedError

    @property
    def arguments(self) -> list[float]:
        """Flat list of the numeric arguments of this call."""
        return []

    def as_call(self) -> CallTree:
        """
        Return this call as a ``(name, arguments)`` entry of a plain call tree.

        Calls without arguments are returned as a 1-tuple, e.g. ``("close_path",)``.
        """
        arguments = self.arguments
        if not arguments:
            return (self.name,)
        return (self.name, arguments)

    @override
    def __str__(self) -> str:
        return " ".join([self.name, *(format_number(v) for v in self.arguments)])


@final
@dataclass(frozen=True)
class MoveTo(DrawCall):
    name: ClassVar[str] = "move_to"

    point: Point

    @override
    def replay(self, renderer: Renderer) -> None:
        renderer.move_to(self.point)

    @property
    @override
    def arguments(self) -> list[float]:
        return [*self.point]


@final
@dataclass(frozen=True)
class LineTo(DrawCall):
    name: ClassVar[str] = "line_to"

    point: Point

    @override
    def replay(self, renderer: Renderer) -> None:
        renderer.line_to(self.point)

    @property
    @override
    def arguments(self) -> list[float]:
        return [*self.point]


@final
@dataclass(frozen=True)
class CurveTo(DrawCall):
    """Cubic Bézier segment; the endpoint comes first, as backends expect it."""

    name: ClassVar[str] = "curve_to"

    endpoint: Point
    control1: Point
    control2: Point

    @override
    def replay(self, renderer: Renderer) -> None:
        renderer.curve_to(self.endpoint, self.control1, self.control2)

    @property
    @override
    def arguments(self) -> list[float]:
        return [*self.endpoint, *self.control1, *self.control2]


@final
@dataclass(frozen=True)
class ClosePath(DrawCall):
    name: ClassVar[str] = "close_path"

    @override
    def replay(self, renderer: Renderer) -> None:
        renderer.close_path()


@final
@dataclass(frozen=True)
class PieSlice(DrawCall):
    """Circular sector around ``center``, angles in degrees."""

    name: ClassVar[str] = "pie_slice"

    center: Point
    radius_x: float
    radius_y: float
    start_angle: float
    end_angle: float

    @override
    def replay(self, renderer: Renderer) -> None:
        renderer.pie_slice(
            self.center,
            self.radius_x,
            self.radius_y,
            self.start_angle,
            self.end_angle,
        )

    @property
    @override
    def arguments(self) -> list[float]:
        return [
            *self.center,
            self.radius_x,
            self.radius_y,
            self.start_angle,
            self.end_angle,
        ]


def replay(calls: Iterable[DrawCall], renderer: Renderer) -> None:
    """Replay ``calls`` onto ``renderer`` in order."""
    for call in calls:
        call.replay(renderer)
