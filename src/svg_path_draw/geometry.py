# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final, override

_number_strip_trailing_zeros: Final = re.compile(r"^(-?[0-9]*\.([0-9]*[1-9])?)0*$")
_number_strip_dot: Final = re.compile(r"\.$")

# Floats at least this large have no fractional digits.
_integral_limit: Final = 2.0**52


def format_number(v: float, d: int | None = None) -> str:
    """Format a float with optional fixed decimals, dropping trailing zeros."""
    s = f"{v:.{d}f}" if d is not None else str(v)
    s = _number_strip_trailing_zeros.sub(r"\1", s)
    s = _number_strip_dot.sub("", s)
    return "0" if s == "-0" else s


def round_number(v: float, decimals: int | None) -> float:
    """
    Round ``v`` half away from zero to ``decimals`` places.

    The decimal representation of ``v`` is rounded rather than its binary
    value, so ``round_number(2.675, 2) == 2.68``.
    ``decimals=None`` returns ``v`` unchanged, as do infinite, NaN and integral
    values beyond :math:`2^{52}`.
    """
    if decimals is None or not math.isfinite(v) or abs(v) >= _integral_limit:
        return v
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # 16 integer digits at most, plus the requested decimals.
        ctx.prec = 17 + decimals
        value = Decimal(repr(v)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(value)


@dataclass(frozen=True)
class Point:
    """2D point with float coordinates."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        """Iterate as ``(x, y)``."""
        yield self.x
        yield self.y

    @override
    def __str__(self) -> str:
        return f"({format_number(self.x)}, {format_number(self.y)})"

    # ---- vector arithmetic -------------------------------------------------------

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other: float) -> Point:
        return Point(self.x * other, self.y * other)

    def __rmul__(self, other: float) -> Point:
        return self * other

    def __truediv__(self, other: float) -> Point:
        return Point(self.x / other, self.y / other)

    # ---- path helpers ------------------------------------------------------------

    def reflect(self, about: Point) -> Point:
        """
        Point reflection of ``self`` through ``about``.

        This is how smooth curve commands derive their first control point:
        :math:`2 ⋅ about - self`.
        """
        return Point(2 * about.x - self.x, 2 * about.y - self.y)

    def rounded(self, decimals: int | None) -> Point:
        """Copy with both coordinates rounded by :func:`round_number`."""
        return Point(round_number(self.x, decimals), round_number(self.y, decimals))
