# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final

from .errors import MalformedPathError
from .geometry import Point

_separators: Final = frozenset(" \t\r\n,")
_digits: Final = frozenset("0123456789")
_number: Final = re.compile(r"^-?([0-9]+\.?[0-9]*|\.[0-9]+)$")


@dataclass
class Command:
    """
    A command letter together with the numbers that follow it.

    :ivar letter: Command letter as written; lower case means relative.
    :ivar values: Numeric arguments in order of appearance.
    :ivar offset: Character offset of the letter in the path data.
    """

    letter: str
    values: list[float] = field(default_factory=list)
    offset: int = 0

    @property
    def key(self) -> str:
        """Upper-case command letter."""
        return self.letter.upper()

    @property
    def relative(self) -> bool:
        """Whether the arguments are relative to the current point."""
        return self.letter.islower()


class _Scanner:
    def __init__(self) -> None:
        self.commands: list[Command] = []
        self.literal: str = ""
        self.literal_offset: int = 0

    def flush(self) -> None:
        if not self.literal:
            return
        if not _number.match(self.literal):
            raise MalformedPathError(
                f"invalid number {self.literal!r}", self.literal_offset
            )
        self.commands[-1].values.append(float(self.literal))
        self.literal = ""

    def extend(self, c: str, offset: int) -> None:
        if not self.commands:
            raise MalformedPathError(
                "numerical value specified before command", offset
            )
        if not self.literal:
            self.literal_offset = offset
        self.literal += c

    def restart(self, c: str, offset: int) -> None:
        self.flush()
        self.extend(c, offset)


def tokenize(data: str) -> list[Command]:
    """
    Split SVG path data into commands and their numeric arguments.

    Numbers may be separated by whitespace or commas, or packed together where
    a sign or a second decimal point starts the next number (``10-5``,
    ``0.5.5``). Exponents are not supported.

    :raises MalformedPathError: On numbers before the first command letter,
        characters outside the path grammar and invalid numbers.
    """
    scanner = _Scanner()

    for offset, c in enumerate(data):
        if ("A" <= c <= "Z") or ("a" <= c <= "z"):
            scanner.flush()
            scanner.commands.append(Command(c, offset=offset))
        elif c in _digits or (c in "-." and not scanner.literal):
            scanner.extend(c, offset)
        elif c in _separators:
            scanner.flush()
        elif c == "-":
            scanner.restart(c, offset)
        elif c == ".":
            if "." in scanner.literal:
                scanner.restart(c, offset)
            else:
                scanner.extend(c, offset)
        else:
            raise MalformedPathError(f"invalid character {c!r}", offset)

    scanner.flush()
    return scanner.commands


# ------------------------------------------------------------------------------
# Arc centre lookahead
# ------------------------------------------------------------------------------


@dataclass(frozen=True)
class LineTarget:
    """First point of an absolute ``L`` command, used as an arc centre."""

    position: int
    point: Point


def index_line_targets(commands: Sequence[Command]) -> list[LineTarget]:
    """
    Collect the first point of every absolute ``L`` command, in path order.

    ``position`` is the index of the command within ``commands``.
    """
    return [
        LineTarget(position, Point(cmd.values[0], cmd.values[1]))
        for position, cmd in enumerate(commands)
        if cmd.letter == "L" and len(cmd.values) >= 2
    ]


def arc_centre_for(targets: Sequence[LineTarget], position: int) -> Point | None:
    """Centre for the arc command at ``position``: the next indexed ``L`` point."""
    for target in targets:
        if target.position > position:
            return target.point
    return None
