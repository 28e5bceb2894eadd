# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# A float carries at most 17 significant decimal digits.
MAX_DECIMALS: Final = 17


@dataclass(frozen=True)
class ParserOptions:
    """
    Settings for :class:`~svg_path_draw.path_parser.PathParser`.

    :ivar decimals: Number of decimal places curve coordinates are rounded to,
        or ``None`` to emit them unrounded. At most :data:`MAX_DECIMALS`.
    """

    decimals: int | None = 2

    def __post_init__(self) -> None:
        if self.decimals is not None and not 0 <= self.decimals <= MAX_DECIMALS:
            raise ValueError(
                f"decimals must be between 0 and {MAX_DECIMALS}, got {self.decimals}"
            )


DEFAULT_OPTIONS = ParserOptions()
