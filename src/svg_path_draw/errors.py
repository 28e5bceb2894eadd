# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import annotations


class MalformedPathError(ValueError):
    """
    Raised if SVG path data cannot be turned into drawing calls.

    :ivar offset: Character offset in the path data the error refers to,
        or ``None`` if it concerns the path as a whole.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(f"malformed path: {message}")
        self.offset: int | None = offset
