# This file is part of svg-path-draw.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

from .calls import ClosePath as ClosePath
from .calls import CurveTo as CurveTo
from .calls import DrawCall as DrawCall
from .calls import LineTo as LineTo
from .calls import MoveTo as MoveTo
from .calls import PieSlice as PieSlice
from .calls import Renderer as Renderer
from .calls import replay as replay
from .errors import MalformedPathError as MalformedPathError
from .geometry import Point as Point
from .options import ParserOptions as ParserOptions
from .path_parser import PathParser as PathParser
from .path_parser import parse_path as parse_path

__version__ = "0.1.0"
