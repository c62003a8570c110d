# Copyright (c) 2024-2026 Eric Handy-Cardenas
#
# This file is part of figrecolor.
#
# figrecolor is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# figrecolor is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with figrecolor.  If not, see <http://www.gnu.org/licenses/>.

"""Utilities for file input/output."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import urlparse

__author__ = "Eric Handy-Cardenas"


def file_path(path: str | os.PathLike) -> Path:
    """Return ``path`` as a `~pathlib.Path`.

    Examples
    --------
    >>> file_path("test.png")
    PosixPath('test.png')
    >>> file_path("file:///home/user/test.png")
    PosixPath('/home/user/test.png')
    """
    if isinstance(path, str) and path.startswith("file:"):
        return Path(urlparse(path).path)
    return Path(path)


def output_path(path: str | os.PathLike, suffix: str) -> Path:
    """Return the path of an output file written beside ``path``.

    The output has the same directory, stem and extension as the input,
    with ``suffix`` appended to the stem.

    Examples
    --------
    >>> output_path("/data/plot.png", "_inverted")
    PosixPath('/data/plot_inverted.png')
    """
    path = file_path(path)
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")
