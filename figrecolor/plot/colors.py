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

"""Colour values and the contrast rules used when recolouring figures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy
from matplotlib.colors import (
    to_rgb as mpl_to_rgb,
    to_rgba as mpl_to_rgba,
)

if TYPE_CHECKING:
    from typing import Any

    from matplotlib.typing import (
        ColorType,
        RGBColorType,
    )

__author__ = "Eric Handy-Cardenas"

#: Single-character colour names accepted as figure and text colours.
PALETTE: dict[str, tuple[float, float, float]] = {
    "r": (1., 0., 0.),
    "g": (0., 1., 0.),
    "b": (0., 0., 1.),
    "c": (0., 1., 1.),
    "m": (1., 0., 1.),
    "y": (1., 1., 0.),
    "k": (0., 0., 0.),
    "w": (1., 1., 1.),
}

WHITE = PALETTE["w"]
BLACK = PALETTE["k"]

#: Colours with a mean channel value below this are considered dark.
DARK_THRESHOLD = .25

_BAD_COLOR = "Colors must be specified as single-letter strings or RGB vectors"


def is_palette_color(value: Any) -> bool:
    """Return `True` if ``value`` is one of the single-letter colour names."""
    return isinstance(value, str) and value in PALETTE


def is_numeric_sequence(value: Any) -> bool:
    """Return `True` if ``value`` looks like a numeric vector."""
    if isinstance(value, numpy.ndarray):
        return value.dtype.kind in "biuf"
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return all(
        isinstance(x, (int, float, numpy.number)) and not isinstance(x, bool)
        for x in value
    )


def is_color(value: Any) -> bool:
    """Return `True` if ``value`` can be used as a figure or text colour.

    That is a single-letter palette name, or a numeric vector of exactly
    three components all within ``[0, 1]``.
    """
    try:
        to_rgb(value)
    except (TypeError, ValueError):
        return False
    return True


def to_rgb(value: str | Sequence[float]) -> RGBColorType:
    """Convert a palette name or RGB vector into an RGB `tuple`.

    Parameters
    ----------
    value : `str`, `list`, `tuple`, `numpy.ndarray`
        One of the single-letter names in `PALETTE`, or a numeric vector
        of three channel values in the range ``[0, 1]``.

    Returns
    -------
    rgb : `tuple` of `float`
        The ``(red, green, blue)`` triple.

    Raises
    ------
    ValueError
        If ``value`` is not a palette name, or is a numeric vector with
        the wrong number of elements or channels outside ``[0, 1]``.

    Examples
    --------
    >>> to_rgb("c")
    (0.0, 1.0, 1.0)
    >>> to_rgb([1, 1, .2])
    (1.0, 1.0, 0.2)
    """
    if isinstance(value, str):
        try:
            return PALETTE[value]
        except KeyError:
            msg = f"{_BAD_COLOR}, got '{value}'"
            raise ValueError(msg) from None
    if not is_numeric_sequence(value):
        msg = f"{_BAD_COLOR}, got {value!r}"
        raise ValueError(msg)
    arr = numpy.asarray(value, dtype=float)
    if arr.size != 3 or arr.ndim > 2:  # noqa: PLR2004
        msg = f"{_BAD_COLOR}, got {arr.size} elements"
        raise ValueError(msg)
    try:
        return mpl_to_rgb(tuple(arr.ravel().tolist()))
    except ValueError as exc:
        msg = f"{_BAD_COLOR}, {exc}"
        raise ValueError(msg) from exc


def invert(color: ColorType | numpy.ndarray) -> Any:
    """Invert a colour, or an array of colours, channel by channel.

    Each RGB channel ``c`` is replaced by ``|1 - c|``, any alpha channel
    is left as it is.

    Parameters
    ----------
    color : `str`, `tuple`, `numpy.ndarray`
        Any colour understood by matplotlib, or an ``(N, 3)`` or
        ``(N, 4)`` array of colours.

    Returns
    -------
    inverted : `tuple` or `numpy.ndarray`
        A `tuple` for a single colour, otherwise a new array of the same
        shape as the input.

    Examples
    --------
    >>> invert((1., .25, 0.))
    (0.0, 0.75, 1.0)
    >>> invert("red")
    (0.0, 1.0, 1.0, 1.0)
    """
    if isinstance(color, str):
        color = mpl_to_rgba(color)
    arr = numpy.array(color, dtype=float)
    out = numpy.abs(1. - arr)
    if arr.ndim and arr.shape[-1] == 4:  # noqa: PLR2004
        out[..., 3] = arr[..., 3]
    if out.ndim == 1:
        return tuple(out.tolist())
    return out


def is_dark(color: str | Sequence[float]) -> bool:
    """Return `True` if ``color`` has a mean channel value below 0.25."""
    return bool(numpy.mean(to_rgb(color)) < DARK_THRESHOLD)


def is_black(color: str | Sequence[float]) -> bool:
    """Return `True` if every channel of ``color`` is zero."""
    return bool(numpy.mean(to_rgb(color)) == 0)


def contrast_color(color: str | Sequence[float]) -> RGBColorType:
    """Return the text colour that contrasts best with ``color``.

    Dark colours (see `is_dark`) get white text, anything else gets the
    channel-wise inverse of itself.

    Examples
    --------
    >>> contrast_color("k")
    (1.0, 1.0, 1.0)
    >>> contrast_color("w")
    (0.0, 0.0, 0.0)
    """
    if is_dark(color):
        return WHITE
    return invert(to_rgb(color))
