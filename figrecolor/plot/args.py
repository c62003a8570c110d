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

"""Resolve the arguments of `~figrecolor.recolor` into a `Configuration`.

The arguments are a loosely-typed, order-insensitive list: a figure,
up to two colours, a file path, flags and name/value options.
Each argument is classified once into a `Token`, and the tokens are
then folded into a single, immutable `Configuration` that is used by
everything else.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    NamedTuple,
)

import numpy
from matplotlib.artist import Artist
from matplotlib.figure import Figure

from ..io import (
    document as io_document,
    image as io_image,
)
from ..io.utils import file_path
from .colors import (
    WHITE,
    contrast_color,
    is_numeric_sequence,
    is_palette_color,
    to_rgb,
)
from .tex import (
    DEFAULT_INTERPRETER,
    validate_interpreter,
)
from .utils import (
    kind_name,
    warn,
)

if TYPE_CHECKING:
    from collections.abc import (
        Iterator,
        Sequence,
    )
    from pathlib import Path

    from matplotlib.typing import RGBColorType

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)

#: Maximum number of colour arguments (figure colour, then text colour).
MAX_COLORS = 2


class Mode(Enum):
    """What a call to `~figrecolor.recolor` operates on."""

    #: recolour a live figure
    FIGURE = "figure"
    #: recolour a figure loaded from a document file, then save it
    DOCUMENT = "document"
    #: invert the colours of a raster image file
    IMAGE = "image"


class TokenKind(Enum):
    """Classification of a single argument."""

    FIGURE = "figure"
    COLOR = "color"
    EMPTY_COLOR = "empty color"
    DOCUMENT = "document"
    IMAGE = "image"
    INVERT_DATA_COLOR = "invertDataColor"
    INVERT_COLORMAP = "invertColormap"
    FONTSIZE = "fontsize"
    INTERPRETER = "textInterpreter"
    UNKNOWN = "unknown"


#: Literal strings with a meaning of their own.
KEYWORDS = {
    "invertDataColor": TokenKind.INVERT_DATA_COLOR,
    "invertColormap": TokenKind.INVERT_COLORMAP,
    "fontsize": TokenKind.FONTSIZE,
    "textInterpreter": TokenKind.INTERPRETER,
}

#: Literal that may follow ``invertColormap``.
VORTICITY = "vorticity"


class Token(NamedTuple):
    """A classified argument."""

    kind: TokenKind
    value: Any


class Configuration(NamedTuple):
    """The fully resolved settings for one recolouring call."""

    #: background colour of the figure and axes
    figure_color: RGBColorType = WHITE
    #: colour of text, axis lines and ticks
    text_color: RGBColorType = (0., 0., 0.)
    #: font size for all text, `None` to leave unchanged
    fontsize: int | None = None
    #: one of ``"latex"``, ``"tex"`` or ``"none"``
    interpreter: str = DEFAULT_INTERPRETER
    #: invert the colours of plotted series
    invert_data_color: bool = False
    #: invert the figure colour map
    invert_colormap: bool = False
    #: replace the colour map with the red-black-blue vorticity map
    invert_vorticity: bool = False
    #: the figure to recolour, `None` for the current figure
    figure: Figure | None = None
    #: path of the input file, if any
    source: Path | None = None
    #: what the call operates on
    mode: Mode = Mode.FIGURE


# -- classification ------------------

def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, numpy.ndarray):
        return value.size == 0
    return isinstance(value, (list, tuple)) and not value


def _is_file(value: Any) -> bool:
    return (
        isinstance(value, (str, os.PathLike))
        and file_path(value).is_file()
    )


def classify(value: Any) -> Token:
    """Classify a single argument.

    Parameters
    ----------
    value : `object`
        Any argument passed to `~figrecolor.recolor`.

    Returns
    -------
    token : `Token`
        The classified argument; colours are converted to RGB triples,
        file paths to `~pathlib.Path`.

    Raises
    ------
    TypeError
        If ``value`` is a matplotlib object other than a
        `~matplotlib.figure.Figure`, or something that is not a string,
        path, colour or figure.
    ValueError
        If ``value`` is a malformed colour, or a file with an unsupported
        extension.
    """
    if isinstance(value, Figure):
        return Token(TokenKind.FIGURE, value)
    if isinstance(value, Artist):
        msg = (
            f"Unidentified input object type: '{kind_name(value)}', "
            "expected 'Figure'"
        )
        raise TypeError(msg)
    if _is_empty(value):
        return Token(TokenKind.EMPTY_COLOR, None)
    if (
        is_numeric_sequence(value)
        or is_palette_color(value)
        or isinstance(value, (int, float)) and not isinstance(value, bool)
    ):
        return Token(TokenKind.COLOR, to_rgb(value))
    if _is_file(value):
        path = file_path(value)
        if io_document.is_document(path):
            return Token(TokenKind.DOCUMENT, path)
        io_image.check_format(path)
        return Token(TokenKind.IMAGE, path)
    if isinstance(value, os.PathLike):
        return Token(TokenKind.UNKNOWN, os.fspath(value))
    if isinstance(value, str):
        return Token(KEYWORDS.get(value, TokenKind.UNKNOWN), value)
    msg = f"Unidentified input argument of type '{kind_name(value)}'"
    raise TypeError(msg)


def _validate_fontsize(value: Any) -> int:
    # whole-number floats are accepted, e.g. 20.0
    if isinstance(value, (float, numpy.floating)) and value.is_integer():
        value = int(value)
    if (
        isinstance(value, (int, numpy.integer))
        and not isinstance(value, bool)
        and value > 0
    ):
        return int(value)
    msg = f"fontsize must be a positive integer, got {value!r}"
    raise ValueError(msg)


def tokenize(args: Sequence[Any]) -> Iterator[Token]:
    """Classify each of ``args`` in turn, yielding a `Token` for each.

    Name/value options consume the following argument, and
    ``invertColormap`` consumes a following ``"vorticity"``; the
    ``value`` of those tokens is the (validated) option value.

    This is a generator, so arguments after a token the caller stops at
    are never classified.
    """
    i = 0
    while i < len(args):
        token = classify(args[i])
        i += 1
        if token.kind in (TokenKind.FONTSIZE, TokenKind.INTERPRETER):
            try:
                value = args[i]
            except IndexError:
                msg = f"No value given for '{token.value}'"
                raise ValueError(msg) from None
            i += 1
            if token.kind is TokenKind.FONTSIZE:
                value = _validate_fontsize(value)
            else:
                value = validate_interpreter(value)
            token = Token(token.kind, value)
        elif token.kind is TokenKind.INVERT_COLORMAP:
            vorticity = (
                i < len(args)
                and isinstance(args[i], str)
                and args[i] == VORTICITY
            )
            i += vorticity
            token = Token(token.kind, vorticity)
        yield token


# -- resolution ----------------------

def derive_defaults(
    figure_color: str | Sequence[float] | None = None,
    text_color: str | Sequence[float] | None = None,
    *,
    fontsize: int | None = None,
    interpreter: str | None = None,
    invert_data_color: bool = False,
    invert_colormap: bool = False,
    invert_vorticity: bool = False,
    figure: Figure | None = None,
    source: Path | None = None,
    mode: Mode = Mode.FIGURE,
) -> Configuration:
    """Fill in every unset setting and return a `Configuration`.

    The figure colour defaults to white. The text colour defaults to
    white if the figure colour is dark (mean channel value below 0.25),
    otherwise to the inverse of the figure colour.
    The current figure is not looked up here, ``figure`` stays `None`
    if not given.
    """
    figure_color = WHITE if figure_color is None else to_rgb(figure_color)
    if text_color is None:
        text_color = contrast_color(figure_color)
    else:
        text_color = to_rgb(text_color)
    return Configuration(
        figure_color=figure_color,
        text_color=text_color,
        fontsize=fontsize,
        interpreter=interpreter or DEFAULT_INTERPRETER,
        invert_data_color=bool(invert_data_color),
        invert_colormap=bool(invert_colormap),
        invert_vorticity=bool(invert_colormap and invert_vorticity),
        figure=figure,
        source=source,
        mode=mode,
    )


def resolve_arguments(*args: Any) -> Configuration:
    """Resolve the arguments of `~figrecolor.recolor`.

    Parameters
    ----------
    *args
        Any of:

        - a `~matplotlib.figure.Figure`;
        - up to two colours, single-letter names or RGB vectors; the first
          is the figure colour and the second the text colour, `None` or
          ``[]`` keeps a slot at its default;
        - the path of a figure document, which is loaded and recoloured;
        - the path of a raster image, which is inverted; nothing after the
          image path is used;
        - ``"invertDataColor"``, ``"invertColormap"`` (optionally followed
          by ``"vorticity"``);
        - ``"fontsize", <int>`` and ``"textInterpreter", <str>``.

    Returns
    -------
    config : `Configuration`
        The resolved settings.

    Raises
    ------
    TypeError
        If a matplotlib object other than a figure is given.
    ValueError
        For a malformed colour, an unsupported image format, or an
        invalid option value.

    Warns
    -----
    RecolorWarning
        For unidentified string arguments, colours after the second,
        and arguments given alongside an image path.
    """
    colors: list[RGBColorType | None] = []
    settings: dict[str, Any] = {}
    for token in tokenize(args):
        kind, value = token
        if kind is TokenKind.FIGURE:
            settings["figure"] = value
        elif kind in (TokenKind.COLOR, TokenKind.EMPTY_COLOR):
            if len(colors) < MAX_COLORS:
                colors.append(value)
            else:
                warn(
                    f"Only {MAX_COLORS} colours are accepted (figure, then "
                    f"text), ignoring {value}",
                )
        elif kind is TokenKind.IMAGE:
            settings.update(mode=Mode.IMAGE, source=value)
            if len(args) > 1:
                warn(
                    "Only one input argument is accepted when passing an "
                    "image file, further inputs ignored",
                )
            break
        elif kind is TokenKind.DOCUMENT:
            settings.update(
                mode=Mode.DOCUMENT,
                source=value,
                figure=io_document.read_figure(value),
            )
        elif kind is TokenKind.INVERT_DATA_COLOR:
            settings["invert_data_color"] = True
        elif kind is TokenKind.INVERT_COLORMAP:
            settings["invert_colormap"] = True
            settings["invert_vorticity"] = (
                settings.get("invert_vorticity", False) or value
            )
        elif kind is TokenKind.FONTSIZE:
            settings["fontsize"] = value
        elif kind is TokenKind.INTERPRETER:
            settings["interpreter"] = value
        else:
            warn(
                f"Unidentified input argument: '{value}', "
                "value will be ignored",
            )

    colors.extend([None] * (MAX_COLORS - len(colors)))
    config = derive_defaults(*colors, **settings)
    logger.debug("Resolved %d arguments to %s", len(args), config)
    return config
