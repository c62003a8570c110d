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

"""Recolour a figure, a figure document, or an image file."""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
    Any,
)

from ..io.document import (
    document_output_path,
    write_figure,
)
from ..io.image import invert_image
from .args import (
    Mode,
    resolve_arguments,
)
from .figure import apply

if TYPE_CHECKING:
    from pathlib import Path

    from matplotlib.figure import Figure

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)


def recolor(*args: Any) -> Figure | Path:
    """Change the colours of a figure.

    Sets the colour of the figure background, the axes, all text, legends
    and colorbars, and optionally inverts the colours of plotted data and
    the colour map. The text interpreter defaults to LaTeX.

    Parameters
    ----------
    *args
        Any combination of the following, in any order:

        ``fig``
            The `~matplotlib.figure.Figure` to recolour, defaults to the
            current figure.
        ``figure_color``
            The background colour, a single-letter name
            (``'r'``, ``'g'``, ``'b'``, ``'c'``, ``'m'``, ``'y'``, ``'k'``,
            ``'w'``) or an RGB vector, default ``'w'``.
        ``text_color``
            The second colour given is the colour for text and axes;
            the default is white on a dark figure colour (mean channel
            value below 0.25), otherwise the inverse of the figure colour.
            Pass `None` or ``[]`` as the first colour to keep the default
            figure colour.
        ``path``
            A figure document (``.fig``, ``.pickle``, ``.pkl``) to load,
            recolour and save as ``<name>_inverted<ext>`` (black figure
            colour) or ``<name>_recolored<ext>``, or any other image file
            to invert and save as ``<name>_inverted<ext>``.
            Image files accept no other arguments.
        ``'invertDataColor'``
            Invert the colours of plotted lines, markers and patches.
        ``'invertColormap'``
            Invert the figure colour map; follow with ``'vorticity'`` to use
            a red-black-blue map for vorticity contours instead.
        ``'fontsize', <int>``
            Set the font size of all text.
        ``'textInterpreter', <str>``
            One of ``'latex'`` (default), ``'tex'`` or ``'none'``.

    Returns
    -------
    fig : `~matplotlib.figure.Figure`
        The recoloured figure.
    output : `pathlib.Path`
        If an image file was given, the path of the inverted image.

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
        For arguments that are ignored, and figure children or plot types
        that aren't supported.

    Examples
    --------
    Recolour the current figure with a black background and white text:

    >>> from figrecolor import recolor
    >>> fig = recolor("k")

    Use a cyan background with yellow text, inverting the plotted data:

    >>> recolor(fig, "c", [1, 1, .2], "invertDataColor")

    Invert an image file, writing ``plot_inverted.png``:

    >>> recolor("plot.png")
    """
    config = resolve_arguments(*args)

    if config.mode is Mode.IMAGE:
        return invert_image(config.source)

    fig = config.figure
    if fig is None:
        from matplotlib import pyplot
        fig = pyplot.gcf()
    logger.debug("Recolouring %r (%s mode)", fig, config.mode.value)
    apply(fig, config)

    if config.mode is Mode.DOCUMENT:
        write_figure(
            fig,
            document_output_path(config.source, config.figure_color),
        )
    return fig
