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

"""Apply a `~figrecolor.plot.args.Configuration` to a figure."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import numpy
from matplotlib.axes import Axes
from matplotlib.legend import Legend
from matplotlib.text import Text

from .colormap import invert_colormap
from .colors import (
    invert,
    is_dark,
)
from .series import invert_series
from .tex import (
    style_text,
    text_properties,
)
from .utils import (
    is_colorbar_axes,
    kind_name,
    warn,
)

if TYPE_CHECKING:
    from collections.abc import (
        Callable,
        Iterable,
        Iterator,
    )
    from typing import Any

    from matplotlib.artist import Artist
    from matplotlib.axis import Axis
    from matplotlib.figure import Figure
    from matplotlib.typing import ColorType

    from .args import Configuration

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)


class ObjectKind(Enum):
    """The kinds of direct figure children that can be recoloured."""

    AXES = "axes"
    LEGEND = "legend"
    COLORBAR = "colorbar"
    TEXT = "text"
    OTHER = "other"

    @classmethod
    def of(cls, artist: Any) -> ObjectKind:
        """Return the kind of ``artist``."""
        if isinstance(artist, Axes):
            if is_colorbar_axes(artist):
                return cls.COLORBAR
            return cls.AXES
        if isinstance(artist, Legend):
            return cls.LEGEND
        if isinstance(artist, Text):
            return cls.TEXT
        return cls.OTHER


def iter_children(fig: Figure) -> Iterator[Artist]:
    """Yield the direct children of ``fig``, except its background."""
    for child in fig.get_children():
        if child is not fig.patch:
            yield child


# -- axis helpers --------------------

_OPPOSITE = {"left": "right", "right": "left"}


def _set_axis_color(
    axis: Axis,
    color: ColorType,
    spines: Iterable[str] = (),
) -> None:
    """Set the colour of the ticks, labels and spines of an axis."""
    axis.set_tick_params(which="both", colors=color)
    axis.label.set_color(color)
    axis.get_offset_text().set_color(color)
    if (line := getattr(axis, "line", None)) is not None:  # 3D axes
        line.set_color(color)
    for name in spines:
        if name in axis.axes.spines:
            axis.axes.spines[name].set_edgecolor(color)


def _style_axis_text(
    axis: Axis,
    fontsize: int | None,
    props: dict[str, bool],
) -> None:
    """Set the font size and interpreter for all text of an axis."""
    if fontsize is not None:
        axis.set_tick_params(which="both", labelsize=fontsize)
    for label in axis.get_ticklabels(which="both"):
        style_text(label, props=props)
    style_text(axis.get_offset_text(), fontsize=fontsize, props=props)
    style_text(axis.label, fontsize=fontsize, props=props)


def twin_axes(ax: Axes) -> list[Axes]:
    """Return the other axes drawn with ``ax`` as its twin.

    Twins (from :meth:`~matplotlib.axes.Axes.twinx`) share the x-axis and
    have the same position, each one holds one of the y-axis rulers.
    """
    bounds = ax.get_position().bounds
    return [
        other for other in ax.get_shared_x_axes().get_siblings(ax)
        if other is not ax and numpy.allclose(
            other.get_position().bounds,
            bounds,
        )
    ]


# -- handlers ------------------------

def recolor_axes(
    ax: Axes,
    config: Configuration,
    props: dict[str, bool],
) -> None:
    """Recolour an axes and, if requested, the series plotted on it.

    An axes with a single y ruler has its y-axis set to the text colour.
    For twinned axes the existing colour of each y ruler is kept, and
    inverted if the data colours are being inverted or the figure colour
    is dark.
    """
    ax.set_facecolor(config.figure_color)
    xaxes = [ax.xaxis]
    if (zaxis := getattr(ax, "zaxis", None)) is not None:
        xaxes.append(zaxis)
    for axis in xaxes:
        _set_axis_color(axis, config.text_color, spines=("bottom", "top"))
        _style_axis_text(axis, config.fontsize, props)

    if not twin_axes(ax):
        _set_axis_color(ax.yaxis, config.text_color, spines=("left", "right"))
    elif config.invert_data_color or is_dark(config.figure_color):
        side = ax.yaxis.get_label_position()
        _set_axis_color(
            ax.yaxis,
            invert(ax.yaxis.label.get_color()),
            spines=(side,),
        )
        # the twin draws the spine on the other side
        ax.spines[_OPPOSITE[side]].set_visible(False)
    _style_axis_text(ax.yaxis, config.fontsize, props)

    if config.invert_data_color:
        invert_series(ax, invert_colormap=config.invert_colormap)

    style_text(
        ax.title,
        color=config.text_color,
        fontsize=config.fontsize,
        props=props,
    )
    if (legend := ax.get_legend()) is not None:
        recolor_legend(legend, config, props)


def recolor_legend(
    legend: Legend,
    config: Configuration,
    props: dict[str, bool],
) -> None:
    """Recolour the text, frame and title of a legend."""
    for text in legend.get_texts():
        style_text(
            text,
            color=config.text_color,
            fontsize=config.fontsize,
            props=props,
        )
    frame = legend.get_frame()
    frame.set_edgecolor(config.text_color)
    frame.set_facecolor(config.figure_color)
    style_text(legend.get_title(), color=config.text_color, props=props)


def recolor_colorbar(
    ax: Axes,
    config: Configuration,
    props: dict[str, bool],
) -> None:
    """Recolour the ticks, label and outline of a colorbar."""
    for axis in (ax.xaxis, ax.yaxis):
        _set_axis_color(axis, config.text_color)
        _style_axis_text(axis, config.fontsize, props)
    for spine in ax.spines.values():
        spine.set_edgecolor(config.text_color)


def recolor_text(
    text: Text,
    config: Configuration,
    props: dict[str, bool],
) -> None:
    """Recolour a free-floating text annotation."""
    style_text(
        text,
        color=config.text_color,
        fontsize=config.fontsize,
        props=props,
    )


_HANDLERS: dict[ObjectKind, Callable[[Any, Configuration, dict], None]] = {
    ObjectKind.AXES: recolor_axes,
    ObjectKind.LEGEND: recolor_legend,
    ObjectKind.COLORBAR: recolor_colorbar,
    ObjectKind.TEXT: recolor_text,
}


def apply(fig: Figure, config: Configuration) -> Figure:
    """Recolour ``fig`` in place.

    Parameters
    ----------
    fig : `~matplotlib.figure.Figure`
        The figure to recolour.

    config : `~figrecolor.plot.args.Configuration`
        The resolved settings.

    Returns
    -------
    fig : `~matplotlib.figure.Figure`
        The same figure.

    Warns
    -----
    RecolorWarning
        For each child of the figure that isn't supported.
    """
    props = text_properties(config.interpreter)
    fig.set_facecolor(config.figure_color)
    for child in iter_children(fig):
        kind = ObjectKind.of(child)
        try:
            handler = _HANDLERS[kind]
        except KeyError:
            warn(f"Unidentified object type: '{kind_name(child)}'")
            continue
        logger.debug("Recolouring %s %r", kind.value, child)
        handler(child, config, props)

    if config.invert_colormap:
        cmap = invert_colormap(fig, vorticity=config.invert_vorticity)
        logger.debug("Inverted colour map, now '%s'", cmap.name)
    return fig
