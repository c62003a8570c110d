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

"""Invert the colours of the data series drawn on an axes."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import numpy
from matplotlib.collections import (
    PathCollection,
    PolyCollection,
)
from matplotlib.container import ErrorbarContainer
from matplotlib.contour import ContourSet
from matplotlib.lines import Line2D
from matplotlib.patches import Patch
from matplotlib.quiver import Quiver

from .colors import invert
from .utils import (
    kind_name,
    warn,
)

if TYPE_CHECKING:
    from collections.abc import (
        Callable,
        Iterator,
    )
    from typing import Any

    from matplotlib.artist import Artist
    from matplotlib.axes import Axes
    from matplotlib.collections import Collection

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)


class SeriesKind(Enum):
    """The kinds of plotted series that can have their colours inverted."""

    SCATTER = "scatter"
    LINE = "line"
    POLYGON = "polygon"
    QUIVER = "quiver"
    ERRORBAR = "errorbar"
    CONTOUR = "contour"
    OTHER = "other"

    @classmethod
    def of(cls, artist: Any) -> SeriesKind:
        """Return the kind of ``artist``.

        The order of the checks matters, a `~matplotlib.quiver.Quiver` is
        also a `~matplotlib.collections.PolyCollection`.
        """
        for type_, kind in (
            (ErrorbarContainer, cls.ERRORBAR),
            (ContourSet, cls.CONTOUR),
            (Quiver, cls.QUIVER),
            (PathCollection, cls.SCATTER),
            (Line2D, cls.LINE),
            (Patch, cls.POLYGON),
            (PolyCollection, cls.POLYGON),
        ):
            if isinstance(artist, type_):
                return kind
        return cls.OTHER


# -- sentinel checks -----------------

def _is_none(color: Any) -> bool:
    """Return `True` if ``color`` means 'no colour'.

    That is the string ``"none"``, an empty colour array, or a single
    colour that is fully transparent.
    """
    if isinstance(color, str):
        return color.lower() == "none"
    arr = numpy.asarray(color, dtype=float)
    if arr.size == 0:
        return True
    return arr.ndim == 1 and arr.size == 4 and arr[3] == 0  # noqa: PLR2004


def _is_mapped(collection: Collection) -> bool:
    """Return `True` if the colours of ``collection`` come from a colour map."""
    return collection.get_array() is not None


# -- per-kind inverters --------------

def _is_auto(color: Any) -> bool:
    return isinstance(color, str) and color.lower() == "auto"


def _invert_line(line: Line2D) -> None:
    # 'auto' marker colours follow the line colour, so are left as they are
    auto_edge = _is_auto(line._markeredgecolor)  # noqa: SLF001
    auto_face = _is_auto(line._markerfacecolor)  # noqa: SLF001
    line.set_color(invert(line.get_color()))
    edge = line.get_markeredgecolor()
    if not (auto_edge or _is_none(edge)):
        line.set_markeredgecolor(invert(edge))
    face = line.get_markerfacecolor()
    if not (auto_face or _is_none(face)):
        line.set_markerfacecolor(invert(face))


def _invert_scatter(collection: PathCollection) -> None:
    edge = collection.get_edgecolor()
    face = collection.get_facecolor()
    mapped = _is_mapped(collection)
    # mapped edges that follow the face are left to the colour map
    if not _is_none(edge) and not (
        mapped and numpy.array_equal(edge, face)
    ):
        collection.set_edgecolor(invert(edge))
    if not mapped and not _is_none(face):
        collection.set_facecolor(invert(face))


def _invert_polygon(patch: Patch | PolyCollection) -> None:
    edge = patch.get_edgecolor()
    face = patch.get_facecolor()
    if not _is_none(edge):
        patch.set_edgecolor(invert(edge))
    if isinstance(patch, Patch):
        filled = patch.get_fill()
    else:
        filled = not _is_mapped(patch)
    if filled and not _is_none(face):
        patch.set_facecolor(invert(face))


def _invert_quiver(quiver: Quiver) -> None:
    edge = quiver.get_edgecolor()
    quiver.set_facecolor(invert(quiver.get_facecolor()))
    if not _is_none(edge):
        quiver.set_edgecolor(invert(edge))


def _invert_errorbar(container: ErrorbarContainer) -> None:
    data_line, caplines, barlinecols = container.lines
    for line in (data_line, *caplines):
        if line is not None:
            _invert_line(line)
    for collection in barlinecols:
        collection.set_color(invert(collection.get_color()))


def _check_contour(contour: ContourSet, *, invert_colormap: bool) -> None:
    if not invert_colormap:
        warn(
            f"Colour map inversion is not enabled for '{kind_name(contour)}', "
            "pass 'invertColormap' to invert its colours",
            stacklevel=4,
        )


_INVERTERS: dict[SeriesKind, Callable[[Any], None]] = {
    SeriesKind.SCATTER: _invert_scatter,
    SeriesKind.LINE: _invert_line,
    SeriesKind.POLYGON: _invert_polygon,
    SeriesKind.QUIVER: _invert_quiver,
    SeriesKind.ERRORBAR: _invert_errorbar,
}


# -- axes walk -----------------------

def _errorbar_members(container: ErrorbarContainer) -> Iterator[Artist]:
    data_line, caplines, barlinecols = container.lines
    if data_line is not None:
        yield data_line
    yield from caplines
    yield from barlinecols


def iter_series(ax: Axes) -> Iterator[tuple[SeriesKind, Any]]:
    """Yield ``(kind, artist)`` for every plotted series on ``ax``.

    Error bars are yielded first as whole containers, the lines and
    collections that make them up are not yielded again.
    """
    grouped: set[int] = set()
    for container in ax.containers:
        if isinstance(container, ErrorbarContainer):
            grouped.update(map(id, _errorbar_members(container)))
            yield SeriesKind.ERRORBAR, container
    for artist in (
        *ax.lines,
        *ax.collections,
        *ax.patches,
        *ax.images,
        *ax.texts,
    ):
        if id(artist) not in grouped:
            yield SeriesKind.of(artist), artist


def invert_series(ax: Axes, *, invert_colormap: bool = False) -> int:
    """Invert the colours of every plotted series on ``ax``.

    Parameters
    ----------
    ax : `~matplotlib.axes.Axes`
        The axes whose series should be updated.

    invert_colormap : `bool`, optional
        Whether the figure colour map is being inverted as well; contour
        series take their colours only from the colour map, so a warning
        is emitted for them if this is `False`.

    Returns
    -------
    count : `int`
        The number of series whose colours were inverted.

    Warns
    -----
    RecolorWarning
        For each series that isn't supported.
    """
    count = 0
    for kind, artist in iter_series(ax):
        if kind is SeriesKind.CONTOUR:
            _check_contour(artist, invert_colormap=invert_colormap)
            continue
        try:
            inverter = _INVERTERS[kind]
        except KeyError:
            warn(f"Plot type '{kind_name(artist)}' not supported")
            continue
        inverter(artist)
        count += 1
    logger.debug("Inverted colours of %d series on %r", count, ax)
    return count
