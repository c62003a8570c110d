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

"""Read, invert and install figure colour maps."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy
from matplotlib import (
    colormaps,
    rcParams,
)
from matplotlib.colors import ListedColormap

from .colors import invert
from .utils import is_colorbar_axes

if TYPE_CHECKING:
    from collections.abc import Iterator

    from matplotlib.artist import Artist
    from matplotlib.colors import Colormap
    from matplotlib.figure import Figure

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)

#: Number of rows in the warm ramp used to build the vorticity map.
VORTICITY_RAMP_SIZE = 255

#: Rows dropped from the end of each half of the vorticity map.
VORTICITY_TRIM = 110

#: Rows of white in the middle of the vorticity map (black once inverted).
VORTICITY_BAND = 15


def get_colormap_table(
    cmap: Colormap,
    n: int | None = None,
) -> numpy.ndarray:
    """Return the colour table of a colour map as an ``(N, 3)`` array.

    Parameters
    ----------
    cmap : `~matplotlib.colors.Colormap`
        The colour map to sample.

    n : `int`, optional
        The number of rows to return, defaults to ``cmap.N`` so that the
        lookup table is returned exactly.

    Returns
    -------
    table : `numpy.ndarray`
        Array of RGB rows.
    """
    if n is None or n == cmap.N:
        return cmap(numpy.arange(cmap.N))[:, :3]
    return cmap.resampled(n)(numpy.arange(n))[:, :3]


def invert_table(table: numpy.ndarray) -> numpy.ndarray:
    """Invert every row of a colour table."""
    return invert(numpy.asarray(table, dtype=float))


def resample_table(table: numpy.ndarray, n: int) -> numpy.ndarray:
    """Resample a colour table to ``n`` rows by nearest index."""
    index = numpy.floor(numpy.linspace(0, len(table) - 1, n) + .5)
    return table[index.astype(int)]


def vorticity_table(n: int) -> numpy.ndarray:
    """Build a diverging red-black-blue colour table with ``n`` rows.

    The table is built from the ``hot`` colour map: the upper part of the
    reversed ``hot`` ramp for one sign, the upper part of its reversed
    inverse for the other, joined by a short white band, then reversed
    and inverted as a whole.

    Parameters
    ----------
    n : `int`
        The number of rows in the output table.

    Returns
    -------
    table : `numpy.ndarray`
        Array of RGB rows, blue at the bottom, red at the top, black in
        the middle.
    """
    hot = get_colormap_table(colormaps["hot"], VORTICITY_RAMP_SIZE)
    positive = hot[::-1]
    negative = invert_table(hot)[::-1]
    spliced = numpy.vstack((
        negative[VORTICITY_TRIM:],
        numpy.ones((VORTICITY_BAND, 3)),
        positive[:-VORTICITY_TRIM],
    ))
    return resample_table(invert_table(spliced[::-1]), n)


# -- figure colour maps --------------

def iter_mappables(fig: Figure) -> Iterator[Artist]:
    """Yield every colour-mapped data artist in ``fig``.

    Colorbars are skipped, they follow the artist they were drawn for.
    """
    for ax in fig.axes:
        if is_colorbar_axes(ax):
            continue
        for artist in (*ax.images, *ax.collections):
            if (
                hasattr(artist, "get_cmap")
                and artist.get_array() is not None
            ):
                yield artist


def get_active_colormap(fig: Figure) -> Colormap:
    """Return the colour map currently in use by ``fig``.

    This is the colour map of the most recently added colour-mapped
    artist, or the default image colour map if there are none.
    """
    cmap = None
    for mappable in iter_mappables(fig):
        cmap = mappable.get_cmap()
    if cmap is None:
        return colormaps[rcParams["image.cmap"]]
    return cmap


def install_colormap(fig: Figure, cmap: Colormap) -> int:
    """Set ``cmap`` on every colour-mapped artist in ``fig``.

    A single colour map is used for the whole figure, so any axes that
    had a different colour map will be changed too.

    Returns
    -------
    count : `int`
        The number of artists updated.
    """
    count = 0
    for mappable in iter_mappables(fig):
        mappable.set_cmap(cmap)
        count += 1
    logger.debug("Installed colour map '%s' on %d artists", cmap.name, count)
    return count


def invert_colormap(fig: Figure, *, vorticity: bool = False) -> ListedColormap:
    """Invert the active colour map of ``fig``.

    Parameters
    ----------
    fig : `~matplotlib.figure.Figure`
        The figure to update.

    vorticity : `bool`, optional
        If `True`, replace the colour map with `vorticity_table` instead
        of inverting it.

    Returns
    -------
    cmap : `~matplotlib.colors.ListedColormap`
        The new colour map, with the same number of entries as the old one.
    """
    current = get_active_colormap(fig)
    table = get_colormap_table(current)
    if vorticity:
        cmap = ListedColormap(vorticity_table(len(table)), name="vorticity")
    elif current.name.endswith("_inverted"):
        cmap = ListedColormap(
            invert_table(table),
            name=current.name.removesuffix("_inverted"),
        )
    else:
        cmap = ListedColormap(
            invert_table(table),
            name=f"{current.name}_inverted",
        )
    install_colormap(fig, cmap)
    return cmap
