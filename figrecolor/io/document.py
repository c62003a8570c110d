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

"""Read and write figure documents.

A figure document is a pickled `~matplotlib.figure.Figure`, which
keeps the full tree of axes, legends and plotted series so that it can
be loaded, recoloured, and saved again.

.. warning::

   Loading a document unpickles it, only load files you trust.
"""

from __future__ import annotations

import logging
import pickle
from typing import TYPE_CHECKING

from matplotlib.figure import Figure

from ..plot.colors import is_black
from .utils import (
    file_path,
    output_path,
)

if TYPE_CHECKING:
    import os
    from collections.abc import Sequence
    from pathlib import Path

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)

#: File extensions recognised as figure documents.
DOCUMENT_EXTENSIONS = (
    ".fig",
    ".pickle",
    ".pkl",
)

#: Suffix for documents recoloured to a black background.
INVERTED_SUFFIX = "_inverted"

#: Suffix for documents recoloured to any other background.
RECOLORED_SUFFIX = "_recolored"


def is_document(path: str | os.PathLike) -> bool:
    """Return `True` if ``path`` has a figure document extension."""
    return file_path(path).suffix.lower() in DOCUMENT_EXTENSIONS


def read_figure(path: str | os.PathLike) -> Figure:
    """Load a `~matplotlib.figure.Figure` from a document file.

    Raises
    ------
    TypeError
        If the file doesn't hold a figure.
    """
    path = file_path(path)
    with path.open("rb") as fobj:
        fig = pickle.load(fobj)  # noqa: S301
    if not isinstance(fig, Figure):
        msg = f"{path} does not contain a Figure, found {type(fig).__name__}"
        raise TypeError(msg)
    logger.debug("Read figure from %s", path)
    return fig


def write_figure(fig: Figure, path: str | os.PathLike) -> Path:
    """Save ``fig`` as a document file at ``path``."""
    path = file_path(path)
    with path.open("wb") as fobj:
        pickle.dump(fig, fobj)
    logger.info("Figure written to %s", path)
    return path


def document_output_path(
    path: str | os.PathLike,
    figure_color: str | Sequence[float],
) -> Path:
    """Return the path to save a recoloured document to.

    Documents recoloured to black are saved as ``<name>_inverted<ext>``,
    anything else as ``<name>_recolored<ext>``.
    """
    if is_black(figure_color):
        return output_path(path, INVERTED_SUFFIX)
    return output_path(path, RECOLORED_SUFFIX)
