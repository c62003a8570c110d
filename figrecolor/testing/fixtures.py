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

"""Custom pytest fixtures for figrecolor.

This module is imported in figrecolor.conftest such that all fixtures
declared here are available to test functions/methods by default.

Developer note: **none of the fixtures here should declare autouse=True**.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest import mock

import numpy
import pytest
from matplotlib import pyplot
from PIL import Image

from ..io.document import write_figure

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from matplotlib.figure import Figure


# -- figures -------------------------

@pytest.fixture
def fig() -> Iterator[Figure]:
    """Yield a new, empty, current figure, closing it afterwards."""
    fig = pyplot.figure()
    yield fig
    pyplot.close(fig)


@pytest.fixture
def line_fig(fig: Figure) -> Figure:
    """A figure with one axes holding a red line, a title and a legend."""
    ax = fig.add_subplot()
    ax.plot([1, 2, 3], color=(1., 0., 0.), marker="o", label="data")
    ax.set_title("Title")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.legend()
    return fig


@pytest.fixture
def image_fig(fig: Figure) -> Figure:
    """A figure with an image and a colorbar."""
    ax = fig.add_subplot()
    image = ax.imshow(numpy.arange(16).reshape(4, 4), cmap="viridis")
    fig.colorbar(image, ax=ax, label="value")
    return fig


@pytest.fixture
def notex() -> Iterator[None]:
    """Pretend that LaTeX is not installed."""
    with mock.patch("figrecolor.plot.tex.has_tex", return_value=False):
        yield


# -- files ---------------------------

@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """Write a small RGB PNG image and return its path."""
    path = tmp_path / "plot.png"
    data = numpy.zeros((4, 4, 3), dtype=numpy.uint8)
    data[..., 0] = 255
    data[0, 0] = (10, 20, 30)
    Image.fromarray(data).save(path)
    return path


@pytest.fixture
def document_file(tmp_path: Path, line_fig: Figure) -> Path:
    """Write ``line_fig`` as a figure document and return its path."""
    return write_figure(line_fig, tmp_path / "plot.fig")
