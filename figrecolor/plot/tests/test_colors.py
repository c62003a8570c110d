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

"""Tests for :mod:`figrecolor.plot.colors`."""

import numpy
import pytest
from numpy.testing import (
    assert_allclose,
    assert_array_equal,
)

from .. import colors as plot_colors


@pytest.mark.parametrize(("in_", "out"), [
    pytest.param("c", (0., 1., 1.), id="palette"),
    pytest.param("k", (0., 0., 0.), id="black"),
    pytest.param([1, 1, .2], (1., 1., .2), id="list"),
    pytest.param((0, 0, .1), (0., 0., .1), id="tuple"),
    pytest.param(numpy.array([[.5, .5, .5]]), (.5, .5, .5), id="row"),
])
def test_to_rgb(in_, out):
    """Test `to_rgb()`."""
    assert plot_colors.to_rgb(in_) == out


@pytest.mark.parametrize("value", [
    pytest.param("red", id="name"),
    pytest.param([1, 0], id="short"),
    pytest.param([1, 0, 0, 1], id="rgba"),
    pytest.param([0, 2, 1], id="range"),
    pytest.param(5, id="scalar"),
])
def test_to_rgb_error(value):
    """Test `to_rgb()` error handling."""
    with pytest.raises(ValueError, match="Colors must be specified"):
        plot_colors.to_rgb(value)


@pytest.mark.parametrize(("value", "result"), [
    ("w", True),
    ([0, .5, 1], True),
    ("white", False),
    ([1, 1], False),
    (None, False),
])
def test_is_color(value, result):
    """Test `is_color()`."""
    assert plot_colors.is_color(value) is result


def test_invert():
    """Test `invert()` with a single colour."""
    assert_allclose(plot_colors.invert((1., .25, 0.)), (0., .75, 1.))
    assert plot_colors.invert("red") == (0., 1., 1., 1.)


def test_invert_array_keeps_alpha():
    """Test `invert()` with an array of RGBA colours."""
    rgba = numpy.array([
        [1., 0., 0., .5],
        [.2, .4, .6, 1.],
    ])
    out = plot_colors.invert(rgba)
    assert isinstance(out, numpy.ndarray)
    assert_allclose(out[:, :3], 1 - rgba[:, :3])
    assert_array_equal(out[:, 3], rgba[:, 3])


def test_invert_empty():
    """Test `invert()` with an empty colour array."""
    out = plot_colors.invert(numpy.zeros((0, 4)))
    assert out.shape == (0, 4)


@pytest.mark.parametrize("color", [
    (0., 0., 0.),
    (.1, .5, .9),
    (1 / 3, 2 / 3, 1.),
])
def test_invert_involution(color):
    """Test that inverting twice restores the original colour."""
    assert_allclose(plot_colors.invert(plot_colors.invert(color)), color)


@pytest.mark.parametrize(("color", "dark"), [
    ("k", True),
    ([0, 0, .1], True),
    ([.2, .2, .2], True),
    ([.25, .25, .25], False),
    ("b", False),
    ("w", False),
])
def test_is_dark(color, dark):
    """Test `is_dark()`."""
    assert plot_colors.is_dark(color) is dark


def test_is_black():
    """Test `is_black()`."""
    assert plot_colors.is_black("k")
    assert plot_colors.is_black([0, 0, 0])
    assert not plot_colors.is_black([0, 0, .1])


@pytest.mark.parametrize(("color", "text"), [
    pytest.param("k", (1., 1., 1.), id="black"),
    pytest.param([0, 0, .1], (1., 1., 1.), id="dark"),
    pytest.param("w", (0., 0., 0.), id="white"),
    pytest.param("c", (1., 0., 0.), id="cyan"),
    pytest.param([.5, .25, 1.], (.5, .75, 0.), id="rgb"),
])
def test_contrast_color(color, text):
    """Test `contrast_color()`."""
    assert_allclose(plot_colors.contrast_color(color), text)
