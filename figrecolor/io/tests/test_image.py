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

"""Tests for :mod:`figrecolor.io.image`."""

import pytest
from PIL import Image

from .. import image as io_image


@pytest.mark.parametrize("ext", [".png", ".jpg", ".tif", ".bmp", ".gif"])
def test_is_image(ext):
    """Test `is_image()` for common formats."""
    assert io_image.is_image(f"plot{ext}")
    assert io_image.is_image(f"plot{ext.upper()}")


@pytest.mark.parametrize("path", ["plot.xyz", "plot", "plot.fig"])
def test_check_format_error(path):
    """Test `check_format()` with unsupported extensions."""
    with pytest.raises(ValueError, match="Unsupported image file format"):
        io_image.check_format(path)


def test_invert_pil_image_rgb():
    """Test `invert_pil_image()` for an RGB image."""
    img = Image.new("RGB", (2, 2), (10, 20, 30))
    inverted = io_image.invert_pil_image(img)
    assert inverted.mode == "RGB"
    assert inverted.getpixel((0, 0)) == (245, 235, 225)
    # the input is not changed
    assert img.getpixel((0, 0)) == (10, 20, 30)


def test_invert_pil_image_rgba():
    """Test `invert_pil_image()` preserves transparency."""
    img = Image.new("RGBA", (2, 2), (0, 100, 255, 128))
    inverted = io_image.invert_pil_image(img)
    assert inverted.mode == "RGBA"
    assert inverted.getpixel((1, 1)) == (255, 155, 0, 128)


def test_invert_pil_image_grayscale():
    """Test `invert_pil_image()` for a grayscale image."""
    img = Image.new("L", (2, 2), 50)
    assert io_image.invert_pil_image(img).getpixel((0, 0)) == 205


def test_invert_pil_image_palette():
    """Test `invert_pil_image()` inverts the palette of a palette image."""
    img = Image.new("P", (2, 2), 1)
    img.putpalette([10, 20, 30, 200, 100, 0])
    inverted = io_image.invert_pil_image(img)
    assert inverted.mode == "P"
    assert inverted.getpixel((0, 0)) == 1
    assert inverted.getpalette()[:6] == [245, 235, 225, 55, 155, 255]


def test_invert_image(png_file):
    """Test `invert_image()` writes the inverted image beside the input."""
    output = io_image.invert_image(png_file)
    assert output == png_file.parent / "plot_inverted.png"
    with Image.open(output) as img:
        assert img.getpixel((0, 0)) == (245, 235, 225)
        assert img.getpixel((3, 3)) == (0, 255, 255)
    with Image.open(png_file) as img:
        assert img.getpixel((0, 0)) == (10, 20, 30)


def test_invert_image_unsupported(tmp_path):
    """Test `invert_image()` with an unsupported file."""
    path = tmp_path / "data.xyz"
    path.write_text("data")
    with pytest.raises(
        ValueError,
        match=r"Unsupported image file format: '\.xyz'",
    ):
        io_image.invert_image(path)
