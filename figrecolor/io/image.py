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

"""Invert the colours of raster image files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PIL import (
    Image,
    ImageOps,
)

from .utils import (
    file_path,
    output_path,
)

if TYPE_CHECKING:
    import os
    from pathlib import Path

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)

#: Suffix added to the name of an inverted image.
SUFFIX = "_inverted"

# modes that ImageOps.invert can handle band by band
_BAND_MODES = ("L", "LA", "RGB", "RGBA")


def writable_extensions() -> set[str]:
    """Return the set of file extensions that Pillow can read and write."""
    return {
        ext.lower()
        for ext, fmt in Image.registered_extensions().items()
        if fmt in Image.OPEN and fmt in Image.SAVE
    }


def is_image(path: str | os.PathLike) -> bool:
    """Return `True` if ``path`` has a supported image extension."""
    return file_path(path).suffix.lower() in writable_extensions()


def check_format(path: str | os.PathLike) -> None:
    """Check that ``path`` has a supported image extension.

    Raises
    ------
    ValueError
        If the extension is not supported, naming the extension.
    """
    if not is_image(path):
        ext = file_path(path).suffix or "(none)"
        msg = (
            f"Unsupported image file format: '{ext}'. "
            "See the Pillow documentation for supported file formats"
        )
        raise ValueError(msg)


def invert_pil_image(img: Image.Image) -> Image.Image:
    """Return a new image with inverted colours.

    Palette images have their colour table inverted, other images have
    their pixel values inverted. Alpha channels are preserved.
    """
    if img.mode == "P" and (palette := img.getpalette()):
        new = img.copy()
        new.putpalette([255 - value for value in palette])
        return new
    if img.mode not in _BAND_MODES:
        img = img.convert("RGBA" if "A" in img.getbands() else "RGB")
    bands = list(img.split())
    if img.mode.endswith("A"):
        alpha = bands.pop()
        inverted = [*map(ImageOps.invert, bands), alpha]
    else:
        inverted = list(map(ImageOps.invert, bands))
    return Image.merge(img.mode, inverted)


def invert_image(path: str | os.PathLike) -> Path:
    """Invert the colours of an image file.

    The result is written beside the input, with ``_inverted`` appended to
    the file name, for example ``plot.png`` becomes ``plot_inverted.png``.

    Parameters
    ----------
    path : `str`, `os.PathLike`
        The path of the image to invert.

    Returns
    -------
    output : `pathlib.Path`
        The path of the inverted image.

    Raises
    ------
    ValueError
        If the file extension is not supported.
    """
    path = file_path(path)
    check_format(path)
    output = output_path(path, SUFFIX)
    with Image.open(path) as img:
        logger.debug("Read %s image %s (%s)", img.format, path, img.mode)
        inverted = invert_pil_image(img)
    inverted.save(output)
    logger.info("Inverted image written to %s", output)
    return output
