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

"""Handle the text interpreter used for figure labels."""

from __future__ import annotations

import functools
import logging
from shutil import which
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.text import Text
    from matplotlib.typing import ColorType

__author__ = "Eric Handy-Cardenas"

logger = logging.getLogger(__name__)

#: Accepted values for the text interpreter.
INTERPRETERS = (
    "latex",
    "tex",
    "none",
)
DEFAULT_INTERPRETER = "latex"


def _test_usetex() -> None:
    """Draw (but don't show) a test image using matplotlib and LaTeX."""
    from matplotlib import (
        pyplot,
        rc_context,
    )
    with rc_context({"text.usetex": True}):
        fig = pyplot.figure()
        try:
            ax = fig.gca()
            ax.set_xlabel(r"\LaTeX")
            fig.canvas.draw()
        finally:
            pyplot.close(fig)


@functools.cache
def has_tex() -> bool:
    """Return `True` if LaTeX is usable on this system.

    Checks for ``latex``, ``pdflatex``, and ``dvipng`` on the path, and
    then attemps to draw an image using LaTeX syntax.

    Returns
    -------
    hastex : `bool`
        `True` if the test image is drawn correctly, otherwise `False`.
    """
    for exe in ("latex", "pdflatex", "dvipng"):
        if which(exe) is None:
            return False

    try:
        _test_usetex()
    except Exception:  # noqa: BLE001
        # failed for any reason
        return False

    return True


def validate_interpreter(interpreter: str) -> str:
    """Return ``interpreter`` if it is one of `INTERPRETERS`.

    Raises
    ------
    ValueError
        For any other value.
    """
    if interpreter not in INTERPRETERS:
        msg = (
            f"Invalid text interpreter '{interpreter}'. "
            f"Must be one of {', '.join(map(repr, INTERPRETERS))}"
        )
        raise ValueError(msg)
    return interpreter


def text_properties(interpreter: str) -> dict[str, bool]:
    """Return the `~matplotlib.text.Text` properties for an interpreter.

    Parameters
    ----------
    interpreter : `str`
        One of ``"latex"`` (render with LaTeX), ``"tex"`` (render with
        matplotlib's mathtext) or ``"none"`` (plain text).

    Returns
    -------
    props : `dict`
        Values for the ``usetex`` and ``parse_math`` text properties.

    Notes
    -----
    If ``"latex"`` is requested but LaTeX is not available on this system
    the mathtext properties are returned instead.
    """
    validate_interpreter(interpreter)
    if interpreter == "latex":
        if has_tex():
            return {"usetex": True, "parse_math": True}
        logger.warning(
            "LaTeX is not available, using mathtext for the "
            "'latex' text interpreter",
        )
    return {"usetex": False, "parse_math": interpreter != "none"}


def style_text(
    text: Text,
    *,
    color: ColorType | None = None,
    fontsize: int | None = None,
    props: dict[str, bool] | None = None,
) -> None:
    """Apply colour, font size and interpreter properties to ``text``.

    Any argument given as `None` leaves that property unchanged.
    """
    if color is not None:
        text.set_color(color)
    if fontsize is not None:
        text.set_fontsize(fontsize)
    if props:
        text.set_usetex(props["usetex"])
        text.set_parse_math(props["parse_math"])
