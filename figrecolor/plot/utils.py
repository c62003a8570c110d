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

"""Helpers shared by the recolouring routines."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.artist import Artist

__author__ = "Eric Handy-Cardenas"


class RecolorWarning(UserWarning):
    """Warning about an argument or object that was skipped."""


def warn(message: str, stacklevel: int = 3) -> None:
    """Emit a `RecolorWarning` with the given message."""
    warnings.warn(message, RecolorWarning, stacklevel=stacklevel)


def kind_name(obj: object) -> str:
    """Return a short, readable name for the type of ``obj``."""
    return type(obj).__name__


def is_colorbar_axes(ax: Artist) -> bool:
    """Return `True` if ``ax`` is the axes of a `~matplotlib.colorbar.Colorbar`."""
    return (
        getattr(ax, "_colorbar", None) is not None
        or ax.get_label() == "<colorbar>"
    )
