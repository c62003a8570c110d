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

"""Recolour matplotlib figures for presentation.

figrecolor sets the background, text, axis, legend, colorbar and data
colours of a `matplotlib` figure in a single call, for example to switch
a figure between a light and a dark theme. It can also recolour a saved
figure document, or invert the colours of an image file.

>>> from figrecolor import recolor
>>> recolor("k", "invertDataColor")
"""

__author__ = "Eric Handy-Cardenas"

import logging

from . import log
from .plot import (
    RecolorWarning,
    recolor,
)
from .utils.env import bool_env

from ._version import version as __version__

__all__ = [
    "RecolorWarning",
    "init_logging",
    "recolor",
]


def init_logging(level: str | int | None = None) -> None:
    """Quickly initialise logging for figrecolor.

    Parameters
    ----------
    level : `int`, `str`, optional
        The logging level to use, defaults to the ``FIGRECOLOR_LOG_LEVEL``
        environment variable, or ``INFO`` if that is not set.

    Examples
    --------
    >>> import figrecolor
    >>> figrecolor.init_logging("DEBUG")
    """
    logger = log.init_logger(
        __name__,
        level=level or log.get_default_level() or logging.INFO,
    )
    logger.debug(
        "Initialised %s logging for %s",
        logging.getLevelName(logger.getEffectiveLevel()),
        logger.name,
    )


if bool_env("FIGRECOLOR_INIT_LOGGING", default=False):
    init_logging()
del bool_env
