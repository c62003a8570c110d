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

"""Logging configuration for figrecolor.

Each module logs to ``logging.getLogger(__name__)``; nothing is printed
unless a handler is attached, either by the application or with
:func:`init_logger` (see also :func:`figrecolor.init_logging`).

The defaults can be configured with these environment variables:

``FIGRECOLOR_LOG_LEVEL``
    Level name or number for new loggers.
``FIGRECOLOR_LOG_FORMAT``
    Message format for new handlers.
``FIGRECOLOR_LOG_DATEFMT``
    Date format for new handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

try:
    from coloredlogs import (
        ColoredFormatter,
        terminal_supports_colors as _terminal_supports_colors,
    )
except ImportError:
    def _terminal_supports_colors(stream: IO) -> bool:   # noqa: ARG001
        """Return `False` to indicate that colours are unsupported."""
        return False

if TYPE_CHECKING:
    from typing import IO

__author__ = "Eric Handy-Cardenas"
__all__ = [
    "DEFAULT_LOG_DATEFMT",
    "DEFAULT_LOG_FORMAT",
    "get_default_level",
    "init_logger",
]

#: The default log message format.
DEFAULT_LOG_FORMAT = os.getenv(
    "FIGRECOLOR_LOG_FORMAT",
    "%(asctime)s:%(name)s:%(levelname)s:%(message)s",
)

#: The default log date format.
DEFAULT_LOG_DATEFMT = os.getenv(
    "FIGRECOLOR_LOG_DATEFMT",
    "%Y-%m-%dT%H:%M:%S%z",
)


def get_default_level() -> int:
    """Return the default log level from ``FIGRECOLOR_LOG_LEVEL``.

    Returns
    -------
    level : `int`
        The level given by name (case-insensitive) or number in the
        environment, or `logging.NOTSET` if the variable is not set.

    Raises
    ------
    KeyError
        If the variable is set to an unknown level name.

    Examples
    --------
    >>> os.environ["FIGRECOLOR_LOG_LEVEL"] = "debug"
    >>> get_default_level()
    10
    """
    try:
        level = os.environ["FIGRECOLOR_LOG_LEVEL"].upper()
    except KeyError:
        return logging.NOTSET
    if level.isdigit():
        return int(level)
    return logging.getLevelNamesMapping()[level]


def init_logger(
    name: str,
    level: int | str | None = None,
    *,
    stream: IO = sys.stderr,
    fmt: str = DEFAULT_LOG_FORMAT,
    datefmt: str | None = DEFAULT_LOG_DATEFMT,
    color: bool = True,
) -> logging.Logger:
    """Return the named logger, with a stream handler attached.

    If the logger (or one of its parents) already has handlers, no new
    handler is added.

    Parameters
    ----------
    name : `str`
        The name of the logger.

    level : `int`, `str`, optional
        The level to set on the logger, defaults to `get_default_level`.

    stream : `io.IOBase`, optional
        The stream to write log messages to.

    fmt : `str`, optional
        The message format to use for a new handler.

    datefmt : `str`, optional
        The date format to use for a new handler.

    color : `bool`, optional
        If `True` (default) use `coloredlogs.ColoredFormatter` when
        `coloredlogs` is installed and ``stream`` supports colours.

    Returns
    -------
    logger : `logging.Logger`
        The configured logger.
    """
    if level is None:
        level = get_default_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(stream)
        if color and _terminal_supports_colors(stream):
            formatter_class = ColoredFormatter
        else:
            formatter_class = logging.Formatter
        handler.setFormatter(formatter_class(fmt=fmt, datefmt=datefmt))
        logger.addHandler(handler)
    return logger
