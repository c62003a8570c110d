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

"""Utilities for the figrecolor command-line tool."""

from __future__ import annotations

import argparse
import inspect
import logging
from argparse import (
    ArgumentDefaultsHelpFormatter,
    RawDescriptionHelpFormatter,
)
from typing import TYPE_CHECKING

from ..log import init_logger
from ..plot.colors import to_rgb

if TYPE_CHECKING:
    from argparse import (
        Action,
        _MutuallyExclusiveGroup,
    )
    from collections.abc import Iterable
    from logging import Logger

    from matplotlib.typing import RGBColorType

__author__ = "Eric Handy-Cardenas"


def get_logger(name: str, fallback: str = "__main__") -> logging.Logger:
    """Get a logger for the given name.

    When run as ``__main__`` the name of the calling module is used, if
    it can be found.
    """
    if name == "__main__":
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        spec = getattr(mod, "__spec__", None)
        name = spec.name if spec is not None else fallback
    return logging.getLogger(name)


def init_verbose_logging(
    name: str = "figrecolor",
    verbosity: int = 0,
) -> Logger:
    """Configure logging based on a verbosity count.

    With no verbosity the level is left to ``FIGRECOLOR_LOG_LEVEL``,
    otherwise ``-v`` gives ``INFO`` and ``-vv`` gives ``DEBUG``.
    """
    if not verbosity:
        return init_logger(name)
    level = max(3 - verbosity, 0) * 10
    return init_logger(name, level=level)


def color_type(value: str) -> str | RGBColorType:
    """Parse a colour from the command line.

    Accepts a single-letter colour name, or three comma-separated channel
    values, e.g. ``0,0,0.1``.
    """
    try:
        if "," in value:
            return to_rgb([float(x) for x in value.split(",")])
        return to_rgb(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def positive_int(value: str) -> int:
    """Parse a positive integer from the command line."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if number <= 0:
        msg = f"must be a positive integer, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


class HelpFormatter(
    ArgumentDefaultsHelpFormatter,
    RawDescriptionHelpFormatter,
):
    """Custom help formatter for figrecolor."""

    def _format_usage(
        self,
        usage: str | None,
        actions: Iterable[Action],
        groups: Iterable[_MutuallyExclusiveGroup],
        prefix: str | None,
    ) -> str:
        if prefix is None:
            prefix = "Usage: "
        return super()._format_usage(
            usage,
            actions,
            groups,
            prefix,
        )


class ArgumentParser(argparse.ArgumentParser):
    """Custom argument parser for figrecolor."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("formatter_class", HelpFormatter)
        super().__init__(**kwargs)
        self._positionals.title = "Positional arguments"
        self._optionals.title = "Options"
