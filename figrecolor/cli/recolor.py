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

"""Recolour a figure document, or invert the colours of an image file."""

from __future__ import annotations

import sys
import warnings
from typing import TYPE_CHECKING

from matplotlib import use

from .. import __version__
from ..io.document import (
    document_output_path,
    is_document,
)
from ..io.image import check_format
from ..io.utils import file_path
from ..plot.recolor import recolor
from ..plot.tex import (
    DEFAULT_INTERPRETER,
    INTERPRETERS,
)
from ..plot.utils import RecolorWarning
from . import _utils

if TYPE_CHECKING:
    from argparse import (
        ArgumentParser,
        Namespace,
    )
    from typing import Any

__author__ = "Eric Handy-Cardenas"

logger = _utils.get_logger(__name__)

EPILOG = f"""
Examples:

    $ figrecolor plot.png

    $ figrecolor plot.fig --figure-color k --invert-data-color

    $ figrecolor plot.fig -c c -t 1,1,0.2 --fontsize 20 --text-interpreter tex

Written by {__author__}.
"""


# -- init command line ---------------

def create_parser() -> ArgumentParser:
    """Create the command line argument parser for `figrecolor`."""
    parser = _utils.ArgumentParser(
        description=__doc__,
        epilog=EPILOG,
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=__version__,
        help="show program's version number and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase verbose output",
    )
    parser.add_argument(
        "path",
        help=(
            "figure document (.fig, .pickle, .pkl) to recolour, "
            "or image file to invert"
        ),
    )

    colors = parser.add_argument_group(
        "Colour options",
        "colours are single letters (rgbcmykw) or comma-separated RGB "
        "values in [0, 1]; only used for figure documents",
    )
    colors.add_argument(
        "-c",
        "--figure-color",
        type=_utils.color_type,
        help="background colour of the figure (default: w)",
    )
    colors.add_argument(
        "-t",
        "--text-color",
        type=_utils.color_type,
        help=(
            "colour of text and axes (default: white on a dark figure, "
            "otherwise the inverse of the figure colour)"
        ),
    )
    colors.add_argument(
        "--invert-data-color",
        action="store_true",
        default=False,
        help="invert the colours of plotted data",
    )
    colors.add_argument(
        "--invert-colormap",
        action="store_true",
        default=False,
        help="invert the figure colour map",
    )
    colors.add_argument(
        "--vorticity",
        action="store_true",
        default=False,
        help=(
            "with --invert-colormap, use a red-black-blue colour map "
            "for vorticity contours"
        ),
    )

    text = parser.add_argument_group("Text options")
    text.add_argument(
        "--fontsize",
        type=_utils.positive_int,
        help="font size for all text",
    )
    text.add_argument(
        "--text-interpreter",
        choices=INTERPRETERS,
        default=DEFAULT_INTERPRETER,
        help="text interpreter for all text",
    )
    return parser


def parse_command_line(args: list[str] | None = None) -> Namespace:
    """Parse the command line arguments and return the parsed arguments."""
    parser = create_parser()
    opts = parser.parse_args(args=args)
    if opts.vorticity and not opts.invert_colormap:
        parser.error("--vorticity can only be given with --invert-colormap")
    if not file_path(opts.path).is_file():
        parser.error(f"no such file: '{opts.path}'")
    if not is_document(opts.path):
        try:
            check_format(opts.path)
        except ValueError as exc:
            parser.error(str(exc))
    return opts


def recolor_arguments(opts: Namespace) -> list[Any]:
    """Translate the parsed command line into arguments for `recolor`."""
    args: list[Any] = [opts.path]
    if not is_document(opts.path):
        # images take no options
        return args
    if opts.figure_color is not None or opts.text_color is not None:
        args.append(opts.figure_color)
    if opts.text_color is not None:
        args.append(opts.text_color)
    if opts.invert_data_color:
        args.append("invertDataColor")
    if opts.invert_colormap:
        args.append("invertColormap")
        if opts.vorticity:
            args.append("vorticity")
    if opts.fontsize is not None:
        args.extend(("fontsize", opts.fontsize))
    args.extend(("textInterpreter", opts.text_interpreter))
    return args


# -- run -----------------------------

def main(args: list[str] | None = None) -> int:
    """Run figrecolor.

    Returns the relevant exit code, that can be passed to :func:`sys.exit`.
    """
    opts = parse_command_line(args=args)
    _utils.init_verbose_logging("figrecolor", opts.verbose)
    logger.debug("-- Welcome to figrecolor v%s --", __version__)

    # documents are loaded headless
    use("agg")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", RecolorWarning)
        result = recolor(*recolor_arguments(opts))
    for warning in caught:
        logger.warning(str(warning.message))

    if is_document(opts.path):
        output = document_output_path(opts.path, opts.figure_color or "w")
        from matplotlib import pyplot
        pyplot.close(result)
    else:
        output = result
    print(output)  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
