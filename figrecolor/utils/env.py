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

"""Environment variable parsing."""

from __future__ import annotations

import os

__author__ = "Eric Handy-Cardenas"

TRUE = (
    "1",
    "y",
    "yes",
    "true",
)


def bool_env(key: str, default: bool = False) -> bool:
    """Parse an environment variable as a boolean switch.

    The value matches as `True` if it is one of ``1``, ``y``, ``yes`` or
    ``true`` (case-insensitive), anything else is `False`.

    Parameters
    ----------
    key : `str`
        The name of the environment variable.

    default : `bool`
        The value to return if the variable is not set.

    Examples
    --------
    >>> os.environ["FIGRECOLOR_INIT_LOGGING"] = "Yes"
    >>> bool_env("FIGRECOLOR_INIT_LOGGING")
    True
    """
    try:
        return os.environ[key].lower() in TRUE
    except KeyError:
        return default
