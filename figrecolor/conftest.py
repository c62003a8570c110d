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

"""Test setup for figrecolor."""

from __future__ import annotations

import warnings

from matplotlib import (
    rcParams,
    use,
)

# force Agg for all tests
use("agg", force=True)

# register custom fixtures for all test modules
from .testing.fixtures import *  # noqa: E402,F403

# ignore errors due from pyplot.show() using Agg
warnings.filterwarnings("ignore", message=".*non-GUI backend.*")

# TeX is slow, fixtures or tests may enable it individually
rcParams.update({
    "text.usetex": False,
})
