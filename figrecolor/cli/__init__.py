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

"""Command-line interface for figrecolor.

This module powers the ``figrecolor`` executable, which recolours figure
documents and inverts image files on disk.
"""

__author__ = "Eric Handy-Cardenas"
