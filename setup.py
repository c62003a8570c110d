# -*- coding: utf-8 -*-
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

"""Setup the figrecolor package
"""

import re
from pathlib import Path

from setuptools import (
    find_packages,
    setup,
)

HERE = Path(__file__).parent

# read version
VERSION = re.search(
    r'^version = "(.+)"$',
    (HERE / "figrecolor" / "_version.py").read_text(),
    re.MULTILINE,
).group(1)

# read description
longdesc = (HERE / "README.md").read_text().strip()

# -- dependencies -----------

# runtime dependencies
install_requires = [
    'matplotlib >= 3.8.0',
    'numpy >= 1.23.0',
    'Pillow >= 9.1.0',
]

# optional dependencies
extras_require = {
    # coloured log output
    'color': [
        'coloredlogs',
    ],
    # test dependencies
    'test': [
        'pytest >= 7.0.0',
        'pytest-cov >= 2.4.0',
    ],
}

# -- run setup ----------------------------------------------------------------

setup(
    # metadata
    name='figrecolor',
    provides=['figrecolor'],
    version=VERSION,
    description="Recolour matplotlib figures, figure documents and images",
    long_description=longdesc,
    long_description_content_type='text/markdown',
    author='Eric Handy-Cardenas',
    license='GPL-3.0-or-later',

    # package content
    packages=find_packages(include=['figrecolor', 'figrecolor.*']),
    entry_points={
        "console_scripts": [
            "figrecolor=figrecolor.cli.recolor:main",
        ],
    },
    include_package_data=True,

    # dependencies
    python_requires=">=3.11",
    install_requires=install_requires,
    extras_require=extras_require,

    # classifiers
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        ('License :: OSI Approved :: '
         'GNU General Public License v3 or later (GPLv3+)'),
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Topic :: Scientific/Engineering :: Visualization',
    ],
)
