#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of PRISM
# (see https://github.com/orgs/Radiance-Technologies/prism).
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
sexpkit: A reader for location-tagged s-expressions.
"""

from pathlib import Path

from setuptools import find_packages, setup

_README = Path(__file__).parent / "README.md"

setup(
    name="sexpkit",
    version="0.1.0",
    description="A reader for location-tagged s-expressions.",
    long_description=_README.read_text() if _README.exists() else "",
    long_description_content_type="text/markdown",
    license="LGPL-3.0-or-later",
    packages=find_packages(include=["sexpkit",
                                    "sexpkit.*"]),
    package_data={"sexpkit.tests": ["examples/*",
                                    "examples/*/*"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["sexpkit=sexpkit.__main__:main"]},
)
