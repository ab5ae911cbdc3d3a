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
Positions of tokens within their source text.
"""
from pathlib import Path
from typing import Optional

from sexpkit.util.radpytools import PathLike
from sexpkit.util.radpytools.dataclasses import immutable_dataclass


@immutable_dataclass
class Location:
    """
    A position within a source text.

    Lines and columns are both counted from zero.
    """

    line: int = 0
    """
    The zero-based line number.
    """
    column: int = 0
    """
    The zero-based column number within `line`.
    """
    path: Optional[Path] = None
    """
    The file containing the source text, if it came from a file.
    """

    def __str__(self) -> str:
        """
        Render the location as ``<path>:<line>:<column>``.

        The path is omitted if absent.
        """
        if self.path is None:
            return f"{self.line}:{self.column}"
        return f"{self.path}:{self.line}:{self.column}"


class LocationCursor:
    """
    A mutable position that tracks a scan through some source text.

    Each call to `advance` moves the cursor over one character.
    Successive locations never decrease.
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path = Path(path) if path is not None else None
        self.line = 0
        self.column = 0

    def __repr__(self) -> str:  # noqa: D105
        return f"LocationCursor({self.location})"

    @property
    def location(self) -> Location:
        """
        Get an immutable snapshot of the current position.
        """
        return Location(self.line, self.column, self.path)

    def advance(self, char: str) -> None:
        """
        Move the cursor past the given character.

        Parameters
        ----------
        char : str
            The character being consumed.
            A newline moves the cursor to the start of the next line.
        """
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
