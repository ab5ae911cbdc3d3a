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
Utilities for reading s-expressions from files and directories.
"""
import os
from pathlib import Path
from typing import Iterator, List

import tqdm

from sexpkit.language.sexp.cursor import SexpCursor
from sexpkit.language.sexp.exception import SexpError
from sexpkit.language.sexp.parser import SexpParser
from sexpkit.util.logging import get_logger
from sexpkit.util.radpytools import PathLike

logger = get_logger(__name__)


def read_source(file_path: PathLike) -> str:
    """
    Read the raw source text of the indicated file.

    Newlines are not translated so that locations match the file.
    """
    with open(file_path, "r", newline="") as f:
        source_code = f.read()
    return source_code


def parse_file(file_path: PathLike) -> List[SexpCursor]:
    """
    Parse the lists contained in a file, ignoring comments.

    Parameters
    ----------
    file_path : PathLike
        The path of a file containing s-expressions.

    Returns
    -------
    List[SexpCursor]
        A cursor over each top-level list.
        Every location refers to `file_path`.

    Raises
    ------
    SexpError
        If the file contents are malformed.
    """
    return SexpParser.parse_lists(read_source(file_path), Path(file_path))


def iter_source_files(root: PathLike, extension: str) -> Iterator[Path]:
    """
    Recursively find files with the given extension.

    Parameters
    ----------
    root : PathLike
        The directory to search.
    extension : str
        The file extension to match, with or without a leading dot.

    Yields
    ------
    Path
        Each matching file, in sorted order within each directory and
        before the contents of subdirectories.
    """
    suffix = extension if extension.startswith(".") else f".{extension}"
    for dirname, subdirs, filenames in os.walk(root):
        # walk subdirectories in a deterministic order
        subdirs.sort()
        for filename in sorted(filenames):
            filepath = Path(dirname) / filename
            if filepath.suffix == suffix:
                yield filepath


def parse_directory(
        root: PathLike,
        extension: str,
        show_progress: bool = False) -> List[SexpCursor]:
    """
    Parse every matching file beneath a directory.

    Parameters
    ----------
    root : PathLike
        The directory to search.
    extension : str
        The extension of files to parse, e.g., ``"sexp"``.
    show_progress : bool, optional
        Whether to display a progress bar, by default False.

    Returns
    -------
    List[SexpCursor]
        The top-level lists of each file concatenated in file order.

    Raises
    ------
    NotADirectoryError
        If `root` is not a directory.
    SexpError
        The first error encountered in any file.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")
    files = list(iter_source_files(root, extension))
    logger.debug("Found %d files with extension %s in %s", len(files), extension, root)
    lists: List[SexpCursor] = []
    for filepath in tqdm.tqdm(files,
                              desc="Parsing",
                              unit="file",
                              disable=not show_progress):
        try:
            lists.extend(parse_file(filepath))
        except SexpError as e:
            logger.debug("Failed to parse %s: %s", filepath, e)
            raise
    return lists
