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
Check that files contain well-formed s-expressions.

Usage: ``python -m sexpkit PATH [PATH ...] [--ext EXT] [--print]``
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from sexpkit.language.sexp.exception import SexpError
from sexpkit.language.sexp.loader import iter_source_files, read_source
from sexpkit.language.sexp.node import SexpNode
from sexpkit.language.sexp.parser import SexpParser
from sexpkit.util.debug import Debug
from sexpkit.util.logging import default_log_level

parser = argparse.ArgumentParser(
    "sexpkit",
    description="Check files for well-formed s-expressions.")
parser.add_argument(
    "paths",
    nargs="+",
    type=Path,
    help="Files to check or directories to search")
parser.add_argument(
    "--ext",
    type=str,
    default="sexp",
    help="Extension of files to check within directories")
parser.add_argument(
    "--keep-comments",
    action="store_true",
    help="Retain comments when printing")
parser.add_argument(
    "--print",
    dest="print_nodes",
    action="store_true",
    help="Print the parsed top-level forms")
parser.add_argument(
    "--debug",
    action="store_true",
    help="Enable debug logging")


def collect_files(paths: Sequence[Path], extension: str) -> List[Path]:
    """
    Expand directories into the matching files beneath them.
    """
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(iter_source_files(path, extension))
        else:
            files.append(path)
    return files


def check_file(path: Path, keep_comments: bool) -> List[SexpNode]:
    """
    Parse a single file.

    Raises
    ------
    SexpError
        If the file is malformed.
    """
    return SexpParser.parse_text(
        read_source(path),
        path,
        ignore_comments=not keep_comments)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Check each requested file and report the first error in each.

    Returns
    -------
    int
        0 if every file is well-formed, 1 otherwise.
    """
    args = parser.parse_args(argv)
    if args.debug:
        Debug.is_debug = True
        # loggers created at import time keep their original level
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("sexpkit"):
                logging.getLogger(name).setLevel(logging.DEBUG)
    logging.basicConfig(level=default_log_level())
    failed = False
    for path in collect_files(args.paths, args.ext):
        try:
            nodes = check_file(path, args.keep_comments)
        except SexpError as e:
            print(e, file=sys.stderr)
            failed = True
        except OSError as e:
            print(f"{path}: {e.strerror}", file=sys.stderr)
            failed = True
        else:
            if args.print_nodes:
                for node in nodes:
                    print(str(node).rstrip("\n"))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
