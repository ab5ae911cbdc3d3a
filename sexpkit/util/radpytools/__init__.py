"""
Subpackage containing functionality extracted from `radpytools`.
"""

import os
import pathlib
import typing

PathLike = typing.Union[str, os.PathLike, pathlib.Path]
