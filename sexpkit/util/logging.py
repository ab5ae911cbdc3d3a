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
Utilities for logging.
"""
import logging
from typing import NoReturn

from sexpkit.util.debug import Debug


def default_log_level() -> int:
    """
    Get the default log level based on debugging status.
    """
    return logging.DEBUG if Debug.is_debug else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger whose level follows the debugging status.

    Parameters
    ----------
    name : str
        The name of the logger, typically ``__name__``.

    Returns
    -------
    logging.Logger
        The named logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(default_log_level())
    return logger


def log_and_raise(
        logger: logging.Logger,
        error: Exception,
        level: int = logging.DEBUG) -> NoReturn:
    """
    Log an error message and then raise the error.

    Parameters
    ----------
    logger : logging.Logger
        The logger.
    error : Exception
        The error to report and raise.
    level : int, optional
        The level at which the error is logged, by default
        ``logging.DEBUG``.

    Raises
    ------
    Exception
        The given exception.
    """
    logger.log(level, str(error))
    raise error
