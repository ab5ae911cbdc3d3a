"""
Utilities for working with dataclasses.
"""
from dataclasses import dataclass
from typing import Callable, Type, TypeVar

_T = TypeVar('_T')


def immutable_dataclass(*args, **kwargs) -> Callable[[Type[_T]], Type[_T]]:
    """
    Make an immutable, hashable dataclass.

    A wrapper around the dataclass decorator to be used in its place.

    Examples
    --------
    >>> @immutable_dataclass
    ... class Point:
    ...     line: int
    ...
    >>> p = Point(0)
    >>> p.line = 5
    Traceback (most recent call last):
      ...
    dataclasses.FrozenInstanceError: cannot assign to field 'line'
    """
    kwargs.update({
        'frozen': True,
        'eq': True
    })
    return dataclass(*args, **kwargs)
