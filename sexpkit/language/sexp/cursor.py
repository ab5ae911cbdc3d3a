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
Defines a cursor for destructuring the children of an s-expression list.
"""
import copy
from collections import deque
from typing import (
    Callable,
    Deque,
    Iterable,
    NoReturn,
    Optional,
    Tuple,
    TypeVar,
)

from sexpkit.language.location import Location
from sexpkit.language.sexp.exception import CursorError
from sexpkit.language.sexp.node import AstType, SexpNode
from sexpkit.util.logging import get_logger, log_and_raise

_T = TypeVar('_T')


class SexpCursor:
    """
    A mutable view over the children of a list, consumed front to back.

    Each ``pop_*`` method removes the front node if it has the requested
    type and returns its value together with its location.
    A failed pop leaves the cursor untouched.
    The `label` passed to each method describes the expected value in
    the raised error message, e.g., ``"a function name"``.

    Parameters
    ----------
    nodes : Iterable[SexpNode]
        The remaining nodes in order.
    location : Location, optional
        The location of the list itself, reported by errors raised when
        the cursor is empty.
    """

    logger = get_logger(__name__)

    def __init__(
            self,
            nodes: Iterable[SexpNode] = (),
            location: Optional[Location] = None) -> None:
        self._nodes: Deque[SexpNode] = deque(nodes)
        self._location = location if location is not None else Location()

    def __copy__(self) -> 'SexpCursor':  # noqa: D105
        return SexpCursor(self._nodes, self._location)

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, SexpCursor):
            return NotImplemented
        return self._nodes == other._nodes

    def __len__(self) -> int:  # noqa: D105
        return len(self._nodes)

    def __repr__(self) -> str:  # noqa: D105
        return f"SexpCursor({str(self)!r}, {self._location!r})"

    def __str__(self) -> str:  # noqa: D105
        return "(" + " ".join(str(n) for n in self._nodes) + ")"

    @classmethod
    def from_node(cls, node: SexpNode, label: str) -> 'SexpCursor':
        """
        Wrap the children of a list node in a cursor.

        Parameters
        ----------
        node : SexpNode
            A list node.
        label : str
            A description of the expected list.

        Returns
        -------
        SexpCursor
            A cursor over the children anchored at the list's location.

        Raises
        ------
        CursorError
            If `node` is not a list.
        """
        if not node.is_list():
            log_and_raise(
                cls.logger,
                CursorError(f"Expected {label}", node.location))
        return cls(node.get_children(), node.location)

    @property
    def location(self) -> Location:
        """
        Get the location of the list underlying this cursor.
        """
        return self._location

    @property
    def nodes(self) -> Tuple[SexpNode, ...]:
        """
        Get a snapshot of the remaining nodes.
        """
        return tuple(self._nodes)

    def clone(self) -> 'SexpCursor':
        """
        Get an independent copy of this cursor.
        """
        return copy.copy(self)

    def is_empty(self) -> bool:
        """
        Return whether every node has been consumed.
        """
        return not self._nodes

    def peek_front(self) -> Optional[SexpNode]:
        """
        Get the front node without consuming it, if there is one.
        """
        return self._nodes[0] if self._nodes else None

    def front_is_list(self) -> bool:
        """
        Return whether the front node exists and is a list.
        """
        front = self.peek_front()
        return front is not None and front.is_list()

    def _fail(self, message: str, location: Location) -> NoReturn:
        log_and_raise(self.logger, CursorError(message, location))

    def pop_front(self, label: str) -> SexpNode:
        """
        Consume the front node regardless of its type.

        Raises
        ------
        CursorError
            If the cursor is empty.
        """
        if not self._nodes:
            self._fail(f"Expected {label}", self._location)
        return self._nodes.popleft()

    def _pop_typed(self, ast_type: AstType, label: str) -> SexpNode:
        front = self.peek_front()
        if front is None:
            self._fail(f"Expected {label}", self._location)
        elif front.ast_type != ast_type:
            self._fail(f"Expected {label}", front.location)
        return self._nodes.popleft()

    def assert_empty(self, label: str) -> None:
        """
        Verify that every node has been consumed.

        Raises
        ------
        CursorError
            If any nodes remain, located at the next one.
        """
        front = self.peek_front()
        if front is not None:
            self._fail(f"Expected no more values for {label}", front.location)

    def pop_bool(self, label: str) -> Tuple[bool, Location]:  # noqa: D102
        node = self._pop_typed(AstType.BOOL, label)
        return node.as_bool(), node.location

    def pop_comment(self, label: str) -> Tuple[str, Location]:  # noqa: D102
        node = self._pop_typed(AstType.COMMENT, label)
        return node.as_comment(), node.location

    def pop_float(self, label: str) -> Tuple[float, Location]:  # noqa: D102
        node = self._pop_typed(AstType.NUMBER, label)
        return node.as_number(), node.location

    def pop_identifier(self, label: str) -> Tuple[str, Location]:  # noqa: D102
        node = self._pop_typed(AstType.IDENTIFIER, label)
        return node.as_identifier(), node.location

    def pop_integer(self, label: str) -> Tuple[int, Location]:
        """
        Consume a number that has no fractional part.

        Raises
        ------
        CursorError
            If the cursor is empty, the front node is not a number, or
            the number has a fractional part.
        """
        front = self.peek_front()
        if (front is not None and front.is_number()
                and not front.as_number().is_integer()):
            self._fail(f"Expected an int for {label}", front.location)
        node = self._pop_typed(AstType.NUMBER, label)
        return int(node.as_number()), node.location

    def pop_list(self, label: str) -> 'SexpCursor':
        """
        Consume a list and get a cursor over its children.
        """
        node = self._pop_typed(AstType.LIST, label)
        return SexpCursor.from_node(node, label)

    def pop_string(self, label: str) -> Tuple[str, Location]:  # noqa: D102
        node = self._pop_typed(AstType.STRING, label)
        return node.as_string(), node.location

    def _maybe_pop(
            self,
            matches: Callable[[SexpNode],
                              bool],
            pop: Callable[[str],
                          _T],
            label: str) -> Optional[_T]:
        front = self.peek_front()
        if front is not None and matches(front):
            return pop(label)
        return None

    def maybe_pop_bool(self, label: str) -> Optional[Tuple[bool, Location]]:
        """
        Consume the front node only if it is a boolean.
        """
        return self._maybe_pop(SexpNode.is_bool, self.pop_bool, label)

    def maybe_pop_comment(  # noqa: D102
            self,
            label: str) -> Optional[Tuple[str,
                                          Location]]:
        return self._maybe_pop(SexpNode.is_comment, self.pop_comment, label)

    def maybe_pop_float(  # noqa: D102
            self,
            label: str) -> Optional[Tuple[float,
                                          Location]]:
        return self._maybe_pop(SexpNode.is_number, self.pop_float, label)

    def maybe_pop_identifier(  # noqa: D102
            self,
            label: str) -> Optional[Tuple[str,
                                          Location]]:
        return self._maybe_pop(
            SexpNode.is_identifier,
            self.pop_identifier,
            label)

    def maybe_pop_integer(self,
                          label: str) -> Optional[Tuple[int,
                                                        Location]]:
        """
        Consume the front node only if it is a number without a fraction.
        """
        return self._maybe_pop(
            lambda n: n.is_number() and n.as_number().is_integer(),
            self.pop_integer,
            label)

    def maybe_pop_list(self, label: str) -> Optional['SexpCursor']:
        """
        Consume the front node only if it is a list.
        """
        return self._maybe_pop(SexpNode.is_list, self.pop_list, label)

    def maybe_pop_string(  # noqa: D102
            self,
            label: str) -> Optional[Tuple[str,
                                          Location]]:
        return self._maybe_pop(SexpNode.is_string, self.pop_string, label)
