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
Defines exceptions related to s-expressions and their parsing.

Every error raised while reading s-expressions derives from `SexpError`
and carries the `Location` at which it occurred.
"""

import enum
from typing import Any, Dict, Optional, Tuple, Union

from sexpkit.language.location import Location


class SexpError(Exception):
    """
    An error located within some s-expression source text.

    Two errors compare equal if their messages are equal; the location
    is diagnostic only.
    """

    def __init__(self, message: str, location: Optional[Location] = None):
        super().__init__(message)
        self.message = message
        self.location = location if location is not None else Location()

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, SexpError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:  # noqa: D105
        return hash(self.message)

    def __reduce__(self) -> Union[str, Tuple[Any, ...]]:  # noqa: D105
        return SexpError, (self.message, self.location)

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}({self.message!r}, {self.location!r})"

    def __str__(self) -> str:  # noqa: D105
        return f"{self.location}: {self.message}"


class TokenizerErrorKind(enum.Enum):
    """
    Enumerates the ways in which tokenization can fail.
    """

    COMMENT_NOT_STARTED = enum.auto()
    STRING_NOT_STARTED = enum.auto()
    STRING_UNCLOSED = enum.auto()
    IDENTIFIER_NOT_STARTED = enum.auto()
    IDENTIFIER_BEGINS_WITH_NUMBER = enum.auto()
    WRONG_TYPE = enum.auto()
    NUMBER_OUT_OF_RANGE = enum.auto()
    STACK_UNDERFLOW = enum.auto()


class TokenizerError(SexpError):
    """
    For representing malformed tokens.

    Parameters
    ----------
    kind : TokenizerErrorKind
        The reason tokenization failed.
    location : Location
        The point of failure.
    details
        Kind-specific context: ``partial_contents`` for an unclosed
        string, ``got`` for an identifier that begins with a number or a
        number that is out of range,
        and ``expected`` and ``got`` for a wrong token type.
    """

    def __init__(
            self,
            kind: TokenizerErrorKind,
            location: Optional[Location] = None,
            **details: Any):
        self.kind = kind
        self.details: Dict[str, Any] = details
        super().__init__(self._format_message(kind, details), location)

    def __reduce__(self) -> Union[str, Tuple[Any, ...]]:  # noqa: D105
        return _rebuild_tokenizer_error, (self.kind, self.location, self.details)

    @staticmethod
    def _format_message(
            kind: TokenizerErrorKind,
            details: Dict[str, Any]) -> str:
        if kind == TokenizerErrorKind.COMMENT_NOT_STARTED:
            return "Comment not started"
        elif kind == TokenizerErrorKind.STRING_NOT_STARTED:
            return "String not started"
        elif kind == TokenizerErrorKind.STRING_UNCLOSED:
            return f'Unclosed string "{details.get("partial_contents", "")}'
        elif kind == TokenizerErrorKind.IDENTIFIER_NOT_STARTED:
            return "Identifier not started"
        elif kind == TokenizerErrorKind.IDENTIFIER_BEGINS_WITH_NUMBER:
            return f"Identifier begins with a number: {details.get('got')}"
        elif kind == TokenizerErrorKind.WRONG_TYPE:
            return (
                f"Expected {details.get('expected')} token, "
                f"got {details.get('got')}")
        elif kind == TokenizerErrorKind.NUMBER_OUT_OF_RANGE:
            return f"Number out of range: {details.get('got')}"
        else:
            return "Tokenizer stack underflow"

    @property
    def partial_contents(self) -> Optional[str]:
        """
        Get the contents read before an unclosed string ended.
        """
        return self.details.get("partial_contents")

    @property
    def got(self) -> Any:
        """
        Get what was actually found, if recorded.
        """
        return self.details.get("got")

    @property
    def expected(self) -> Any:
        """
        Get what was expected, if recorded.
        """
        return self.details.get("expected")


def _rebuild_tokenizer_error(
        kind: TokenizerErrorKind,
        location: Location,
        details: Dict[str, Any]) -> TokenizerError:
    return TokenizerError(kind, location, **details)


class ParserErrorKind(enum.Enum):
    """
    Enumerates the ways in which parsing can fail.
    """

    UNCLOSED_LIST = enum.auto()
    UNSTARTED_LIST = enum.auto()
    INVALID = enum.auto()
    STACK_UNDERFLOW = enum.auto()


class ParserError(SexpError):
    """
    For representing structurally malformed token sequences.

    The `ParserErrorKind.INVALID` kind is reserved for checks layered on
    top of the structural parser and takes an explicit message.
    """

    _messages = {
        ParserErrorKind.UNCLOSED_LIST: "Unclosed list",
        ParserErrorKind.UNSTARTED_LIST: "Unstarted list",
        ParserErrorKind.INVALID: "Invalid s-expression",
        ParserErrorKind.STACK_UNDERFLOW: "Parser stack underflow",
    }

    def __init__(
            self,
            kind: ParserErrorKind,
            location: Optional[Location] = None,
            message: Optional[str] = None):
        self.kind = kind
        if message is None:
            message = self._messages[kind]
        super().__init__(message, location)

    def __reduce__(self) -> Union[str, Tuple[Any, ...]]:  # noqa: D105
        return ParserError, (self.kind, self.location, self.message)


class NodeErrorKind(enum.Enum):
    """
    Enumerates the ways in which node introspection can fail.
    """

    INVALID_TYPE = enum.auto()
    LENGTH_MISMATCH = enum.auto()


class NodeError(SexpError):
    """
    For representing illegal operations on a node.

    Parameters
    ----------
    kind : NodeErrorKind
        The reason the operation failed.
    location : Location
        The location of the node.
    expected : Any
        The expected node type or length.
    got : Any
        The actual node type or length.
    """

    def __init__(
            self,
            kind: NodeErrorKind,
            location: Optional[Location] = None,
            expected: Any = None,
            got: Any = None,
            message: Optional[str] = None):
        self.kind = kind
        self.expected = expected
        self.got = got
        if message is None:
            if kind == NodeErrorKind.INVALID_TYPE:
                message = f"Expected {expected}, got {got}"
            else:
                message = f"Expected {expected} values, got {got}"
        super().__init__(message, location)

    def __reduce__(self) -> Union[str, Tuple[Any, ...]]:  # noqa: D105
        return NodeError, (
            self.kind,
            self.location,
            self.expected,
            self.got,
            self.message)


class CursorError(SexpError):
    """
    For representing failures to destructure a list with a cursor.
    """

    def __reduce__(self) -> Union[str, Tuple[Any, ...]]:  # noqa: D105
        return CursorError, (self.message, self.location)
