"""
Abstractions for s-expression lexical tokens.
"""
import enum
from typing import Optional, Union

from sexpkit.language.location import Location
from sexpkit.util.radpytools.dataclasses import immutable_dataclass

TokenValue = Optional[Union[bool, float, str]]


class TokenKind(enum.Enum):
    """
    The lexical classes of s-expression tokens.
    """

    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    COMMENT = "comment"
    LIST_OPEN = "("
    LIST_CLOSE = ")"

    def __str__(self) -> str:  # noqa: D105
        return self.value

    @property
    def is_symbol(self) -> bool:
        """
        Return whether this kind delimits a list.
        """
        return self in (TokenKind.LIST_OPEN, TokenKind.LIST_CLOSE)

    @property
    def is_atom(self) -> bool:
        """
        Return whether this kind stands alone as a node.
        """
        return not self.is_symbol


@immutable_dataclass
class Token:
    """
    A single lexical unit of an s-expression.
    """

    kind: TokenKind
    """
    The lexical class of the token.
    """
    raw: str
    """
    The exact source text of the token.

    Quotes are retained for strings and the leading semicolon is
    retained for comments.
    """
    value: TokenValue
    """
    The interpreted value of the token.

    Booleans and numbers are converted to `bool` and `float`, strings
    and comments are stripped of their delimiters, and list delimiters
    have no value.
    """
    location: Location = Location()
    """
    The location of the first character of the token.
    """

    def __str__(self) -> str:  # noqa: D105
        return self.raw
