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
Defines a tokenizer of s-expressions.
"""
import math
import string
from typing import Any, List, NoReturn, Optional

from sexpkit.language.location import Location, LocationCursor
from sexpkit.language.sexp.exception import TokenizerError, TokenizerErrorKind
from sexpkit.language.token import Token, TokenKind
from sexpkit.util.logging import get_logger, log_and_raise
from sexpkit.util.radpytools import PathLike


class SexpTokenizer:
    """
    Scans s-expression source text into a sequence of tokens.

    A tokenizer instance holds the mutable state of a single scan.
    Use `SexpTokenizer.tokenize` rather than constructing one directly.
    """

    logger = get_logger(__name__)

    c_lpar = '('
    c_rpar = ')'
    c_quote = '"'
    c_escape = '\\'
    c_comment = ';'
    c_point = '.'
    c_signs = "+-"
    c_digits = string.digits
    c_whitespace = " \t\r\n"

    true_literal = "true"
    false_literal = "false"

    def __init__(self, text: str, path: Optional[PathLike] = None) -> None:
        self.text = text
        self.index = 0
        self.cursor = LocationCursor(path)
        self.tokens: List[Token] = []

    @classmethod
    def tokenize(cls, text: str, path: Optional[PathLike] = None) -> List[Token]:
        """
        Split the given text into tokens.

        Parameters
        ----------
        text : str
            Source text containing zero or more s-expressions.
        path : Optional[PathLike], optional
            The file from which `text` was read, if any.
            It is attached to the location of every token.

        Returns
        -------
        List[Token]
            The tokens in source order.

        Raises
        ------
        TokenizerError
            If the text contains a malformed token.
        """
        tokens = cls(text, path).run()
        cls.logger.debug(
            "Read %d tokens from %s",
            len(tokens),
            path if path is not None else "<string>")
        return tokens

    def run(self) -> List[Token]:
        """
        Scan the entire text.
        """
        while not self._at_end():
            char = self._peek()
            if char in self.c_whitespace:
                self._advance()
            elif char == self.c_lpar or char == self.c_rpar:
                location = self.cursor.location
                self._advance()
                kind = (
                    TokenKind.LIST_OPEN
                    if char == self.c_lpar else TokenKind.LIST_CLOSE)
                self.tokens.append(Token(kind, char, None, location))
            elif char == self.c_comment:
                self._read_comment()
            elif char == self.c_quote:
                self._read_string()
            elif self._starts_number():
                self._read_number()
            else:
                self._read_identifier()
        return self.tokens

    def _at_end(self) -> bool:
        return self.index >= len(self.text)

    def _peek(self, offset: int = 0) -> Optional[str]:
        index = self.index + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def _advance(self) -> str:
        if self._at_end():
            self._fail(TokenizerErrorKind.STACK_UNDERFLOW)
        char = self.text[self.index]
        self.index += 1
        self.cursor.advance(char)
        return char

    def _fail(
            self,
            kind: TokenizerErrorKind,
            location: Optional[Location] = None,
            **details: Any) -> NoReturn:
        if location is None:
            location = self.cursor.location
        log_and_raise(self.logger, TokenizerError(kind, location, **details))

    def _is_delimiter(self, char: Optional[str]) -> bool:
        return (
            char is None or char in self.c_whitespace or char
            in (self.c_lpar,
                self.c_rpar,
                self.c_comment,
                self.c_quote))

    def _starts_number(self) -> bool:
        char = self._peek()
        if char is None:
            return False
        elif char in self.c_digits:
            return True
        elif char in self.c_signs:
            following = self._peek(1)
            return following is not None and following in self.c_digits
        return False

    def _classify(self) -> TokenKind:
        """
        Guess the kind of token beginning at the current position.
        """
        char = self._peek()
        if char == self.c_lpar:
            return TokenKind.LIST_OPEN
        elif char == self.c_rpar:
            return TokenKind.LIST_CLOSE
        elif char == self.c_comment:
            return TokenKind.COMMENT
        elif char == self.c_quote:
            return TokenKind.STRING
        elif self._starts_number():
            return TokenKind.NUMBER
        return TokenKind.IDENTIFIER

    def _consume_atom(self) -> None:
        while not self._is_delimiter(self._peek()):
            self._advance()

    def _read_comment(self) -> None:
        location = self.cursor.location
        if self._peek() != self.c_comment:
            self._fail(TokenizerErrorKind.COMMENT_NOT_STARTED)
        start = self.index
        self._advance()
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        raw = self.text[start : self.index]
        value = raw[1 :]
        if value.endswith("\r"):
            value = value[:-1]
        self.tokens.append(Token(TokenKind.COMMENT, raw, value, location))

    def _read_string(self) -> None:
        location = self.cursor.location
        if self._peek() != self.c_quote:
            self._fail(TokenizerErrorKind.STRING_NOT_STARTED)
        start = self.index
        self._advance()
        escaped = False
        while True:
            if self._at_end():
                self._fail(
                    TokenizerErrorKind.STRING_UNCLOSED,
                    partial_contents=self.text[start + 1 : self.index])
            char = self._advance()
            if escaped:
                escaped = False
            elif char == self.c_escape:
                escaped = True
            elif char == self.c_quote:
                break
        raw = self.text[start : self.index]
        self.tokens.append(Token(TokenKind.STRING, raw, raw[1 :-1], location))

    def _read_number(self) -> None:
        location = self.cursor.location
        if not self._starts_number():
            self._fail(
                TokenizerErrorKind.WRONG_TYPE,
                expected=TokenKind.NUMBER,
                got=self._classify())
        start = self.index
        if self._peek() in self.c_signs:
            self._advance()
        seen_point = False
        while not self._at_end():
            char = self._peek()
            if char in self.c_digits:
                self._advance()
            elif char == self.c_point and not seen_point:
                seen_point = True
                self._advance()
            else:
                break
        if not self._is_delimiter(self._peek()):
            self._consume_atom()
            self._fail(
                TokenizerErrorKind.IDENTIFIER_BEGINS_WITH_NUMBER,
                location,
                got=self.text[start : self.index])
        raw = self.text[start : self.index]
        value = float(raw)
        if math.isinf(value):
            self._fail(TokenizerErrorKind.NUMBER_OUT_OF_RANGE, location, got=raw)
        self.tokens.append(Token(TokenKind.NUMBER, raw, value, location))

    def _read_identifier(self) -> None:
        location = self.cursor.location
        if self._is_delimiter(self._peek()):
            self._fail(TokenizerErrorKind.IDENTIFIER_NOT_STARTED)
        start = self.index
        begins_with_number = self._starts_number()
        self._consume_atom()
        raw = self.text[start : self.index]
        if begins_with_number:
            self._fail(
                TokenizerErrorKind.IDENTIFIER_BEGINS_WITH_NUMBER,
                location,
                got=raw)
        if raw == self.true_literal or raw == self.false_literal:
            self.tokens.append(
                Token(TokenKind.BOOL,
                      raw,
                      raw == self.true_literal,
                      location))
        else:
            self.tokens.append(Token(TokenKind.IDENTIFIER, raw, raw, location))
