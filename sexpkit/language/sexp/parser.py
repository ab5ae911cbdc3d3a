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
Defines a parser of s-expressions.
"""
import collections.abc
import math
from numbers import Real
from typing import Iterable, List, Optional, Sequence, Union

from sexpkit.language.sexp.atom import (
    SexpAtom,
    SexpBool,
    SexpComment,
    SexpIdentifier,
    SexpNumber,
    SexpString,
)
from sexpkit.language.sexp.cursor import SexpCursor
from sexpkit.language.sexp.exception import (
    ParserError,
    ParserErrorKind,
    TokenizerError,
    TokenizerErrorKind,
)
from sexpkit.language.sexp.list import SexpList
from sexpkit.language.sexp.node import SexpNode
from sexpkit.language.sexp.tokenizer import SexpTokenizer
from sexpkit.language.token import Token, TokenKind
from sexpkit.util.logging import get_logger, log_and_raise
from sexpkit.util.radpytools import PathLike


class SexpParser:
    """
    Namespace for methods that parse s-expressions.
    """

    logger = get_logger(__name__)

    _atom_classes = {
        TokenKind.BOOL: SexpBool,
        TokenKind.NUMBER: SexpNumber,
        TokenKind.STRING: SexpString,
        TokenKind.IDENTIFIER: SexpIdentifier,
        TokenKind.COMMENT: SexpComment,
    }

    @classmethod
    def from_python_ds(
            cls,
            python_ds: Union[bool,
                             Real,
                             str,
                             Iterable]) -> SexpNode:
        """
        Convert a Python bool/number/str/list s-expression to a node.

        Parameters
        ----------
        python_ds : Union[bool, Real, str, Iterable]
            A standalone term in an s-expression represented by Python
            lists and primitive values.
            Strings become identifiers.

        Returns
        -------
        SexpNode
            An abstract, tree-structured representation of the given
            s-expression term.

        Raises
        ------
        ValueError
            If `python_ds` contains a value with no s-expression
            counterpart, such as a non-finite number.

        See Also
        --------
        SexpNode.to_python_ds : For the inverse operation.
        """
        if isinstance(python_ds, bool):
            return SexpBool(python_ds)
        elif isinstance(python_ds, Real):
            if not math.isfinite(python_ds):
                raise ValueError(f"Cannot convert non-finite number {python_ds}")
            return SexpNumber(float(python_ds))
        elif isinstance(python_ds, str):
            return SexpIdentifier(python_ds)
        elif isinstance(python_ds, collections.abc.Iterable):
            return SexpList([cls.from_python_ds(child) for child in python_ds])
        else:
            raise ValueError(
                f"Cannot convert {type(python_ds).__name__} to an s-expression")
        # end if

    @classmethod
    def _atom(cls, token: Token) -> SexpAtom:
        """
        Wrap an atomic token as a node.
        """
        if not token.kind.is_atom:
            log_and_raise(
                cls.logger,
                TokenizerError(
                    TokenizerErrorKind.WRONG_TYPE,
                    token.location,
                    expected="atom",
                    got=token.kind))
        return cls._atom_classes[token.kind](token.value, (token,))

    @classmethod
    def parse(cls, tokens: Sequence[Token]) -> List[SexpNode]:
        """
        Build trees of nodes from a sequence of tokens.

        Lists are matched with an explicit stack rather than recursion,
        so nesting depth is limited only by memory.

        Parameters
        ----------
        tokens : Sequence[Token]
            Tokens in source order, as produced by
            `SexpTokenizer.tokenize`.

        Returns
        -------
        List[SexpNode]
            The top-level nodes in source order.

        Raises
        ------
        ParserError
            If a list is closed without being opened, located at the
            closing delimiter, or if a list is never closed, located at
            the innermost unclosed opening delimiter.
        """
        # The bottom frame collects the top-level nodes.
        return_stack: List[List[SexpNode]] = [[]]
        open_tokens: List[Token] = []
        for token in tokens:
            if token.kind == TokenKind.LIST_OPEN:
                return_stack.append([])
                open_tokens.append(token)
            elif token.kind == TokenKind.LIST_CLOSE:
                if len(return_stack) == 1:
                    log_and_raise(
                        cls.logger,
                        ParserError(
                            ParserErrorKind.UNSTARTED_LIST,
                            token.location))
                children = return_stack.pop()
                open_token = open_tokens.pop()
                if not return_stack:
                    log_and_raise(
                        cls.logger,
                        ParserError(
                            ParserErrorKind.STACK_UNDERFLOW,
                            token.location))
                return_stack[-1].append(
                    SexpList(children,
                             (open_token,
                              token)))
            else:
                return_stack[-1].append(cls._atom(token))
        if len(return_stack) != 1:
            log_and_raise(
                cls.logger,
                ParserError(
                    ParserErrorKind.UNCLOSED_LIST,
                    open_tokens[-1].location))
        cls.logger.debug("Parsed %d top-level nodes", len(return_stack[0]))
        return return_stack[0]

    @classmethod
    def parse_text(
            cls,
            text: str,
            path: Optional[PathLike] = None,
            ignore_comments: bool = True) -> List[SexpNode]:
        """
        Tokenize and parse the given text.

        Parameters
        ----------
        text : str
            Source text containing zero or more s-expressions.
        path : Optional[PathLike], optional
            The file from which `text` was read, if any.
        ignore_comments : bool, optional
            Whether to remove comments from the result, by default True.

        Returns
        -------
        List[SexpNode]
            The top-level nodes in source order.

        Raises
        ------
        TokenizerError
            If the text contains a malformed token.
        ParserError
            If the text contains an unbalanced list.
        """
        nodes = cls.parse(SexpTokenizer.tokenize(text, path))
        if ignore_comments:
            nodes = cls.strip_comments(nodes)
        return nodes

    @classmethod
    def parse_lists(
            cls,
            text: str,
            path: Optional[PathLike] = None) -> List[SexpCursor]:
        """
        Parse the given text as a sequence of lists, ignoring comments.

        Returns
        -------
        List[SexpCursor]
            A cursor over the children of each top-level list.

        Raises
        ------
        ParserError
            If the text is malformed or contains a top-level atom.
        """
        lists = []
        for node in cls.parse_text(text, path, ignore_comments=True):
            if not node.is_list():
                log_and_raise(
                    cls.logger,
                    ParserError(
                        ParserErrorKind.INVALID,
                        node.location,
                        "Expected list"))
            lists.append(SexpCursor.from_node(node, "list"))
        return lists

    @classmethod
    def strip_comments(cls, nodes: Iterable[SexpNode]) -> List[SexpNode]:
        """
        Remove every comment from the given trees.

        The trees are rebuilt rather than modified.

        Parameters
        ----------
        nodes : Iterable[SexpNode]
            Top-level nodes.

        Returns
        -------
        List[SexpNode]
            The nodes without comments; top-level comments are dropped.
        """

        def _drop_comment(node: SexpNode):
            if node.is_comment():
                return None, SexpNode.RecurAction.StopRecursion
            return node, SexpNode.RecurAction.ContinueRecursion

        stripped = []
        for node in nodes:
            new_node = node.modify_recur(_drop_comment)
            if new_node is not None:
                stripped.append(new_node)
        return stripped
