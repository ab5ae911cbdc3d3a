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
Defines leaf s-expression nodes.
"""
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar

import numpy as np

from sexpkit.language.sexp.node import AstType, SexpNode
from sexpkit.language.token import Token

_V = TypeVar('_V', bool, float, str)


class SexpAtom(SexpNode, Generic[_V]):
    """
    An atomic node containing a single value.
    """

    def __init__(self, value: _V, tokens: Sequence[Token] = ()) -> None:
        super().__init__(tokens)
        self._value = value

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, SexpNode):
            return NotImplemented
        else:
            return (
                other.ast_type == self.ast_type
                and other._payload() == self._value)

    def __str__(self) -> str:  # noqa: D105
        return str(self._value)

    @property
    def value(self) -> _V:
        """
        Get the value held by this node.
        """
        return self._value

    def _payload(self) -> Any:
        return self._value

    def modify_recur(  # noqa: D102
        self,
        pre_children_modify: Callable[["SexpNode"],
                                      Tuple[Optional["SexpNode"],
                                            SexpNode.RecurAction]] = lambda x:
        (x,
         SexpNode.RecurAction.ContinueRecursion),
        post_children_modify: Callable[["SexpNode"],
                                       Optional["SexpNode"]] = lambda x: x,
    ) -> Optional["SexpNode"]:
        sexp, _recur_action = pre_children_modify(self)
        if sexp is None:
            return None
        sexp = post_children_modify(sexp)
        return sexp

    def to_python_ds(self) -> _V:
        """
        Return the value of this node.
        """
        return self._value


class SexpBool(SexpAtom[bool]):
    """
    A boolean literal, ``true`` or ``false``.
    """

    ast_type = AstType.BOOL

    def __init__(self, value: bool, tokens: Sequence[Token] = ()) -> None:
        super().__init__(bool(value), tokens)

    def __str__(self) -> str:  # noqa: D105
        return "true" if self._value else "false"


class SexpNumber(SexpAtom[float]):
    """
    A numeric literal.

    All numbers are floating point; integers are numbers without a
    fractional part.
    """

    ast_type = AstType.NUMBER

    def __init__(self, value: float, tokens: Sequence[Token] = ()) -> None:
        super().__init__(float(value), tokens)

    def __str__(self) -> str:  # noqa: D105
        if self._value.is_integer():
            return str(int(self._value))
        # positional notation; the tokenizer reads no exponents
        return np.format_float_positional(self._value, trim="-")

    def is_integer(self) -> bool:
        """
        Return whether the number has no fractional part.
        """
        return self._value.is_integer()


class SexpString(SexpAtom[str]):
    """
    A double-quoted string literal.

    The contents are stored exactly as written between the quotes, so
    escape sequences are not interpreted.
    """

    ast_type = AstType.STRING

    def __str__(self) -> str:  # noqa: D105
        return f'"{self._value}"'


class SexpIdentifier(SexpAtom[str]):
    """
    A bare symbol.
    """

    ast_type = AstType.IDENTIFIER


class SexpComment(SexpAtom[str]):
    """
    A line comment, excluding its leading semicolon.
    """

    ast_type = AstType.COMMENT

    def __str__(self) -> str:  # noqa: D105
        return f";{self._value}\n"
