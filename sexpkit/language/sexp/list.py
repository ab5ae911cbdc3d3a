"""
Defines internal, non-leaf s-expression nodes with branching subtrees.
"""

from typing import Callable, Iterable, Optional, Sequence, Tuple

from sexpkit.language.sexp.node import AstType, SexpNode
from sexpkit.language.token import Token


class SexpList(SexpNode):
    """
    A parenthesized sequence of nodes.

    The list owns only its opening and closing delimiter tokens, so its
    location is that of the opening parenthesis.
    """

    ast_type = AstType.LIST

    def __init__(
            self,
            children: Optional[Iterable[SexpNode]] = None,
            tokens: Sequence[Token] = ()) -> None:
        super().__init__(tokens)
        self._children = tuple(children) if children is not None else ()

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, SexpNode):
            return NotImplemented
        else:
            return other.is_list() and self._children == other.get_children()

    def __str__(self) -> str:  # noqa: D105
        return "(" + " ".join(str(c) for c in self._children) + ")"

    @property
    def children(self) -> Tuple[SexpNode, ...]:
        """
        Get the children of this list in source order.
        """
        return self._children

    def get_children(self) -> Tuple[SexpNode, ...]:  # noqa: D102
        return self._children

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
        sexp, recur_action = pre_children_modify(self)
        if sexp is None:
            return None
        elif (sexp.is_list()
              and recur_action == SexpNode.RecurAction.ContinueRecursion):
            children = [
                child.modify_recur(pre_children_modify,
                                   post_children_modify)
                for child in sexp.get_children()
            ]
            # rebuilt lists keep the delimiters of the original
            sexp = SexpList([c for c in children if c is not None], sexp.tokens)
        return post_children_modify(sexp)

    def to_python_ds(self) -> list:  # noqa: D102
        return [child.to_python_ds() for child in self._children]
