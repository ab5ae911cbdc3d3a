"""
Defines an abstract representation of s-expressions as nodes in trees.
"""

import abc
import enum
from typing import (
    Any,
    Callable,
    ClassVar,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from sexpkit.language.location import Location
from sexpkit.language.sexp.exception import NodeError, NodeErrorKind
from sexpkit.language.token import Token

PythonDS = Union[bool, float, str, list]


class AstType(enum.Enum):
    """
    The closed set of s-expression node variants.
    """

    BOOL = "bool"
    COMMENT = "comment"
    IDENTIFIER = "identifier"
    LIST = "list"
    NUMBER = "number"
    STRING = "string"

    def __str__(self) -> str:  # noqa: D105
        return self.value


class SexpNode(abc.ABC):
    """
    Abstract class of a node in an s-exp represented as a tree.

    Each node retains the tokens that produced it so that errors can be
    reported against the original source text.
    Nodes are not modified after construction.
    """

    class RecurAction(enum.Enum):
        """
        Records the result of a recursively applied function.
        """

        ContinueRecursion = 0
        StopRecursion = 1

    ast_type: ClassVar[AstType]
    """
    The variant of this node.
    """

    def __init__(self, tokens: Sequence[Token] = ()) -> None:
        self._tokens = tuple(tokens)

    def __getitem__(self, index: int) -> 'SexpNode':
        """
        Get the `index`-th child of this node.

        Parameters
        ----------
        index : int
            The index of the requested child.

        Returns
        -------
        SexpNode
            The requested child node.

        Raises
        ------
        NodeError
            If the index is out of bounds or the node has no children.
        """
        children = self.get_children()
        if children is None:
            raise NodeError(
                NodeErrorKind.INVALID_TYPE,
                self.location,
                AstType.LIST,
                self.ast_type)
        elif index < -len(children) or index >= len(children):
            raise NodeError(
                NodeErrorKind.LENGTH_MISMATCH,
                self.location,
                message=(
                    f"Cannot get child ({index}), "
                    f"this list only has {len(children)} children."))
        return children[index]

    def __iter__(self) -> Iterator['SexpNode']:
        """
        Iterate over the children of this (list) node.
        """
        return iter(self.as_list())

    @abc.abstractmethod
    def __eq__(self, other: object) -> bool:  # noqa: D105
        ...

    def __len__(self) -> int:
        """
        Get the number of immediate children.
        """
        children = self.get_children()
        return len(children) if children is not None else 0

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}({str(self)!r})"

    @abc.abstractmethod
    def __str__(self) -> str:
        """
        Get a representation of this subtree as an s-expression.
        """
        ...

    @property
    def location(self) -> Location:
        """
        Get the location of the first token that produced this node.

        Nodes built without tokens are located at the default location.
        """
        if self._tokens:
            return self._tokens[0].location
        return Location()

    @property
    def tokens(self) -> Tuple[Token, ...]:
        """
        Get the tokens that produced this node.

        Atoms own their single token; lists own their opening and
        closing delimiters.
        """
        return self._tokens

    def get_children(self) -> Optional[Tuple["SexpNode", ...]]:
        """
        Get the children of this (list) node.

        Returns
        -------
        tuple of SexpNode or None
            This node's children if this is a list node, otherwise None.
        """
        return None

    def is_atom(self) -> bool:
        """
        Check if this node is anything other than a list.
        """
        return not self.is_list()

    def is_bool(self) -> bool:  # noqa: D102
        return self.ast_type == AstType.BOOL

    def is_comment(self) -> bool:  # noqa: D102
        return self.ast_type == AstType.COMMENT

    def is_identifier(self) -> bool:  # noqa: D102
        return self.ast_type == AstType.IDENTIFIER

    def is_list(self) -> bool:  # noqa: D102
        return self.ast_type == AstType.LIST

    def is_number(self) -> bool:  # noqa: D102
        return self.ast_type == AstType.NUMBER

    def is_string(self) -> bool:  # noqa: D102
        return self.ast_type == AstType.STRING

    def _expect(self, ast_type: AstType) -> None:
        if self.ast_type != ast_type:
            raise NodeError(
                NodeErrorKind.INVALID_TYPE,
                self.location,
                ast_type,
                self.ast_type)

    def as_bool(self) -> bool:
        """
        Get the value of this boolean node.

        Raises
        ------
        NodeError
            If this node is not a boolean.
        """
        self._expect(AstType.BOOL)
        return self._payload()

    def as_comment(self) -> str:
        """
        Get the text of this comment node.
        """
        self._expect(AstType.COMMENT)
        return self._payload()

    def as_identifier(self) -> str:
        """
        Get the name of this identifier node.
        """
        self._expect(AstType.IDENTIFIER)
        return self._payload()

    def as_list(self) -> List["SexpNode"]:
        """
        Get a copy of the children of this list node.
        """
        self._expect(AstType.LIST)
        return list(self.get_children())

    def as_number(self) -> float:
        """
        Get the value of this number node.
        """
        self._expect(AstType.NUMBER)
        return self._payload()

    def as_string(self) -> str:
        """
        Get the contents of this string node.
        """
        self._expect(AstType.STRING)
        return self._payload()

    def _payload(self) -> Any:
        return None

    def assert_length(self, length: int) -> None:
        """
        Verify that this is a list with exactly `length` children.

        Raises
        ------
        NodeError
            If this node is not a list or has a different number of
            children.
        """
        self._expect(AstType.LIST)
        actual = len(self)
        if actual != length:
            raise NodeError(
                NodeErrorKind.LENGTH_MISMATCH,
                self.location,
                length,
                actual)

    @abc.abstractmethod
    def modify_recur(
        self,
        pre_children_modify: Callable[["SexpNode"],
                                      Tuple[Optional["SexpNode"],
                                            RecurAction]] = lambda x:
        (x,
         SexpNode.RecurAction.ContinueRecursion),
        post_children_modify: Callable[["SexpNode"],
                                       Optional["SexpNode"]] = lambda x: x,
    ) -> Optional["SexpNode"]:
        r"""
        Perform an out-of-place modification of this node's subtree.

        Recursively visits (in depth-first-search order) each node in
        the s-expression and rebuilds the s-expression.
        Two functions are composed and applied to this node and each of
        its children.
        The receiver is never modified.

        Parameters
        ----------
        pre_children_modify : Callable[[SexpNode], \
                                       Tuple[Optional[SexpNode], \
                                             RecurAction]]
            The function that should be applied prior to applying the
            modification on children.
        post_children_modify : Callable[[SexpNode], Optional[SexpNode]]
            The function that should be applied after applying the
            modification on children.

        Returns
        -------
        Optional[SexpNode]
            The modified s-expression to replace this s-expression node,
            or None if deleting this node from parent list.
        """
        ...

    def serialize(self) -> str:
        """
        Convert this node's subtree to an s-expression.
        """
        return self.__str__()

    @abc.abstractmethod
    def to_python_ds(self) -> PythonDS:
        """
        Convert this s-expression to Python lists and primitive values.
        """
        ...
