"""
Provides parsing utilities and abstractions for s-expressions.
"""

from .atom import (  # noqa: F401
    SexpAtom,
    SexpBool,
    SexpComment,
    SexpIdentifier,
    SexpNumber,
    SexpString,
)
from .cursor import SexpCursor  # noqa: F401
from .exception import (  # noqa: F401
    CursorError,
    NodeError,
    NodeErrorKind,
    ParserError,
    ParserErrorKind,
    SexpError,
    TokenizerError,
    TokenizerErrorKind,
)
from .list import SexpList  # noqa: F401
from .node import AstType, SexpNode  # noqa: F401
from .parser import SexpParser  # noqa: F401
from .tokenizer import SexpTokenizer  # noqa: F401

tokenize = SexpTokenizer.tokenize
parse = SexpParser.parse
parse_text = SexpParser.parse_text
parse_lists = SexpParser.parse_lists
strip_comments = SexpParser.strip_comments
