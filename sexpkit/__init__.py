"""
A reader for location-tagged s-expressions.
"""

from sexpkit.language.location import Location  # noqa: F401
from sexpkit.language.sexp import (  # noqa: F401
    AstType,
    CursorError,
    NodeError,
    ParserError,
    SexpCursor,
    SexpError,
    SexpList,
    SexpNode,
    SexpParser,
    SexpTokenizer,
    TokenizerError,
    parse,
    parse_lists,
    parse_text,
    strip_comments,
    tokenize,
)
from sexpkit.language.sexp.loader import parse_directory, parse_file  # noqa: F401
from sexpkit.language.token import Token, TokenKind  # noqa: F401
