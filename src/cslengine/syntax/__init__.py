"""Page field syntax.

Lexer, recursive-descent parser and result type for page fields
("365-375", "iv-ix", "pp. 12, 15-17").

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor
from .lexer import Lexeme, LexemeKind, tokenize
from .page_range import PageRange
from .parser import PageParser, PageParseResult, parse_page_range

__all__ = [
    "Cursor",
    "Lexeme",
    "LexemeKind",
    "PageParseResult",
    "PageParser",
    "PageRange",
    "parse_page_range",
    "tokenize",
]
