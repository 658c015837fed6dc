"""Lexer for page fields.

Scans a raw page field ("pp. 365--375", "iv-ix, 12") into classified
lexemes. Whitespace separates lexemes and is otherwise dropped. Text that
is neither a page nor a separator becomes an UNKNOWN lexeme and is
recorded as an error; the parser falls back to the literal input when any
error is recorded.

Lexeme kinds:
    NUMBER     ASCII digits only ("365")
    ROMAN      a well-formed roman numeral, any case ("iv", "XII")
    ALNUM      letters and digits mixed ("S12", "e1003", "12a")
    RANGE_SEP  a run of hyphen or dash characters ("-", "--", "–")
    LIST_SEP   ",", ";", "&" or the word "and"
    PREFIX     a page label followed by a period ("p.", "pp.")
    UNKNOWN    anything else
    EOF        end of input (always the last lexeme)

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

from cslengine.diagnostics import Diagnostic, ErrorTemplate
from cslengine.syntax.cursor import Cursor

__all__ = ["LexResult", "Lexeme", "LexemeKind", "is_roman_numeral", "tokenize"]

# Hyphen-minus, hyphen, non-breaking hyphen, figure dash, en dash, em dash, minus sign
_RANGE_CHARS: str = "-‐‑‒–—−"

_LIST_CHARS: str = ",;&"

_LIST_WORDS: frozenset[str] = frozenset({"and"})

# Labels recognised in front of a page ("p. 7", "pp. 12-15"), compared lowercase
_PREFIX_WORDS: frozenset[str] = frozenset({"p", "pp", "pg", "pgs"})

_ROMAN_NUMERAL = re.compile(
    r"M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})",
    re.IGNORECASE,
)


class LexemeKind(StrEnum):
    """Classification of a lexeme."""

    NUMBER = "number"
    ROMAN = "roman"
    ALNUM = "alnum"
    RANGE_SEP = "range-separator"
    LIST_SEP = "list-separator"
    PREFIX = "prefix"
    UNKNOWN = "unknown"
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Lexeme:
    """One classified unit of a page field.

    Attributes:
        kind: Lexeme classification
        text: Source text of the lexeme
        start: Start offset in the source
        end: End offset in the source (exclusive)
    """

    kind: LexemeKind
    text: str
    start: int
    end: int

    @property
    def is_page(self) -> bool:
        """True for lexemes that can stand for a page."""
        return self.kind in (LexemeKind.NUMBER, LexemeKind.ROMAN, LexemeKind.ALNUM)


@dataclass(frozen=True, slots=True)
class LexResult:
    """Lexemes of a page field and the errors found while scanning them."""

    lexemes: tuple[Lexeme, ...]
    errors: tuple[Diagnostic, ...] = ()


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_roman_numeral(word: str) -> bool:
    """Check whether word is a well-formed, non-empty roman numeral.

    Example:
        >>> is_roman_numeral("xiv")
        True
        >>> is_roman_numeral("iiii")
        False
    """
    return bool(word) and _ROMAN_NUMERAL.fullmatch(word) is not None


def _classify_word(word: str) -> LexemeKind:
    if word.isdigit():
        return LexemeKind.NUMBER
    if word.lower() in _LIST_WORDS:
        return LexemeKind.LIST_SEP
    if is_roman_numeral(word):
        return LexemeKind.ROMAN
    if any(ch.isdigit() for ch in word):
        return LexemeKind.ALNUM
    return LexemeKind.UNKNOWN


def tokenize(source: str) -> LexResult:
    """Scan a page field into lexemes.

    Args:
        source: Raw page field

    Returns:
        LexResult whose lexemes end with an EOF lexeme

    Example:
        >>> [lx.kind.value for lx in tokenize("pp. 12--15").lexemes]
        ['prefix', 'number', 'range-separator', 'number', 'eof']
    """
    lexemes: list[Lexeme] = []
    errors: list[Diagnostic] = []
    cursor = Cursor(source, 0)

    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            break

        start = cursor
        ch = cursor.current
        if ch in _RANGE_CHARS:
            cursor = cursor.advance_while(lambda c: c in _RANGE_CHARS)
            kind = LexemeKind.RANGE_SEP
        elif ch in _LIST_CHARS:
            cursor = cursor.advance()
            kind = LexemeKind.LIST_SEP
        elif _is_word_char(ch):
            cursor = cursor.advance_while(_is_word_char)
            word = start.slice_to(cursor.pos)
            if cursor.peek() == "." and word.lower() in _PREFIX_WORDS:
                cursor = cursor.advance()
                kind = LexemeKind.PREFIX
            else:
                kind = _classify_word(word)
        else:
            cursor = cursor.advance()
            kind = LexemeKind.UNKNOWN

        text = start.slice_to(cursor.pos)
        if kind is LexemeKind.UNKNOWN:
            errors.append(ErrorTemplate.page_unrecognized(text, start.pos, cursor.pos))
        lexemes.append(Lexeme(kind, text, start.pos, cursor.pos))

    lexemes.append(Lexeme(LexemeKind.EOF, "", cursor.pos, cursor.pos))
    return LexResult(tuple(lexemes), tuple(errors))
