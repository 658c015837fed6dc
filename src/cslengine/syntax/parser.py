"""Recursive-descent parser for page fields.

Grammar (over the lexemes produced by cslengine.syntax.lexer):

    pages ::= PREFIX? range (LIST_SEP range)* EOF
    range ::= page (RANGE_SEP page)?
    page  ::= NUMBER | ROMAN | ALNUM

Each rule takes an immutable LexemeCursor and returns a ParseResult with
the parsed value and the advanced cursor, or None after recording a
diagnostic in the ParseContext.

Fallback Policy:
    PageParser.parse() never raises. Empty input, oversized input, any
    recorded lexical or syntax error, an empty literal, and any exception
    raised while parsing all produce PageRange.from_literal(input): the
    raw input with no first page, no page count and is_multiple False.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cslengine.constants import (
    MAX_PAGE_INPUT_SIZE,
    PAGE_LITERAL_LIST_SEPARATOR,
    PAGE_LITERAL_RANGE_SEPARATOR,
)
from cslengine.diagnostics import CslSyntaxError, Diagnostic, ErrorTemplate
from cslengine.syntax.lexer import Lexeme, LexemeKind, tokenize
from cslengine.syntax.page_range import PageRange

__all__ = [
    "LexemeCursor",
    "PageParseResult",
    "PageParser",
    "PageSpan",
    "ParseContext",
    "ParseResult",
    "parse_page_range",
    "parse_pages",
    "parse_range",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LexemeCursor:
    """Immutable position in a lexeme sequence ending with an EOF lexeme."""

    lexemes: tuple[Lexeme, ...]
    pos: int = 0

    @property
    def current(self) -> Lexeme:
        """Lexeme at the current position; the EOF lexeme once input is consumed."""
        return self.lexemes[min(self.pos, len(self.lexemes) - 1)]

    @property
    def is_eof(self) -> bool:
        return self.current.kind is LexemeKind.EOF

    def advance(self) -> LexemeCursor:
        """Return new cursor at the next lexeme (original unchanged)."""
        return LexemeCursor(self.lexemes, min(self.pos + 1, len(self.lexemes) - 1))


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parsed value and the cursor positioned after it."""

    value: T
    cursor: LexemeCursor


@dataclass(slots=True)
class ParseContext:
    """Errors recorded while parsing one page field."""

    errors: list[Diagnostic] = field(default_factory=list)

    def expected(self, what: str, found: Lexeme) -> None:
        """Record that the grammar required what but found something else."""
        if found.kind is LexemeKind.EOF:
            self.errors.append(ErrorTemplate.page_unexpected_end(what, found.start))
        else:
            self.errors.append(ErrorTemplate.page_unexpected(found.text, what, found.start, found.end))


@dataclass(frozen=True, slots=True)
class PageSpan:
    """A single page (last is None) or a range of pages."""

    first: Lexeme
    last: Lexeme | None = None

    @property
    def literal(self) -> str:
        if self.last is None:
            return self.first.text
        return f"{self.first.text}{PAGE_LITERAL_RANGE_SEPARATOR}{self.last.text}"

    @property
    def number_of_pages(self) -> int | None:
        """Pages covered by the span, when it can be computed.

        Abbreviated range ends are completed from the start page, so
        "365-75" covers 365 to 375. Non-numeric and descending ranges have
        no count.
        """
        if self.last is None:
            return 1
        if self.first.kind is not LexemeKind.NUMBER or self.last.kind is not LexemeKind.NUMBER:
            return None
        first = self.first.text
        last = self.last.text
        if len(last) < len(first):
            last = first[: len(first) - len(last)] + last
        count = int(last) - int(first) + 1
        return count if count > 0 else None


def parse_page(cursor: LexemeCursor, context: ParseContext) -> ParseResult[Lexeme] | None:
    """Parse page ::= NUMBER | ROMAN | ALNUM."""
    lexeme = cursor.current
    if not lexeme.is_page:
        context.expected("a page number", lexeme)
        return None
    return ParseResult(lexeme, cursor.advance())


def parse_range(cursor: LexemeCursor, context: ParseContext) -> ParseResult[PageSpan] | None:
    """Parse range ::= page (RANGE_SEP page)?"""
    first = parse_page(cursor, context)
    if first is None:
        return None
    cursor = first.cursor
    if cursor.current.kind is not LexemeKind.RANGE_SEP:
        return ParseResult(PageSpan(first.value), cursor)

    last = parse_page(cursor.advance(), context)
    if last is None:
        return None
    return ParseResult(PageSpan(first.value, last.value), last.cursor)


def parse_pages(cursor: LexemeCursor, context: ParseContext) -> ParseResult[tuple[PageSpan, ...]] | None:
    """Parse pages ::= PREFIX? range (LIST_SEP range)* EOF"""
    if cursor.current.kind is LexemeKind.PREFIX:
        cursor = cursor.advance()

    first = parse_range(cursor, context)
    if first is None:
        return None
    spans = [first.value]
    cursor = first.cursor

    while cursor.current.kind is LexemeKind.LIST_SEP:
        item = parse_range(cursor.advance(), context)
        if item is None:
            return None
        spans.append(item.value)
        cursor = item.cursor

    if not cursor.is_eof:
        context.expected("a separator or end of input", cursor.current)
        return None
    return ParseResult(tuple(spans), cursor)


@dataclass(frozen=True, slots=True)
class PageParseResult:
    """Outcome of parsing one page field.

    Attributes:
        page_range: The parsed value, or the literal fallback
        errors: Diagnostics that caused the fallback (empty on success,
            and empty when the fallback was caused by an unexpected exception)
    """

    page_range: PageRange
    errors: tuple[Diagnostic, ...] = ()

    @property
    def is_fallback(self) -> bool:
        """True when the literal fallback was returned."""
        return not self.page_range.is_parsed


class PageParser:
    """Page field parser with a literal fallback.

    Attributes:
        max_input_size: Longest input that is parsed (default: 4096
            characters); longer input is returned as a literal
    """

    __slots__ = ("_max_input_size",)

    def __init__(self, *, max_input_size: int | None = None) -> None:
        """Initialize parser with an optional input size limit.

        Args:
            max_input_size: Maximum input length in characters.
                Set to 0 to disable the limit.
        """
        self._max_input_size = (
            max_input_size if max_input_size is not None else MAX_PAGE_INPUT_SIZE
        )

    @property
    def max_input_size(self) -> int:
        return self._max_input_size

    def parse(self, text: str) -> PageRange:
        """Parse a page field. Never raises.

        Example:
            >>> PageParser().parse("iv-ix")
            PageRange(literal='iv-ix', first_page='iv', number_of_pages=None, is_multiple=True)
            >>> PageParser().parse("n.p.")
            PageRange(literal='n.p.', first_page=None, number_of_pages=None, is_multiple=False)
        """
        return self.parse_with_diagnostics(text).page_range

    def parse_with_diagnostics(self, text: str) -> PageParseResult:
        """Parse a page field and report why a fallback happened. Never raises."""
        try:
            return self._parse(text)
        except Exception as exc:  # noqa: BLE001 - every failure degrades to the literal
            logger.debug("Page field %r fell back to literal: %s", text, exc)
            diagnostic = exc.diagnostic if isinstance(exc, CslSyntaxError) else None
            return PageParseResult(
                PageRange.from_literal(text),
                (diagnostic,) if diagnostic is not None else (),
            )

    def _parse(self, text: str) -> PageParseResult:
        if not text:
            return self._fallback(text, (ErrorTemplate.page_input_empty(),))
        if self._max_input_size > 0 and len(text) > self._max_input_size:
            diag = ErrorTemplate.page_input_too_large(len(text), self._max_input_size)
            return self._fallback(text, (diag,))

        lexed = tokenize(text)
        context = ParseContext(list(lexed.errors))
        result = parse_pages(LexemeCursor(lexed.lexemes), context)
        if result is None or context.errors:
            return self._fallback(text, tuple(context.errors))

        spans = result.value
        literal = PAGE_LITERAL_LIST_SEPARATOR.join(span.literal for span in spans)
        if not literal:
            msg = f"Page field {text!r} produced an empty literal"
            raise CslSyntaxError(msg)

        counts = [span.number_of_pages for span in spans]
        number_of_pages = None if None in counts else sum(counts)  # type: ignore[arg-type]
        is_multiple = len(spans) > 1 or spans[0].last is not None
        return PageParseResult(
            PageRange(
                literal=literal,
                first_page=spans[0].first.text,
                number_of_pages=number_of_pages,
                is_multiple=is_multiple,
            )
        )

    @staticmethod
    def _fallback(text: str, errors: tuple[Diagnostic, ...]) -> PageParseResult:
        logger.debug(
            "Page field %r fell back to literal: %s",
            text,
            "; ".join(e.message for e in errors),
        )
        return PageParseResult(PageRange.from_literal(text), errors)


_DEFAULT_PARSER = PageParser()


def parse_page_range(text: str) -> PageRange:
    """Parse a page field with the default parser. Never raises.

    Example:
        >>> parse_page_range("365-375")
        PageRange(literal='365-375', first_page='365', number_of_pages=11, is_multiple=True)
        >>> parse_page_range("7")
        PageRange(literal='7', first_page='7', number_of_pages=1, is_multiple=False)
    """
    return _DEFAULT_PARSER.parse(text)
