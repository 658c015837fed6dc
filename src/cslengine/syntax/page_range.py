"""Structured value of a parsed page field.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PageRange"]


@dataclass(frozen=True, slots=True)
class PageRange:
    """A page, a page range, or a list of them.

    Attributes:
        literal: Normalized page text, or the raw input when it could not be parsed
        first_page: First page mentioned, None when unparsed
        number_of_pages: Page count, None when it cannot be computed
        is_multiple: More than one page is referenced

    Example:
        >>> parse_page_range("365--375")
        PageRange(literal='365-375', first_page='365', number_of_pages=11, is_multiple=True)
    """

    literal: str
    first_page: str | None = None
    number_of_pages: int | None = None
    is_multiple: bool = False

    @classmethod
    def from_literal(cls, text: str) -> PageRange:
        """Build the unparsed form of a page field."""
        return cls(literal=text)

    @property
    def is_parsed(self) -> bool:
        """True when the field was understood by the grammar."""
        return self.first_page is not None
