"""Diagnostic codes and the Diagnostic record.

Every error raised or recorded by cslengine is described by a Diagnostic.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing macros, terms, variables)
        2000-2999: Configuration errors (invalid node attributes)
        3000-3999: Syntax errors (page parser failures)
    """

    # Reference errors (1000-1999)
    MACRO_NOT_FOUND = 1001
    TERM_FORM_NOT_FOUND = 1002
    TERM_NOT_FOUND = 1003
    VARIABLE_NOT_RECOGNIZED = 1004

    # Configuration errors (2000-2999)
    INVALID_ATTRIBUTE_VALUE = 2001

    # Syntax errors (3000-3999)
    PAGE_INPUT_EMPTY = 3001
    PAGE_INPUT_TOO_LARGE = 3002
    PAGE_UNRECOGNIZED_CHARACTER = 3003
    PAGE_UNEXPECTED_LEXEME = 3004
    PAGE_UNEXPECTED_END = 3005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open range [start, end) of character offsets in a page field.

    Page fields are a single line, so offsets are all that is tracked.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            msg = f"Invalid span {self.start}..{self.end}: need 0 <= start <= end"
            raise ValueError(msg)

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One problem found while rendering or parsing.

    Reference and configuration diagnostics have no span. Page parser
    diagnostics point into the page field.

    Attributes:
        code: What went wrong
        message: One-line description naming the offending value
        span: Offsets into the page field, when there is one
        hint: How to fix the style, locale or data
        help_url: Section of the CSL documentation that applies
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Multi-line rendering used as the message of CslError.

        Example output:
            error[MACRO_NOT_FOUND]: Unknown macro: 'author'
              = help: Define the macro in the style or fix the reference
              = note: see https://docs.citationstyles.org/en/stable/specification.html#macro
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)
