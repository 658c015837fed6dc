"""Render diagnostics for people and for tools.

Page parser diagnostics carry character offsets into the page field. When
the field is passed to format(), the rust style shows it with the offending
characters underlined.

Python 3.13+.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output styles understood by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into text.

    Attributes:
        output_format: rust (multi-line, default), simple (one line) or json
        truncate_at: Shorten messages and hints longer than this many
            characters (None keeps them whole)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.macro_not_found("author")))
        MACRO_NOT_FOUND: Unknown macro: 'author'
    """

    output_format: OutputFormat = OutputFormat.RUST
    truncate_at: int | None = None

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Format one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: Page field the diagnostic's span points into, if known
        """
        if self.output_format == OutputFormat.SIMPLE:
            return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
        if self.output_format == OutputFormat.JSON:
            return json.dumps(self._as_record(diagnostic), ensure_ascii=False)
        return self._format_rust(diagnostic, source)

    def format_all(self, diagnostics: Iterable[Diagnostic], source: str | None = None) -> str:
        """Format several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(d, source) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic, source: str | None) -> str:
        """Multi-line form.

        Example output:
            error[PAGE_UNRECOGNIZED_CHARACTER]: Unrecognized text 'ff' at position 3
              --> position 3..5
               |
               | 12 ff.
               |    ^^
        """
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> position {span.start}..{span.end}")
            if source is not None and span.end <= len(source):
                marker = "^" * max(span.end - span.start, 1)
                lines += ["   |", f"   | {source}", f"   | {' ' * span.start}{marker}"]
        if diagnostic.hint is not None:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        if diagnostic.help_url is not None:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    def _as_record(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._clip(diagnostic.message),
        }
        if diagnostic.span is not None:
            record |= {"start": diagnostic.span.start, "end": diagnostic.span.end}
        if diagnostic.hint is not None:
            record["hint"] = self._clip(diagnostic.hint)
        if diagnostic.help_url is not None:
            record["help_url"] = diagnostic.help_url
        return record

    def _clip(self, text: str) -> str:
        limit = self.truncate_at
        if limit is None or len(text) <= limit:
            return text
        return f"{text[:limit]}..."
