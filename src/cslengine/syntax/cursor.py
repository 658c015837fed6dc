"""Immutable character cursor over a page field.

Every move returns a new Cursor, so the lexer can keep the start of a
lexeme while scanning to its end.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Offset into a page field.

    Example:
        >>> start = Cursor("12-15", 0)
        >>> end = start.advance_while(str.isdigit)
        >>> start.slice_to(end.pos), end.current
        ('12', '-')
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: If the whole field has been consumed
        """
        ch = self.peek()
        if ch is None:
            msg = f"No character at offset {self.pos} of {self.source!r}"
            raise EOFError(msg)
        return ch

    def peek(self, offset: int = 0) -> str | None:
        """Character offset positions ahead, or None past the end."""
        i = self.pos + offset
        return self.source[i] if i < len(self.source) else None

    def advance(self, count: int = 1) -> Cursor:
        """Move count characters forward, stopping at the end of the field."""
        return replace(self, pos=min(self.pos + count, len(self.source)))

    def advance_while(self, predicate: Callable[[str], bool]) -> Cursor:
        """Move past the run of characters accepted by predicate.

        Example:
            >>> Cursor("365-375", 0).advance_while(str.isdigit).pos
            3
        """
        end = self.pos
        while end < len(self.source) and predicate(self.source[end]):
            end += 1
        return replace(self, pos=end)

    def slice_to(self, end_pos: int) -> str:
        """Source text from this cursor up to end_pos."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> Cursor:
        """Move past any whitespace, including NBSP and thin spaces."""
        return self.advance_while(str.isspace)
