"""Typed output fragments.

A TokenBuffer is a faithful log of what a render step emitted, in emission
order. It offers append operations only: transformations read the tokens
of one buffer and emit new tokens into another.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cslengine.enums import TokenType

__all__ = ["Token", "TokenBuffer"]


@dataclass(frozen=True, slots=True)
class Token:
    """One typed fragment of rendered text."""

    text: str
    type: TokenType = TokenType.TEXT


class TokenBuffer:
    """Ordered sequence of tokens.

    Example:
        >>> buf = TokenBuffer()
        >>> _ = buf.append_text("Smith").append_text(", ", TokenType.DELIMITER)
        >>> str(buf)
        'Smith, '
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: list[Token] = list(tokens)

    def append_text(self, text: str, type: TokenType = TokenType.TEXT) -> TokenBuffer:  # noqa: A002
        """Append a new token built from text and type."""
        self._tokens.append(Token(text, type))
        return self

    def append_token(self, token: Token) -> TokenBuffer:
        """Append an existing token."""
        self._tokens.append(token)
        return self

    def append_buffer(self, other: TokenBuffer) -> TokenBuffer:
        """Append all tokens of other, preserving their order."""
        self._tokens.extend(other._tokens)
        return self

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Snapshot of the tokens emitted so far."""
        return tuple(self._tokens)

    @property
    def is_empty(self) -> bool:
        return not self._tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenBuffer):
            return NotImplemented
        return self._tokens == other._tokens

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(t.text for t in self._tokens)

    def __repr__(self) -> str:
        return f"TokenBuffer({self._tokens!r})"
