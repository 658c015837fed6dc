"""Behaviors: per-token transformations wrapped around a render step.

A behavior is configured once from a node's attributes and then applied on
every render as ``behavior.apply(render_fn, ctx)``. The render function
does not know it is wrapped: when the behavior is enabled it writes into a
child context, and the behavior re-emits the transformed tokens into ctx.

The set of behaviors is closed (StripPeriods, TextCaseBehavior). Each is a frozen
dataclass implementing TokenTransform.transform(); the wrapping procedure
is shared.

Python 3.13+.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from cslengine.diagnostics import ErrorTemplate, InvalidAttributeError
from cslengine.enums import TextCase
from cslengine.runtime.tokens import Token

if TYPE_CHECKING:
    from cslengine.model.style import RenderFn
    from cslengine.runtime.render_context import RenderContext

__all__ = [
    "Behavior",
    "StripPeriods",
    "TextCaseBehavior",
    "TokenTransform",
    "apply_behaviors",
    "behaviors_from_attributes",
    "compose",
    "parse_bool_attribute",
]

logger = logging.getLogger(__name__)

# Text cases that need to see neighbouring tokens (sentence boundaries,
# stop words) and therefore cannot be applied token by token.
_CROSS_TOKEN_CASES = frozenset({TextCase.SENTENCE, TextCase.TITLE})


def parse_bool_attribute(value: str | None) -> bool:
    """Parse a boolean node attribute: "true" (any case) is True, anything else False."""
    return value is not None and value.strip().lower() == "true"


class Behavior(ABC):
    """Wraps a render step."""

    __slots__ = ()

    @abstractmethod
    def apply(self, render_fn: RenderFn, ctx: RenderContext) -> None:
        """Run render_fn against ctx, post-processing its output if enabled."""


class TokenTransform(Behavior):
    """Behavior that maps every emitted token through transform()."""

    __slots__ = ()

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """False turns the behavior into a pass-through."""

    @abstractmethod
    def transform(self, token: Token) -> Token:
        """Return the transformed version of one token."""

    def apply(self, render_fn: RenderFn, ctx: RenderContext) -> None:
        if not self.enabled:
            render_fn(ctx)
            return
        child = ctx.spawn_child()
        render_fn(child)
        for token in self.transform_all(child.result):
            ctx.emit(token)

    def transform_all(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """Map the wrapped step's output, token by token."""
        for token in tokens:
            yield self.transform(token)


@final
@dataclass(frozen=True, slots=True)
class StripPeriods(TokenTransform):
    """Removes every period from the wrapped step's output.

    Configured by the ``strip-periods`` attribute.
    """

    strip_periods: bool = False

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, str]) -> StripPeriods:
        return cls(parse_bool_attribute(attrs.get("strip-periods")))

    @property
    def enabled(self) -> bool:
        return self.strip_periods

    def transform(self, token: Token) -> Token:
        return Token(token.text.replace(".", ""), token.type)


@final
@dataclass(frozen=True, slots=True)
class TextCaseBehavior(TokenTransform):
    """Changes the case of the wrapped step's output.

    Configured by the ``text-case`` attribute. capitalize-first changes the
    first character of the whole output only, so it applies to the first
    non-empty token. sentence and title are accepted and passed through
    unchanged.
    """

    text_case: TextCase | None = None

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, str]) -> TextCaseBehavior:
        """Build the behavior from a node's attributes.

        Raises:
            InvalidAttributeError: If text-case has a value outside TextCase
        """
        raw = attrs.get("text-case")
        if raw is None:
            return cls()
        try:
            text_case = TextCase(raw)
        except ValueError:
            expected = tuple(c.value for c in TextCase)
            diag = ErrorTemplate.invalid_attribute("text-case", raw, expected)
            raise InvalidAttributeError(diag, attribute="text-case", value=raw) from None
        if text_case in _CROSS_TOKEN_CASES:
            logger.warning("text-case '%s' is not supported; output left unchanged", raw)
        return cls(text_case)

    @property
    def enabled(self) -> bool:
        return self.text_case is not None and self.text_case not in _CROSS_TOKEN_CASES

    def transform_all(self, tokens: Iterable[Token]) -> Iterator[Token]:
        if self.text_case != TextCase.CAPITALIZE_FIRST:
            yield from map(self.transform, tokens)
            return
        pending = True
        for token in tokens:
            if pending and token.text:
                pending = False
                yield self.transform(token)
            else:
                yield token

    def transform(self, token: Token) -> Token:
        text = token.text
        match self.text_case:
            case TextCase.LOWERCASE:
                text = text.lower()
            case TextCase.UPPERCASE:
                text = text.upper()
            case TextCase.CAPITALIZE_FIRST:
                text = text[:1].upper() + text[1:]
            case TextCase.CAPITALIZE_ALL:
                text = " ".join(word[:1].upper() + word[1:] for word in text.split(" "))
        return Token(text, token.type)


def apply_behaviors(behaviors: Sequence[Behavior], render_fn: RenderFn, ctx: RenderContext) -> None:
    """Apply a stack of behaviors around render_fn.

    The first behavior is the outermost: it sees the output of all the
    others.
    """
    compose(behaviors, render_fn)(ctx)


def compose(behaviors: Sequence[Behavior], render_fn: RenderFn) -> RenderFn:
    """Wrap render_fn in behaviors, first behavior outermost."""
    wrapped = render_fn
    for behavior in reversed(behaviors):
        wrapped = _bind(behavior, wrapped)
    return wrapped


def _bind(behavior: Behavior, render_fn: RenderFn) -> RenderFn:
    def wrapped(ctx: RenderContext) -> None:
        behavior.apply(render_fn, ctx)

    return wrapped


def behaviors_from_attributes(attrs: Mapping[str, str]) -> tuple[Behavior, ...]:
    """Build the behavior stack declared by a node's attributes.

    Disabled behaviors are left out. Case is changed before periods are
    stripped.
    """
    stack: list[Behavior] = []
    strip = StripPeriods.from_attributes(attrs)
    if strip.enabled:
        stack.append(strip)
    case = TextCaseBehavior.from_attributes(attrs)
    if case.enabled:
        stack.append(case)
    return tuple(stack)
