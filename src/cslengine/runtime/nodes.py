"""Minimal render nodes.

Text and Group are the two nodes every style is built from. They are
kept small: enough to drive the render context, the behaviors and the
variable counters end to end. Dates, names, choose and sorting are
rendered elsewhere.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cslengine.diagnostics import CslConfigurationError, ErrorTemplate, InvalidAttributeError
from cslengine.enums import TermForm, TokenType
from cslengine.model.style import RenderStep
from cslengine.runtime.behavior import (
    Behavior,
    apply_behaviors,
    behaviors_from_attributes,
    parse_bool_attribute,
)
from cslengine.runtime.render_context import RenderContext
from cslengine.runtime.tokens import TokenBuffer

__all__ = ["Group", "Text"]

_SOURCES = ("variable", "term", "macro", "value")


@dataclass(frozen=True, slots=True, kw_only=True)
class Text:
    """Renders one variable, term, macro or literal value.

    Exactly one of variable, term, macro and value is set. Affixes are
    emitted only when the content is not empty, and are not affected by
    the behaviors.
    """

    variable: str | None = None
    term: str | None = None
    macro: str | None = None
    value: str | None = None
    form: TermForm = TermForm.LONG
    plural: bool = False
    prefix: str = ""
    suffix: str = ""
    behaviors: tuple[Behavior, ...] = ()

    def __post_init__(self) -> None:
        given = [name for name in _SOURCES if getattr(self, name) is not None]
        if len(given) != 1:
            msg = f"Text needs exactly one of {', '.join(_SOURCES)}; got {given or 'none'}"
            raise CslConfigurationError(msg)

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, str]) -> Text:
        """Build a Text node from the attributes of a text element.

        Raises:
            InvalidAttributeError: If form or text-case has an unknown value
        """
        return cls(
            variable=attrs.get("variable"),
            term=attrs.get("term"),
            macro=attrs.get("macro"),
            value=attrs.get("value"),
            form=_parse_term_form(attrs.get("form")),
            plural=parse_bool_attribute(attrs.get("plural")),
            prefix=attrs.get("prefix", ""),
            suffix=attrs.get("suffix", ""),
            behaviors=behaviors_from_attributes(attrs),
        )

    def render(self, ctx: RenderContext) -> None:
        content = ctx.spawn_child()
        apply_behaviors(self.behaviors, self._render_content, content)
        if content.result.is_empty:
            return
        if self.prefix:
            ctx.emit(self.prefix, TokenType.PREFIX)
        ctx.emit(content.result)
        if self.suffix:
            ctx.emit(self.suffix, TokenType.SUFFIX)

    def _render_content(self, ctx: RenderContext) -> None:
        if self.variable is not None:
            text = ctx.get_string_variable(self.variable)
            if text:
                ctx.emit(text)
        elif self.term is not None:
            text = ctx.get_term(self.term, self.form, self.plural)
            if text:
                ctx.emit(text)
        elif self.macro is not None:
            ctx.get_macro(self.macro).render(ctx)
        elif self.value:
            ctx.emit(self.value)


def _parse_term_form(raw: str | None) -> TermForm:
    if raw is None:
        return TermForm.LONG
    try:
        return TermForm(raw)
    except ValueError:
        expected = tuple(f.value for f in TermForm)
        diag = ErrorTemplate.invalid_attribute("form", raw, expected)
        raise InvalidAttributeError(diag, attribute="form", value=raw) from None


@dataclass(frozen=True, slots=True)
class Group:
    """Renders its children separated by a delimiter.

    The group is suppressed when its children queried at least one
    variable and every queried variable was empty. Lookups made by nested
    groups and macros count as well, since the counters are shared by the
    whole context tree.
    """

    children: tuple[RenderStep, ...]
    delimiter: str = ""

    def render(self, ctx: RenderContext) -> None:
        called_before = ctx.variables_called
        empty_before = ctx.variables_empty

        parts: list[TokenBuffer] = []
        for child in self.children:
            sub = ctx.spawn_child()
            child.render(sub)
            if not sub.result.is_empty:
                parts.append(sub.result)

        called = ctx.variables_called - called_before
        empty = ctx.variables_empty - empty_before
        if not parts or (called > 0 and called == empty):
            return

        for i, part in enumerate(parts):
            if i > 0 and self.delimiter:
                ctx.emit(self.delimiter, TokenType.DELIMITER)
            ctx.emit(part)
