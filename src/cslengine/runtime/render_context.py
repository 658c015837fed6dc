"""Render context for one item render.

Provides the state passed through the style tree while an item is being
rendered: the style, the (merged) locale, the item, a token buffer for the
output, and the variable usage counters.

Architecture:
    - VariableCounters: Mutable cell shared by every context of one tree
    - RenderContext: Explicit per-render state, with child contexts that
      share everything except the token buffer

Child contexts let a behavior inspect and transform the output of a
sub-render in isolation before re-emitting it into the parent, while every
variable lookup still counts towards the render-wide statistics used to
suppress empty groups.

Thread Safety:
    A context tree is created per item render and used by one thread.
    The counters are a plain aliasing convenience, not a cross-thread
    primitive. Style, Locale and ItemData are read-only and may be shared.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from cslengine.constants import DEFAULT_TERM_FORM
from cslengine.diagnostics import (
    ErrorTemplate,
    UnknownMacroError,
    UnknownVariableError,
)
from cslengine.enums import TermForm, TokenType
from cslengine.model.item import CslDate, CslName, ItemData
from cslengine.model.locale import Locale, merge_locale
from cslengine.model.style import Macro, Style
from cslengine.runtime.tokens import Token, TokenBuffer
from cslengine.runtime.variables import (
    DATE_VARIABLES,
    NAME_VARIABLES,
    STRING_VARIABLES,
    VariableKind,
    variable_kind,
)

__all__ = ["RenderContext", "VariableCounters", "VariableValue"]

type VariableValue = str | CslDate | tuple[CslName, ...]


@dataclass(slots=True)
class VariableCounters:
    """Variable usage statistics of one render tree.

    Invariant: 0 <= empty <= queried. Both values only ever grow.

    Attributes:
        queried: Number of variable lookups
        empty: Number of lookups that found no value or an empty string
    """

    queried: int = 0
    empty: int = 0

    def record(self, value: object) -> None:
        """Count one lookup that produced value.

        Only absent values and empty strings count as empty; an empty name
        list is a value.
        """
        self.queried += 1
        if value is None or value == "":
            self.empty += 1


class RenderContext:
    """Execution context for rendering one citation item.

    A root context is created per item by the orchestration layer. Nodes of
    the style tree query it for variables, terms and macros and emit tokens
    into it. spawn_child() creates a context that shares the style, locale,
    item and counters but collects its output in a fresh buffer.

    Example:
        >>> ctx = RenderContext(style, locale, ItemData(id="x", title="On Computable Numbers"))
        >>> _ = ctx.emit(ctx.get_string_variable("title") or "")
        >>> str(ctx.result)
        'On Computable Numbers'
        >>> (ctx.variables_called, ctx.variables_empty)
        (1, 0)

    Attributes:
        strict_variables: Typed accessors raise UnknownVariableError for
            names no variable table recognizes (default: False, such names
            resolve to None)
    """

    __slots__ = ("_counters", "_item", "_locale", "_result", "_style", "strict_variables")

    def __init__(
        self,
        style: Style,
        locale: Locale,
        item: ItemData,
        *,
        strict_variables: bool = False,
    ) -> None:
        """Create a root context.

        The style's locale override is merged into locale here, once per
        render tree; child contexts reuse the merged locale.

        Args:
            style: Style being rendered
            locale: Locale selected for the render
            item: Item to render
            strict_variables: Reject unrecognized names in typed accessors
        """
        merged = merge_locale(locale, style.locale)
        self._set_state(style, merged, item, VariableCounters(), strict_variables)

    @classmethod
    def _from_state(
        cls,
        style: Style,
        locale: Locale,
        item: ItemData,
        counters: VariableCounters,
        strict_variables: bool,
    ) -> RenderContext:
        """Build a context around existing state, skipping the locale merge."""
        ctx = cls.__new__(cls)
        ctx._set_state(style, locale, item, counters, strict_variables)
        return ctx

    def _set_state(
        self,
        style: Style,
        locale: Locale,
        item: ItemData,
        counters: VariableCounters,
        strict_variables: bool,
    ) -> None:
        self._style = style
        self._locale = locale
        self._item = item
        self._result = TokenBuffer()
        self._counters = counters
        self.strict_variables = strict_variables

    def spawn_child(self) -> RenderContext:
        """Create a child context with its own empty token buffer.

        Counter updates made through the child (or any of its descendants)
        are visible through this context and vice versa.
        """
        return RenderContext._from_state(
            self._style, self._locale, self._item, self._counters, self.strict_variables
        )

    @property
    def style(self) -> Style:
        return self._style

    @property
    def locale(self) -> Locale:
        """Localization data after merging the style's override."""
        return self._locale

    @property
    def item(self) -> ItemData:
        """The citation item being rendered."""
        return self._item

    @property
    def counters(self) -> VariableCounters:
        """Counters shared by the whole context tree."""
        return self._counters

    @property
    def variables_called(self) -> int:
        """Number of variable lookups made anywhere in this context tree."""
        return self._counters.queried

    @property
    def variables_empty(self) -> int:
        """Number of lookups that found no value.

        Always lower than or equal to variables_called.
        """
        return self._counters.empty

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_macro(self, name: str) -> Macro:
        """Get the macro with the given name.

        Raises:
            UnknownMacroError: If the style defines no such macro
        """
        macro = self._style.macros.get(name)
        if macro is None:
            raise UnknownMacroError(ErrorTemplate.macro_not_found(name), name=name)
        return macro

    def get_variable(self, name: str) -> VariableValue | None:
        """Get the value of a string, date, or name variable.

        Tries the string table, then the date table, then the name table.
        Unrecognized names resolve to None in every mode. Counts as one
        lookup.
        """
        value: VariableValue | None = None
        match variable_kind(name):
            case VariableKind.STRING:
                value = STRING_VARIABLES[name](self._item)
            case VariableKind.DATE:
                value = DATE_VARIABLES[name](self._item)
            case VariableKind.NAME:
                value = NAME_VARIABLES[name](self._item)
        self._counters.record(value)
        return value

    def get_string_variable(self, name: str) -> str | None:
        """Get the value of a string variable, or None if it is not set."""
        accessor = STRING_VARIABLES.get(name)
        value = accessor(self._item) if accessor is not None else None
        self._counters.record(value)
        if accessor is None:
            self._check_known(name)
        return value

    def get_date_variable(self, name: str) -> CslDate | None:
        """Get the value of a date variable, or None if it is not set."""
        accessor = DATE_VARIABLES.get(name)
        value = accessor(self._item) if accessor is not None else None
        self._counters.record(value)
        if accessor is None:
            self._check_known(name)
        return value

    def get_name_variable(self, name: str) -> tuple[CslName, ...] | None:
        """Get the value of a name variable, or None if it is not set."""
        accessor = NAME_VARIABLES.get(name)
        value = accessor(self._item) if accessor is not None else None
        self._counters.record(value)
        if accessor is None:
            self._check_known(name)
        return value

    def _check_known(self, name: str) -> None:
        # A name from another table is merely absent for this kind
        if self.strict_variables and variable_kind(name) is None:
            raise UnknownVariableError(ErrorTemplate.variable_not_recognized(name), name=name)

    def get_term(
        self,
        name: str,
        form: TermForm = DEFAULT_TERM_FORM,
        plural: bool = False,
    ) -> str:
        """Get a localized term.

        Args:
            name: Term name
            form: Term form (default: long)
            plural: Return the plural form

        Returns:
            The term's text (never None)

        Raises:
            UnknownTermFormError: If the locale has no terms of this form
            UnknownTermError: If the form has no term with this name
        """
        return self._locale.term(name, form, plural)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def emit(self, value: str | Token | TokenBuffer, type: TokenType = TokenType.TEXT) -> RenderContext:  # noqa: A002
        """Append text, a token, or all tokens of a buffer to this context's output.

        Args:
            value: Text (wrapped in a token of the given type), a token, or a buffer
            type: Token type for text values; ignored for tokens and buffers

        Returns:
            This context, so successive emissions can be chained
        """
        match value:
            case str():
                self._result.append_text(value, type)
            case Token():
                self._result.append_token(value)
            case TokenBuffer():
                self._result.append_buffer(value)
            case _:
                msg = f"Cannot emit value of type {value.__class__.__name__}"
                raise TypeError(msg)
        return self

    @property
    def result(self) -> TokenBuffer:
        """The tokens emitted into this context (by reference)."""
        return self._result
