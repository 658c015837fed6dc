"""Tests for runtime/behavior.py: StripPeriods, TextCaseBehavior and composition."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cslengine.diagnostics import CslConfigurationError, DiagnosticCode, InvalidAttributeError
from cslengine.enums import TextCase, TokenType
from cslengine.model import ItemData, Locale, Style
from cslengine.runtime.behavior import (
    StripPeriods,
    TextCaseBehavior,
    TokenTransform,
    apply_behaviors,
    behaviors_from_attributes,
    compose,
    parse_bool_attribute,
)
from cslengine.runtime.render_context import RenderContext
from cslengine.runtime.tokens import Token


def _ctx() -> RenderContext:
    return RenderContext(Style(), Locale("en", {}), ItemData(id="x", title="A.B.C."))


def _emit(*tokens: Token):
    def render(ctx: RenderContext) -> None:
        for token in tokens:
            ctx.emit(token)

    return render


# ============================================================================
# BOOLEAN ATTRIBUTES
# ============================================================================


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("TRUE", True), (" True ", True), ("false", False), ("yes", False), ("", False), (None, False)],
)
def test_parse_bool_attribute(raw: str | None, expected: bool) -> None:
    assert parse_bool_attribute(raw) is expected


# ============================================================================
# STRIP PERIODS
# ============================================================================


class TestStripPeriods:
    """StripPeriods removes periods from every token."""

    def test_enabled_removes_periods_keeping_types(self) -> None:
        ctx = _ctx()
        StripPeriods(True).apply(
            _emit(Token("A.B."), Token(". ", TokenType.DELIMITER), Token("C.", TokenType.SUFFIX)),
            ctx,
        )
        assert ctx.result.tokens == (
            Token("AB"),
            Token(" ", TokenType.DELIMITER),
            Token("C", TokenType.SUFFIX),
        )

    def test_disabled_is_pass_through(self) -> None:
        ctx = _ctx()
        StripPeriods(False).apply(_emit(Token("A.B.")), ctx)
        assert ctx.result.tokens == (Token("A.B."),)

    def test_disabled_renders_directly_into_context(self) -> None:
        ctx = _ctx()
        seen: list[RenderContext] = []
        StripPeriods(False).apply(seen.append, ctx)
        assert seen == [ctx]

    def test_enabled_renders_into_child(self) -> None:
        ctx = _ctx()
        seen: list[RenderContext] = []
        StripPeriods(True).apply(seen.append, ctx)
        assert len(seen) == 1
        assert seen[0] is not ctx
        assert seen[0].counters is ctx.counters

    def test_empty_output_emits_nothing(self) -> None:
        ctx = _ctx()
        StripPeriods(True).apply(_emit(), ctx)
        assert ctx.result.is_empty

    def test_variable_lookups_inside_are_counted(self) -> None:
        ctx = _ctx()

        def render(inner: RenderContext) -> None:
            inner.emit(inner.get_string_variable("title") or "")

        StripPeriods(True).apply(render, ctx)
        assert str(ctx.result) == "ABC"
        assert ctx.variables_called == 1

    def test_from_attributes(self) -> None:
        assert StripPeriods.from_attributes({"strip-periods": "true"}).enabled
        assert not StripPeriods.from_attributes({"strip-periods": "false"}).enabled
        assert not StripPeriods.from_attributes({}).enabled

    @given(texts=st.lists(st.text(max_size=20), max_size=8))
    def test_no_periods_survive_and_other_chars_do(self, texts: list[str]) -> None:
        """PROPERTY: enabled output equals the input with every '.' removed."""
        ctx = _ctx()
        StripPeriods(True).apply(_emit(*(Token(t) for t in texts)), ctx)
        assert [t.text for t in ctx.result] == [t.replace(".", "") for t in texts]
        assert "." not in str(ctx.result)

    @given(texts=st.lists(st.text(max_size=20), max_size=8))
    def test_disabled_output_is_unchanged(self, texts: list[str]) -> None:
        """PROPERTY: disabled output equals the wrapped step's output."""
        ctx = _ctx()
        StripPeriods(False).apply(_emit(*(Token(t) for t in texts)), ctx)
        assert [t.text for t in ctx.result] == texts


# ============================================================================
# TEXT CASE
# ============================================================================


class TestTextCaseBehavior:
    """TextCaseBehavior changes case token by token."""

    @pytest.mark.parametrize(
        ("text_case", "expected"),
        [
            (TextCase.LOWERCASE, ["the unix system", "; ok"]),
            (TextCase.UPPERCASE, ["THE UNIX SYSTEM", "; OK"]),
            (TextCase.CAPITALIZE_FIRST, ["The UNIX system", "; ok"]),
            (TextCase.CAPITALIZE_ALL, ["The UNIX System", "; Ok"]),
        ],
    )
    def test_transform(self, text_case: TextCase, expected: list[str]) -> None:
        ctx = _ctx()
        TextCaseBehavior(text_case).apply(
            _emit(Token("the UNIX system"), Token("; ok", TokenType.DELIMITER)), ctx
        )
        assert [t.text for t in ctx.result] == expected
        assert [t.type for t in ctx.result] == [TokenType.TEXT, TokenType.DELIMITER]

    def test_unset_is_disabled(self) -> None:
        assert not TextCaseBehavior().enabled

    def test_capitalize_first_changes_only_the_first_token(self) -> None:
        ctx = _ctx()
        TextCaseBehavior(TextCase.CAPITALIZE_FIRST).apply(
            _emit(Token(""), Token("smith"), Token(", ", TokenType.DELIMITER), Token("jones")),
            ctx,
        )
        assert [t.text for t in ctx.result] == ["", "Smith", ", ", "jones"]
        assert str(ctx.result) == "Smith, jones"

    def test_capitalize_all_changes_every_token(self) -> None:
        ctx = _ctx()
        TextCaseBehavior(TextCase.CAPITALIZE_ALL).apply(
            _emit(Token("smith"), Token(", ", TokenType.DELIMITER), Token("jones")), ctx
        )
        assert str(ctx.result) == "Smith, Jones"

    @pytest.mark.parametrize("value", ["sentence", "title"])
    def test_cross_token_cases_pass_through(
        self, value: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="cslengine.runtime.behavior"):
            behavior = TextCaseBehavior.from_attributes({"text-case": value})
        assert not behavior.enabled
        assert value in caplog.text
        ctx = _ctx()
        behavior.apply(_emit(Token("the unix system")), ctx)
        assert str(ctx.result) == "the unix system"

    def test_from_attributes(self) -> None:
        behavior = TextCaseBehavior.from_attributes({"text-case": "uppercase"})
        assert behavior.text_case is TextCase.UPPERCASE
        assert TextCaseBehavior.from_attributes({}).text_case is None

    def test_invalid_value(self) -> None:
        with pytest.raises(InvalidAttributeError) as exc_info:
            TextCaseBehavior.from_attributes({"text-case": "shouting"})
        err = exc_info.value
        assert err.attribute == "text-case"
        assert err.value == "shouting"
        assert isinstance(err, CslConfigurationError)
        assert err.diagnostic is not None
        assert err.diagnostic.code is DiagnosticCode.INVALID_ATTRIBUTE_VALUE


# ============================================================================
# COMPOSITION
# ============================================================================


class TestComposition:
    """Stacks of behaviors."""

    def test_empty_stack_calls_render_fn(self) -> None:
        ctx = _ctx()
        apply_behaviors((), _emit(Token("a.b")), ctx)
        assert str(ctx.result) == "a.b"

    def test_first_behavior_is_outermost(self) -> None:
        seen: list[str] = []

        def render(ctx: RenderContext) -> None:
            ctx.emit("x")

        class Recording(TokenTransform):
            __slots__ = ("label",)

            def __init__(self, label: str) -> None:
                self.label = label

            @property
            def enabled(self) -> bool:
                return True

            def transform(self, token: Token) -> Token:
                seen.append(self.label)
                return Token(f"{self.label}({token.text})", token.type)

        ctx = _ctx()
        compose([Recording("outer"), Recording("inner")], render)(ctx)
        assert seen == ["inner", "outer"]
        assert str(ctx.result) == "outer(inner(x))"

    def test_strip_and_case_together(self) -> None:
        ctx = _ctx()
        apply_behaviors(
            (StripPeriods(True), TextCaseBehavior(TextCase.UPPERCASE)),
            _emit(Token("a.b.c.")),
            ctx,
        )
        assert str(ctx.result) == "ABC"

    def test_behaviors_from_attributes(self) -> None:
        stack = behaviors_from_attributes({"strip-periods": "true", "text-case": "lowercase"})
        assert stack == (StripPeriods(True), TextCaseBehavior(TextCase.LOWERCASE))

    def test_behaviors_from_attributes_drops_disabled(self) -> None:
        assert behaviors_from_attributes({"strip-periods": "false"}) == ()
        assert behaviors_from_attributes({"text-case": "title"}) == ()
