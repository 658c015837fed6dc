"""Tests for the diagnostics package: codes, templates, formatter and errors."""

from __future__ import annotations

import json

import pytest

from cslengine.diagnostics import (
    CslConfigurationError,
    CslError,
    CslReferenceError,
    CslSyntaxError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidAttributeError,
    OutputFormat,
    SourceSpan,
    UnknownMacroError,
    UnknownTermError,
    UnknownTermFormError,
    UnknownVariableError,
)


class TestSourceSpan:
    def test_valid(self) -> None:
        span = SourceSpan(2, 5)
        assert (span.start, span.end) == (2, 5)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="start"):
            SourceSpan(-1, 0)

    def test_end_before_start(self) -> None:
        with pytest.raises(ValueError, match="end"):
            SourceSpan(3, 2)

    def test_length(self) -> None:
        assert SourceSpan(3, 3).length == 0
        assert SourceSpan(3, 5).length == 2


class TestTemplates:
    def test_macro_not_found(self) -> None:
        diag = ErrorTemplate.macro_not_found("author")
        assert diag.code is DiagnosticCode.MACRO_NOT_FOUND
        assert diag.message == "Unknown macro: 'author'"
        assert diag.help_url is not None

    def test_term_not_found_names_form(self) -> None:
        diag = ErrorTemplate.term_not_found("editor", "verb")
        assert "editor" in diag.message
        assert "verb" in diag.message

    def test_page_input_too_large(self) -> None:
        diag = ErrorTemplate.page_input_too_large(10_000, 4096)
        assert "10,000" in diag.message
        assert "4,096" in diag.message

    def test_str_is_message(self) -> None:
        diag = ErrorTemplate.term_form_not_found("symbol")
        assert str(diag) == diag.message

    def test_codes_are_grouped(self) -> None:
        reference = [c for c in DiagnosticCode if 1000 <= c.value < 2000]
        page = [c for c in DiagnosticCode if 3000 <= c.value < 4000]
        assert DiagnosticCode.MACRO_NOT_FOUND in reference
        assert all(c.name.startswith("PAGE_") for c in page)


class TestFormatter:
    def test_rust_format(self) -> None:
        diag = ErrorTemplate.page_unrecognized("?", 3, 4)
        output = DiagnosticFormatter().format(diag)
        assert output.splitlines()[0] == (
            "error[PAGE_UNRECOGNIZED_CHARACTER]: Unrecognized text '?' at position 3"
        )
        assert "--> position 3..4" in output

    def test_rust_format_underlines_source(self) -> None:
        diag = ErrorTemplate.page_unrecognized("ff", 3, 5)
        lines = DiagnosticFormatter().format(diag, "12 ff.").splitlines()
        assert lines[-2] == "   | 12 ff."
        assert lines[-1] == "   |    ^^"

    def test_span_outside_source_is_not_drawn(self) -> None:
        diag = ErrorTemplate.page_unrecognized("ff", 3, 5)
        assert "|" not in DiagnosticFormatter().format(diag, "12")

    def test_rust_format_with_hint_and_url(self) -> None:
        output = ErrorTemplate.macro_not_found("author").format_error()
        assert "= help: Define the macro" in output
        assert "= note: see https://" in output

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.macro_not_found("author")) == (
            "MACRO_NOT_FOUND: Unknown macro: 'author'"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.page_unexpected_end("a page number", 3)))
        assert data["code"] == "PAGE_UNEXPECTED_END"
        assert data["code_value"] == DiagnosticCode.PAGE_UNEXPECTED_END.value
        assert (data["start"], data["end"]) == (3, 3)
        assert data["severity"] == "error"

    def test_truncate_at(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, truncate_at=10)
        diag = Diagnostic(DiagnosticCode.PAGE_INPUT_EMPTY, "x" * 50)
        assert formatter.format(diag) == "PAGE_INPUT_EMPTY: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.page_input_empty(), ErrorTemplate.macro_not_found("a")]
        )
        assert output.split("\n\n") == [
            "PAGE_INPUT_EMPTY: Page field is empty",
            "MACRO_NOT_FOUND: Unknown macro: 'a'",
        ]


class TestErrors:
    def test_plain_message(self) -> None:
        err = CslError("boom")
        assert str(err) == "boom"
        assert err.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diag = ErrorTemplate.macro_not_found("author")
        err = UnknownMacroError(diag, name="author")
        assert err.diagnostic is diag
        assert str(err) == diag.format_error()

    @pytest.mark.parametrize(
        "err",
        [
            UnknownMacroError("m", name="m"),
            UnknownTermFormError("f", form="symbol"),
            UnknownTermError("t", name="t", form="long"),
            UnknownVariableError("v", name="v"),
        ],
    )
    def test_reference_errors(self, err: CslError) -> None:
        assert isinstance(err, CslReferenceError)
        assert not isinstance(err, CslConfigurationError)

    def test_configuration_and_syntax_errors(self) -> None:
        err = InvalidAttributeError("bad", attribute="text-case", value="x")
        assert isinstance(err, CslConfigurationError)
        assert (err.attribute, err.value) == ("text-case", "x")
        assert issubclass(CslSyntaxError, CslError)
        assert not issubclass(CslSyntaxError, CslReferenceError)
