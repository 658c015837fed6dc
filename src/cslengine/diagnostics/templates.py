"""Error message templates.

One factory per DiagnosticCode, so messages stay consistent and testable.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Factories for every Diagnostic cslengine produces.

    Every exception that carries a Diagnostic gets it from here.
    """

    _DOCS_BASE = "https://docs.citationstyles.org/en/stable/specification.html"

    @staticmethod
    def macro_not_found(name: str) -> Diagnostic:
        """Macro referenced by the style is not defined.

        Args:
            name: The macro name that was not found

        Returns:
            Diagnostic for MACRO_NOT_FOUND
        """
        msg = f"Unknown macro: '{name}'"
        return Diagnostic(
            code=DiagnosticCode.MACRO_NOT_FOUND,
            message=msg,
            hint="Define the macro in the style or fix the reference",
            help_url=f"{ErrorTemplate._DOCS_BASE}#macro",
        )

    @staticmethod
    def term_form_not_found(form: str) -> Diagnostic:
        """Locale has no terms of the requested form.

        Args:
            form: The term form that was requested

        Returns:
            Diagnostic for TERM_FORM_NOT_FOUND
        """
        msg = f"Unknown term form: '{form}'"
        return Diagnostic(
            code=DiagnosticCode.TERM_FORM_NOT_FOUND,
            message=msg,
            hint="Check that the locale defines terms with this form",
            help_url=f"{ErrorTemplate._DOCS_BASE}#terms",
        )

    @staticmethod
    def term_not_found(name: str, form: str) -> Diagnostic:
        """Term is missing from a form bucket.

        Args:
            name: The term name
            form: The form bucket that was searched

        Returns:
            Diagnostic for TERM_NOT_FOUND
        """
        msg = f"Unknown term: '{name}' (form '{form}')"
        return Diagnostic(
            code=DiagnosticCode.TERM_NOT_FOUND,
            message=msg,
            hint=f"Add the term '{name}' to the locale or to the style's locale override",
            help_url=f"{ErrorTemplate._DOCS_BASE}#terms",
        )

    @staticmethod
    def variable_not_recognized(name: str) -> Diagnostic:
        """Variable name is not part of any variable table.

        Args:
            name: The variable name

        Returns:
            Diagnostic for VARIABLE_NOT_RECOGNIZED
        """
        msg = f"Unknown variable: '{name}'"
        return Diagnostic(
            code=DiagnosticCode.VARIABLE_NOT_RECOGNIZED,
            message=msg,
            hint="Use a standard variable name or disable strict variable lookup",
            help_url=f"{ErrorTemplate._DOCS_BASE}#appendix-iv-variables",
        )

    @staticmethod
    def invalid_attribute(attribute: str, value: str, expected: tuple[str, ...]) -> Diagnostic:
        """Node attribute has a value outside its allowed set.

        Args:
            attribute: Attribute name
            value: Value found in the node configuration
            expected: Allowed values

        Returns:
            Diagnostic for INVALID_ATTRIBUTE_VALUE
        """
        msg = f"Invalid value '{value}' for attribute '{attribute}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE_VALUE,
            message=msg,
            hint=f"Expected one of: {', '.join(expected)}",
        )

    @staticmethod
    def page_input_empty() -> Diagnostic:
        """Page field is empty."""
        return Diagnostic(
            code=DiagnosticCode.PAGE_INPUT_EMPTY,
            message="Page field is empty",
            span=SourceSpan(0, 0),
        )

    @staticmethod
    def page_input_too_large(size: int, limit: int) -> Diagnostic:
        """Page field exceeds the configured size limit.

        Args:
            size: Input length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for PAGE_INPUT_TOO_LARGE
        """
        msg = f"Page field length ({size:,}) exceeds maximum ({limit:,})"
        return Diagnostic(
            code=DiagnosticCode.PAGE_INPUT_TOO_LARGE,
            message=msg,
            hint="Configure max_input_size in PageParser to increase the limit",
        )

    @staticmethod
    def page_unrecognized(text: str, start: int, end: int) -> Diagnostic:
        """Lexer found text that is neither a page nor a separator.

        Args:
            text: The unrecognized text
            start: Start offset
            end: End offset (exclusive)

        Returns:
            Diagnostic for PAGE_UNRECOGNIZED_CHARACTER
        """
        msg = f"Unrecognized text '{text}' at position {start}"
        return Diagnostic(
            code=DiagnosticCode.PAGE_UNRECOGNIZED_CHARACTER,
            message=msg,
            span=SourceSpan(start, end),
        )

    @staticmethod
    def page_unexpected(found: str, expected: str, start: int, end: int) -> Diagnostic:
        """Parser found a lexeme it did not expect.

        Args:
            found: Text of the offending lexeme
            expected: Description of what the grammar allows here
            start: Start offset
            end: End offset (exclusive)

        Returns:
            Diagnostic for PAGE_UNEXPECTED_LEXEME
        """
        msg = f"Expected {expected}, found '{found}' at position {start}"
        return Diagnostic(
            code=DiagnosticCode.PAGE_UNEXPECTED_LEXEME,
            message=msg,
            span=SourceSpan(start, end),
        )

    @staticmethod
    def page_unexpected_end(expected: str, position: int) -> Diagnostic:
        """Input ended where the grammar requires more.

        Args:
            expected: Description of what the grammar requires
            position: Offset of the end of input

        Returns:
            Diagnostic for PAGE_UNEXPECTED_END
        """
        msg = f"Expected {expected}, found end of input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PAGE_UNEXPECTED_END,
            message=msg,
            span=SourceSpan(position, position),
        )
