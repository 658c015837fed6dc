"""cslengine exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Reference errors signal a defect in the style or locale data and abort the
render of the current item. Syntax errors come from the page parser and are
always recovered internally.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CslError(Exception):
    """Base exception for all cslengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CslError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CslReferenceError(CslError):
    """A style or locale references something that does not exist.

    Unrecoverable for the current render: the style/locale pairing is
    malformed and must be fixed by the caller.
    """


class UnknownMacroError(CslReferenceError):
    """Macro name is absent from the style's macro mapping."""

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownTermFormError(CslReferenceError):
    """Locale has no bucket for the requested term form."""

    def __init__(self, message: str | Diagnostic, *, form: str) -> None:
        super().__init__(message)
        self.form = form


class UnknownTermError(CslReferenceError):
    """Term name is absent from an existing form bucket."""

    def __init__(self, message: str | Diagnostic, *, name: str, form: str) -> None:
        super().__init__(message)
        self.name = name
        self.form = form


class UnknownVariableError(CslReferenceError):
    """Variable name is not recognized by any variable table.

    Only raised by the typed accessors of a context created with
    ``strict_variables=True``.
    """

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class CslConfigurationError(CslError):
    """A rendering node was configured with invalid attributes."""


class InvalidAttributeError(CslConfigurationError):
    """Attribute value is outside the set the attribute accepts.

    Attributes:
        attribute: Attribute name
        value: Offending value
    """

    def __init__(self, message: str | Diagnostic, *, attribute: str, value: str) -> None:
        super().__init__(message)
        self.attribute = attribute
        self.value = value


class CslSyntaxError(CslError):
    """Page field could not be lexed or parsed.

    Never escapes parse_page_range(); the parser converts it into a
    literal page range.
    """
