"""Diagnostic system for cslengine errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CslConfigurationError,
    CslError,
    CslReferenceError,
    CslSyntaxError,
    InvalidAttributeError,
    UnknownMacroError,
    UnknownTermError,
    UnknownTermFormError,
    UnknownVariableError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CslConfigurationError",
    "CslError",
    "CslReferenceError",
    "CslSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidAttributeError",
    "OutputFormat",
    "SourceSpan",
    "UnknownMacroError",
    "UnknownTermError",
    "UnknownTermFormError",
    "UnknownVariableError",
]
