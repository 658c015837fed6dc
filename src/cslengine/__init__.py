"""cslengine - rendering engine for CSL-style citations and bibliographies.

Walks a style's render tree against one bibliographic item, resolving
variables, localized terms and macros, and collects the output as a typed
token stream that later stages can still post-process. Includes a
grammar-based parser for page fields that never fails.

Public API:
    RenderContext - Per-item render state (variables, terms, macros, output)
    Token, TokenBuffer - Typed output fragments
    StripPeriods, TextCaseBehavior - Behaviors wrapping a render step
    Locale, Term - Localized terms and style locale overrides
    Style, Macro, ItemData - Data consumed by the engine
    parse_page_range - Parse a page field into a PageRange

Exceptions:
    CslError - Base exception class
    CslReferenceError - Unknown macro, term form, term or variable

Submodules:
    cslengine.model - Items, locales and styles
    cslengine.runtime - Render context, tokens, behaviors, nodes
    cslengine.syntax - Page field lexer and parser
    cslengine.diagnostics - Error types and diagnostics
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import CslError, CslReferenceError
from .enums import TermForm, TextCase, TokenType
from .model import CslDate, CslName, ItemData, Locale, Macro, Style, Term
from .runtime import RenderContext, StripPeriods, TextCaseBehavior, Token, TokenBuffer
from .syntax import PageRange, parse_page_range

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cslengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

# CSL schema version the variable and term tables follow
__csl_version__ = "1.0.1"

__all__ = [
    "CslDate",
    "CslError",
    "CslName",
    "CslReferenceError",
    "ItemData",
    "Locale",
    "Macro",
    "PageRange",
    "RenderContext",
    "StripPeriods",
    "Style",
    "Term",
    "TermForm",
    "TextCase",
    "TextCaseBehavior",
    "Token",
    "TokenBuffer",
    "TokenType",
    "__csl_version__",
    "__version__",
    "parse_page_range",
]
