"""Shared constants for cslengine.

This module provides centralized configuration constants used across the
model, runtime and syntax packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Size constraints for parser input
- Defaults: Default term form used by term lookups
- Page literals: Separators used when normalising parsed page literals

Python 3.13+. Zero external dependencies.
"""

from cslengine.enums import TermForm

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_PAGE_INPUT_SIZE",
    # Defaults
    "DEFAULT_TERM_FORM",
    # Page literals
    "PAGE_LITERAL_RANGE_SEPARATOR",
    "PAGE_LITERAL_LIST_SEPARATOR",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum length of a raw page field accepted by the page parser.
# Longer inputs are returned as literals without being lexed.
MAX_PAGE_INPUT_SIZE: int = 4096

# ============================================================================
# DEFAULTS
# ============================================================================

# Term form used when a caller does not ask for a specific one.
DEFAULT_TERM_FORM: TermForm = TermForm.LONG

# ============================================================================
# PAGE LITERALS
# ============================================================================

# Separator placed between the endpoints of a parsed range ("365--375" -> "365-375").
PAGE_LITERAL_RANGE_SEPARATOR: str = "-"

# Separator placed between the items of a parsed page list ("1 & 5" -> "1, 5").
PAGE_LITERAL_LIST_SEPARATOR: str = ", "
