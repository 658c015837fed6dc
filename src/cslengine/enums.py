"""Enumerations for cslengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so values read from a style or a
locale file compare equal to the members directly.

Python 3.13+.
"""

from enum import StrEnum


class TokenType(StrEnum):
    """Kind of a rendered token.

    StrEnum provides automatic string conversion: str(TokenType.TEXT) == "text"
    """

    TEXT = "text"
    """Ordinary rendered text."""

    PREFIX = "prefix"
    """Affix emitted before a node's content."""

    SUFFIX = "suffix"
    """Affix emitted after a node's content."""

    DELIMITER = "delimiter"
    """Separator emitted between the children of a group."""


class TermForm(StrEnum):
    """Grammatical or usage form of a localized term.

    StrEnum provides automatic string conversion: str(TermForm.VERB_SHORT) == "verb-short"
    """

    LONG = "long"
    """Default form: "editor"."""

    SHORT = "short"
    """Abbreviated form: "ed."."""

    VERB = "verb"
    """Verb form: "edited by"."""

    VERB_SHORT = "verb-short"
    """Abbreviated verb form: "ed."."""

    SYMBOL = "symbol"
    """Symbol form: "§"."""


class TextCase(StrEnum):
    """Value of the text-case attribute of a rendering node.

    StrEnum provides automatic string conversion: str(TextCase.LOWERCASE) == "lowercase"
    """

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    CAPITALIZE_FIRST = "capitalize-first"
    CAPITALIZE_ALL = "capitalize-all"
    SENTENCE = "sentence"
    TITLE = "title"


__all__ = [
    "TermForm",
    "TextCase",
    "TokenType",
]
