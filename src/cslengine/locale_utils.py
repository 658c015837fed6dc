"""Locale utilities for BCP-47 tag handling.

Centralizes locale tag normalization used by the locale merge rules.
Style and locale files use BCP-47 tags (en-US), Babel uses POSIX
identifiers (en_US); tags are normalized at this boundary and then split
into language and territory with Babel's parser.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import NamedTuple

from babel.core import parse_locale

__all__ = [
    "LocaleTag",
    "normalize_locale",
    "split_locale_tag",
]

logger = logging.getLogger(__name__)


class LocaleTag(NamedTuple):
    """Language and territory parts of a locale tag."""

    language: str
    territory: str | None


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def split_locale_tag(locale_code: str) -> LocaleTag:
    """Split a locale tag into its language and territory.

    Babel lowercases the language and uppercases the territory, so
    "en-us" and "en_US" produce the same result. Tags Babel cannot parse
    (private-use or malformed tags) are kept whole as the language with
    no territory, which makes them match only themselves.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        LocaleTag with language and optional territory

    Example:
        >>> split_locale_tag("de-AT")
        LocaleTag(language='de', territory='AT')
        >>> split_locale_tag("fr")
        LocaleTag(language='fr', territory=None)
    """
    normalized = normalize_locale(locale_code)
    try:
        parts = parse_locale(normalized)
    except ValueError as e:
        logger.debug("Locale tag '%s' not parseable by Babel: %s", locale_code, e)
        return LocaleTag(normalized.lower(), None)
    return LocaleTag(parts[0], parts[1])
