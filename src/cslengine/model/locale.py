"""Localized terms and locale merging.

A Locale maps term forms to term names to Term values. Locales are
immutable: merging a style's locale override produces a new Locale.

Merge rule:
    The override applies when it has no language, or when its language
    equals the base's language and the override either has no territory
    or the same territory. Terms of the override replace or extend the
    base's terms form by form; base-only terms are kept.

Python 3.13+. Uses Babel for locale tag parsing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cslengine.constants import DEFAULT_TERM_FORM
from cslengine.diagnostics import ErrorTemplate, UnknownTermError, UnknownTermFormError
from cslengine.enums import TermForm
from cslengine.locale_utils import split_locale_tag

__all__ = ["Locale", "Term", "merge_locale"]

logger = logging.getLogger(__name__)

type TermTable = Mapping[TermForm, Mapping[str, Term]]


@dataclass(frozen=True, slots=True)
class Term:
    """A localized word or phrase.

    Attributes:
        singular: Singular form ("page")
        plural: Plural form ("pages"); defaults to the singular form
    """

    singular: str
    plural: str | None = None

    def __post_init__(self) -> None:
        if self.plural is None:
            object.__setattr__(self, "plural", self.singular)

    def get(self, plural: bool = False) -> str:
        """Return the plural or singular form."""
        if plural:
            return self.plural  # type: ignore[return-value]
        return self.singular


def _freeze(terms: Mapping[str, Mapping[str, Term]]) -> TermTable:
    return MappingProxyType(
        {TermForm(form): MappingProxyType(dict(bucket)) for form, bucket in terms.items()}
    )


@dataclass(frozen=True, slots=True, eq=False)
class Locale:
    """Immutable localization data.

    Term buckets are wrapped in read-only mapping proxies at construction,
    so a Locale can be shared between contexts and threads.

    Attributes:
        language: BCP-47 tag ("en-US"), or None for a language-neutral override
        terms: Term buckets keyed by form, then by term name

    Example:
        >>> base = Locale("en-US", {TermForm.LONG: {"page": Term("page", "pages")}})
        >>> override = Locale(None, {TermForm.LONG: {"page": Term("p.", "pp.")}})
        >>> base.merge(override).term("page", plural=True)
        'pp.'
    """

    language: str | None
    terms: TermTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", _freeze(self.terms))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self.language == other.language and self.terms_as_dict() == other.terms_as_dict()

    def __hash__(self) -> int:
        return hash((self.language, tuple(sorted(self.terms))))

    def terms_as_dict(self) -> dict[TermForm, dict[str, Term]]:
        """Return a mutable deep copy of the term buckets."""
        return {form: dict(bucket) for form, bucket in self.terms.items()}

    def term(self, name: str, form: TermForm = DEFAULT_TERM_FORM, plural: bool = False) -> str:
        """Look up a term.

        Args:
            name: Term name ("editor", "page", "and")
            form: Form bucket to search
            plural: Return the plural instead of the singular form

        Returns:
            The term text (never None, possibly empty)

        Raises:
            UnknownTermFormError: The locale has no bucket for form
            UnknownTermError: The bucket has no term called name
        """
        bucket = self.terms.get(form)
        if bucket is None:
            raise UnknownTermFormError(ErrorTemplate.term_form_not_found(form), form=str(form))
        found = bucket.get(name)
        if found is None:
            raise UnknownTermError(
                ErrorTemplate.term_not_found(name, form), name=name, form=str(form)
            )
        return found.get(plural)

    def accepts(self, override: Locale) -> bool:
        """Check whether override may be merged into this locale."""
        if override.language is None:
            return True
        if self.language is None:
            return False
        theirs = split_locale_tag(override.language)
        ours = split_locale_tag(self.language)
        if theirs.language != ours.language:
            return False
        return theirs.territory is None or theirs.territory == ours.territory

    def merge(self, override: Locale) -> Locale:
        """Return a new locale with override's terms layered over this one's.

        The applicability rule is not checked here; see merge_locale().
        The result keeps this locale's language.
        """
        merged = self.terms_as_dict()
        for form, bucket in override.terms.items():
            merged.setdefault(form, {}).update(bucket)
        return Locale(self.language, merged)


def merge_locale(base: Locale, override: Locale | None) -> Locale:
    """Merge a style's locale override into base when the merge rule allows it.

    Args:
        base: Locale selected for the render
        override: Locale declared by the style, if any

    Returns:
        The merged locale, or base itself when there is nothing to merge
    """
    if override is None:
        return base
    if not base.accepts(override):
        logger.debug(
            "Locale override '%s' does not apply to locale '%s'",
            override.language,
            base.language,
        )
        return base
    logger.debug("Merging locale override '%s' into locale '%s'", override.language, base.language)
    return base.merge(override)
