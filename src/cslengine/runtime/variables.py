"""Closed tables of standard variables.

Each variable kind has an enumeration of its names and a static table
mapping every member to the ItemData attribute that holds its value.
The tables are exhaustive over their enumerations; tests check this
against the ItemData fields.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from operator import attrgetter
from types import MappingProxyType
from typing import Final

from cslengine.model.item import CslDate, CslName, ItemData

__all__ = [
    "DATE_VARIABLES",
    "NAME_VARIABLES",
    "STRING_VARIABLES",
    "DateVariable",
    "NameVariable",
    "StringVariable",
    "VariableKind",
    "variable_kind",
]


class VariableKind(StrEnum):
    """Kind of value a variable holds."""

    STRING = "string"
    DATE = "date"
    NAME = "name"


class StringVariable(StrEnum):
    """Standard string variables."""

    ABSTRACT = "abstract"
    ANNOTE = "annote"
    ARCHIVE = "archive"
    ARCHIVE_LOCATION = "archive_location"
    ARCHIVE_PLACE = "archive-place"
    AUTHORITY = "authority"
    CALL_NUMBER = "call-number"
    CHAPTER_NUMBER = "chapter-number"
    CITATION_LABEL = "citation-label"
    CITATION_NUMBER = "citation-number"
    COLLECTION_NUMBER = "collection-number"
    COLLECTION_TITLE = "collection-title"
    CONTAINER_TITLE = "container-title"
    CONTAINER_TITLE_SHORT = "container-title-short"
    DIMENSIONS = "dimensions"
    DOI = "DOI"
    EDITION = "edition"
    EVENT = "event"
    EVENT_PLACE = "event-place"
    FIRST_REFERENCE_NOTE_NUMBER = "first-reference-note-number"
    GENRE = "genre"
    ISBN = "ISBN"
    ISSN = "ISSN"
    ISSUE = "issue"
    JURISDICTION = "jurisdiction"
    KEYWORD = "keyword"
    LOCATOR = "locator"
    MEDIUM = "medium"
    NOTE = "note"
    NUMBER = "number"
    NUMBER_OF_PAGES = "number-of-pages"
    NUMBER_OF_VOLUMES = "number-of-volumes"
    ORIGINAL_PUBLISHER = "original-publisher"
    ORIGINAL_PUBLISHER_PLACE = "original-publisher-place"
    ORIGINAL_TITLE = "original-title"
    PAGE = "page"
    PAGE_FIRST = "page-first"
    PMCID = "PMCID"
    PMID = "PMID"
    PUBLISHER = "publisher"
    PUBLISHER_PLACE = "publisher-place"
    REFERENCES = "references"
    REVIEWED_TITLE = "reviewed-title"
    SCALE = "scale"
    SECTION = "section"
    SOURCE = "source"
    STATUS = "status"
    TITLE = "title"
    TITLE_SHORT = "title-short"
    URL = "URL"
    VERSION = "version"
    VOLUME = "volume"
    YEAR_SUFFIX = "year-suffix"


class DateVariable(StrEnum):
    """Standard date variables."""

    ACCESSED = "accessed"
    CONTAINER = "container"
    EVENT_DATE = "event-date"
    ISSUED = "issued"
    ORIGINAL_DATE = "original-date"
    SUBMITTED = "submitted"


class NameVariable(StrEnum):
    """Standard name variables."""

    AUTHOR = "author"
    COLLECTION_EDITOR = "collection-editor"
    COMPOSER = "composer"
    CONTAINER_AUTHOR = "container-author"
    DIRECTOR = "director"
    EDITOR = "editor"
    EDITORIAL_DIRECTOR = "editorial-director"
    ILLUSTRATOR = "illustrator"
    INTERVIEWER = "interviewer"
    ORIGINAL_AUTHOR = "original-author"
    RECIPIENT = "recipient"
    REVIEWED_AUTHOR = "reviewed-author"
    TRANSLATOR = "translator"


def _accessor(member: StrEnum) -> Callable[[ItemData], object]:
    # ItemData attributes are the snake_case member names
    return attrgetter(member.name.lower())


STRING_VARIABLES: Final[Mapping[str, Callable[[ItemData], str | None]]] = MappingProxyType(
    {member.value: _accessor(member) for member in StringVariable}  # type: ignore[misc]
)

DATE_VARIABLES: Final[Mapping[str, Callable[[ItemData], CslDate | None]]] = MappingProxyType(
    {member.value: _accessor(member) for member in DateVariable}  # type: ignore[misc]
)

NAME_VARIABLES: Final[
    Mapping[str, Callable[[ItemData], tuple[CslName, ...] | None]]
] = MappingProxyType(
    {member.value: _accessor(member) for member in NameVariable}  # type: ignore[misc]
)


def variable_kind(name: str) -> VariableKind | None:
    """Return the kind of a variable name, or None if no table knows it.

    The kinds are disjoint: a name belongs to at most one table.
    """
    if name in STRING_VARIABLES:
        return VariableKind.STRING
    if name in DATE_VARIABLES:
        return VariableKind.DATE
    if name in NAME_VARIABLES:
        return VariableKind.NAME
    return None
