"""Bibliographic item record.

ItemData holds one attribute per standard CSL variable. Attribute names are
the variable names in snake_case ("container-title" -> container_title,
"DOI" -> doi). The mapping from variable names to attributes lives in
cslengine.runtime.variables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CslDate", "CslName", "ItemData"]


@dataclass(frozen=True, slots=True)
class CslDate:
    """Date value of a date variable.

    Attributes:
        date_parts: One (year, month, day) prefix per date; two entries for a range
        season: Season number or name, if given instead of a month
        circa: Date is approximate
        literal: Date given as free text
        raw: Unparsed date string as found in the source record
    """

    date_parts: tuple[tuple[int, ...], ...] = ()
    season: str | None = None
    circa: bool = False
    literal: str | None = None
    raw: str | None = None

    @property
    def is_range(self) -> bool:
        """True when the date has an end date."""
        return len(self.date_parts) > 1


@dataclass(frozen=True, slots=True)
class CslName:
    """One person or organisation in a name variable."""

    family: str | None = None
    given: str | None = None
    dropping_particle: str | None = None
    non_dropping_particle: str | None = None
    suffix: str | None = None
    literal: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemData:
    """A citation item: the record a RenderContext renders.

    Lent to the engine for the duration of one render and never modified.
    """

    id: str
    type: str = "article"

    # String variables
    abstract: str | None = None
    annote: str | None = None
    archive: str | None = None
    archive_location: str | None = None
    archive_place: str | None = None
    authority: str | None = None
    call_number: str | None = None
    chapter_number: str | None = None
    citation_label: str | None = None
    citation_number: str | None = None
    collection_number: str | None = None
    collection_title: str | None = None
    container_title: str | None = None
    container_title_short: str | None = None
    dimensions: str | None = None
    doi: str | None = None
    edition: str | None = None
    event: str | None = None
    event_place: str | None = None
    first_reference_note_number: str | None = None
    genre: str | None = None
    isbn: str | None = None
    issn: str | None = None
    issue: str | None = None
    jurisdiction: str | None = None
    keyword: str | None = None
    locator: str | None = None
    medium: str | None = None
    note: str | None = None
    number: str | None = None
    number_of_pages: str | None = None
    number_of_volumes: str | None = None
    original_publisher: str | None = None
    original_publisher_place: str | None = None
    original_title: str | None = None
    page: str | None = None
    page_first: str | None = None
    pmcid: str | None = None
    pmid: str | None = None
    publisher: str | None = None
    publisher_place: str | None = None
    references: str | None = None
    reviewed_title: str | None = None
    scale: str | None = None
    section: str | None = None
    source: str | None = None
    status: str | None = None
    title: str | None = None
    title_short: str | None = None
    url: str | None = None
    version: str | None = None
    volume: str | None = None
    year_suffix: str | None = None

    # Date variables
    accessed: CslDate | None = None
    container: CslDate | None = None
    event_date: CslDate | None = None
    issued: CslDate | None = None
    original_date: CslDate | None = None
    submitted: CslDate | None = None

    # Name variables
    author: tuple[CslName, ...] | None = None
    collection_editor: tuple[CslName, ...] | None = None
    composer: tuple[CslName, ...] | None = None
    container_author: tuple[CslName, ...] | None = None
    director: tuple[CslName, ...] | None = None
    editor: tuple[CslName, ...] | None = None
    editorial_director: tuple[CslName, ...] | None = None
    illustrator: tuple[CslName, ...] | None = None
    interviewer: tuple[CslName, ...] | None = None
    original_author: tuple[CslName, ...] | None = None
    recipient: tuple[CslName, ...] | None = None
    reviewed_author: tuple[CslName, ...] | None = None
    translator: tuple[CslName, ...] | None = None
