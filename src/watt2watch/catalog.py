"""In-memory title catalog and its filters.

Every filter takes an optional ``records`` sequence. When omitted the whole
catalog is used, otherwise the given records are filtered, which lets the
output of one filter feed the next::

    dramas = catalog.filter_by_genre(["Drama"])
    nineties = catalog.filter_by_year_range(1990, 1999, records=dramas)

Filters return new lists and keep the input order. All of them except
:meth:`Catalog.filter_by_type` only keep the browsable title types
(``tvSeries``, ``movie``, ``short``, ``tvMiniSeries``, ``tvSpecial``).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .data_io import parse_records, read_catalog_text
from .schemas import BROWSABLE_TYPES, TitleRecord, TitleType


def _fold(text: str) -> str:
    """Uppercase for case-insensitive comparison, one character at a time.

    Characters whose uppercase form is longer than one character (``ß`` ->
    ``SS``) are kept as they are, so only one-to-one case pairs compare equal.
    """
    upper = text.upper()
    if len(upper) == len(text):
        return upper
    return "".join(c if len(c.upper()) != 1 else c.upper() for c in text)


class Catalog:
    def __init__(self, records: Iterable[TitleRecord] = ()):
        self._records: tuple[TitleRecord, ...] = tuple(records)

    @classmethod
    def from_text(cls, content: str) -> Catalog:
        return cls(parse_records(content))

    @property
    def records(self) -> tuple[TitleRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TitleRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} records)"

    def _source(self, records: Iterable[TitleRecord] | None) -> Iterable[TitleRecord]:
        return self._records if records is None else records

    def _type_gate(self, records: Iterable[TitleRecord] | None) -> Iterator[TitleRecord]:
        return (rec for rec in self._source(records) if rec.kind in BROWSABLE_TYPES)

    def filter_by_year_range(
        self, start_year: int, end_year: int, records: Iterable[TitleRecord] | None = None
    ) -> list[TitleRecord]:
        """Titles whose start year lies in ``[start_year, end_year]``.

        Unknown years are stored as 0, so they only pass when ``start_year <= 0``.
        """
        return [rec for rec in self._type_gate(records) if start_year <= rec.start_year <= end_year]

    def filter_by_genre(
        self, genres: Iterable[str], records: Iterable[TitleRecord] | None = None
    ) -> list[TitleRecord]:
        """Titles with at least one genre equal to a requested one, ignoring case."""
        wanted = {_fold(g) for g in genres}
        if not wanted:
            return []
        return [
            rec
            for rec in self._type_gate(records)
            if any(_fold(g) in wanted for g in rec.genres)
        ]

    def filter_by_title(
        self, title: str, records: Iterable[TitleRecord] | None = None
    ) -> list[TitleRecord]:
        """Titles whose primary or original title contains ``title``, ignoring case."""
        needle = _fold(title)
        return [
            rec
            for rec in self._type_gate(records)
            if needle in _fold(rec.primary_title) or needle in _fold(rec.original_title)
        ]

    def filter_by_duration(
        self, min_duration: int, max_duration: int, records: Iterable[TitleRecord] | None = None
    ) -> list[TitleRecord]:
        # unknown runtimes are 0
        return [
            rec
            for rec in self._type_gate(records)
            if min_duration <= rec.runtime_minutes <= max_duration
        ]

    def filter_by_type(
        self, show_type: str | TitleType, records: Iterable[TitleRecord] | None = None
    ) -> list[TitleRecord]:
        """Titles whose raw ``title_type`` equals ``show_type`` exactly.

        Unlike the other filters this one is not limited to the browsable
        types, so ``"tvEpisode"`` or any other raw value can be queried.
        """
        wanted = show_type.value if isinstance(show_type, TitleType) else show_type
        return [rec for rec in self._source(records) if rec.title_type == wanted]


def parse_catalog(content: str) -> Catalog:
    return Catalog(parse_records(content))


def load_catalog_file(path: str | Path) -> Catalog:
    return parse_catalog(read_catalog_text(path))


__all__ = ["Catalog", "load_catalog_file", "parse_catalog"]
