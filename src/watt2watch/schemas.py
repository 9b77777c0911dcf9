from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

PLACEHOLDER = "\\N"


class TitleType(str, enum.Enum):
    tv_series = "tvSeries"
    movie = "movie"
    short = "short"
    tv_mini_series = "tvMiniSeries"
    tv_special = "tvSpecial"
    other = "other"

    @classmethod
    def parse(cls, raw: str) -> TitleType:
        """Map a raw ``titleType`` value onto the enumeration.

        Anything outside the known values (``tvEpisode``, ``video``, ...)
        becomes :attr:`TitleType.other`.
        """
        try:
            return cls(raw)
        except ValueError:
            return cls.other


BROWSABLE_TYPES = frozenset(
    {
        TitleType.tv_series,
        TitleType.movie,
        TitleType.short,
        TitleType.tv_mini_series,
        TitleType.tv_special,
    }
)


class TitleRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_id: str
    title_type: str
    primary_title: str
    original_title: str
    is_adult: bool = False
    start_year: int = 0
    end_year: int = 0
    runtime_minutes: int = 0
    genres: tuple[str, ...] = ("",)

    @property
    def kind(self) -> TitleType:
        return TitleType.parse(self.title_type)

    @property
    def is_browsable(self) -> bool:
        return self.kind in BROWSABLE_TYPES


class CatalogQuery(BaseModel):
    """Filter arguments for a chained catalog query.

    Unset fields are skipped. When ``title_type`` is given it is applied first
    (exact match, no type restriction); every other filter keeps only the five
    browsable title types.
    """

    title_type: str | None = None
    start_year: int | None = None
    end_year: int | None = None
    genres: list[str] | None = None
    title: str | None = None
    min_runtime: int | None = None
    max_runtime: int | None = None
    limit: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _fill_open_bounds(self) -> CatalogQuery:
        if self.start_year is not None and self.end_year is None:
            self.end_year = 9999
        elif self.end_year is not None and self.start_year is None:
            self.start_year = 1
        if self.min_runtime is not None and self.max_runtime is None:
            self.max_runtime = 2**31 - 1
        elif self.max_runtime is not None and self.min_runtime is None:
            self.min_runtime = 1
        return self
