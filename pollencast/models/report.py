"""Raw scraped report models, as produced by the report scraper."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class Allergen(StrEnum):
    CEDAR = "cedar"
    ELM = "elm"
    MOLD = "mold"


PRIMARY_ALLERGEN = Allergen.CEDAR


@dataclass(frozen=True)
class RawSeriesEntry:
    date: date
    count: int


@dataclass(frozen=True)
class RawReport:
    cedar: tuple[RawSeriesEntry, ...]
    elm: tuple[RawSeriesEntry, ...]
    mold: tuple[RawSeriesEntry, ...]
    levels: dict[Allergen, str]  # as published, "" when absent
    report_date: date
    fetched_at: datetime
    skipped_rows: int = 0

    def series(self, allergen: Allergen) -> tuple[RawSeriesEntry, ...]:
        return getattr(self, allergen.value)

    def level(self, allergen: Allergen) -> str:
        return self.levels.get(allergen, "")
