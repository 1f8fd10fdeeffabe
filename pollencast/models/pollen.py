"""Canonical pollen data models served to callers."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class SeverityLevel(StrEnum):
    """Qualitative risk bands, declared in ascending order of risk."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"
    SEVERE = "Severe"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self]

    # str comparison would order "Very High" after "Severe"; compare by rank.
    def __lt__(self, other):
        if isinstance(other, SeverityLevel):
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, SeverityLevel):
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, SeverityLevel):
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, SeverityLevel):
            return self.rank >= other.rank
        return NotImplemented


_LEVEL_RANKS = {level: i for i, level in enumerate(SeverityLevel)}


class SourceKind(StrEnum):
    LIVE = "live"
    SYNTHETIC = "synthetic"


@dataclass(frozen=True)
class CurrentReading:
    count: int
    level: SeverityLevel
    description: str

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "level": self.level.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class HistoryEntry:
    date: date
    count: int
    level: SeverityLevel

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "count": self.count,
            "level": self.level.value,
        }


@dataclass(frozen=True)
class ForecastDay:
    """One day of the synthesized outlook. Not sourced from any forecast provider."""

    date: date
    day_name: str
    level: SeverityLevel
    count: int
    high_temp: int
    low_temp: int
    condition: str
    humidity: int
    wind_speed: int

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "dayName": self.day_name,
            "level": self.level.value,
            "count": self.count,
            "highTemp": self.high_temp,
            "lowTemp": self.low_temp,
            "condition": self.condition,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class AllergenCounts:
    cedar: int
    elm: int
    mold: int

    def to_dict(self) -> dict:
        return {"cedar": self.cedar, "elm": self.elm, "mold": self.mold}


@dataclass(frozen=True)
class SeasonStats:
    peak_count: int
    avg_count: int
    high_days: int
    current_streak: int
    season_start: date
    season_end: date

    def to_dict(self) -> dict:
        return {
            "peakCount": self.peak_count,
            "avgCount": self.avg_count,
            "highDays": self.high_days,
            "currentStreak": self.current_streak,
            "seasonStart": self.season_start.isoformat(),
            "seasonEnd": self.season_end.isoformat(),
        }


@dataclass(frozen=True)
class SourceInfo:
    name: str
    url: str
    report_date: date
    kind: SourceKind

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "url": self.url,
            "reportDate": self.report_date.isoformat(),
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class PollenData:
    current: CurrentReading
    forecast: tuple[ForecastDay, ...]
    history: tuple[HistoryEntry, ...]
    allergens: AllergenCounts
    last_updated: str  # ISO 8601
    season: SeasonStats
    source: SourceInfo
    elm_history: tuple[HistoryEntry, ...] = ()
    mold_history: tuple[HistoryEntry, ...] = ()
    elm_level: str = ""
    mold_level: str = ""

    @property
    def is_synthetic(self) -> bool:
        return self.source.kind == SourceKind.SYNTHETIC

    def to_dict(self) -> dict:
        return {
            "current": self.current.to_dict(),
            "forecast": [d.to_dict() for d in self.forecast],
            "history": [h.to_dict() for h in self.history],
            "allergens": self.allergens.to_dict(),
            "lastUpdated": self.last_updated,
            "season": self.season.to_dict(),
            "source": self.source.to_dict(),
            "elmHistory": [h.to_dict() for h in self.elm_history],
            "moldHistory": [h.to_dict() for h in self.mold_history],
            "elmLevel": self.elm_level,
            "moldLevel": self.mold_level,
        }


@dataclass(frozen=True)
class SparkPoint:
    date: date
    count: int


@dataclass(frozen=True)
class ShareCard:
    """Payload behind the social preview image."""

    count: int
    count_display: str  # "1.2k" style
    level: SeverityLevel
    description: str
    color: str
    sparkline: tuple[SparkPoint, ...]
    kind: SourceKind

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "countDisplay": self.count_display,
            "level": self.level.value,
            "description": self.description,
            "color": self.color,
            "sparkline": [
                {"date": p.date.isoformat(), "count": p.count}
                for p in self.sparkline
            ],
            "kind": self.kind.value,
        }
