"""Severity classifier: maps a pollen count to an ordered qualitative level."""

from pollencast.config.defaults import DEFAULT_SEVERITY_BANDS
from pollencast.config.schema import AppConfig, SeverityBand
from pollencast.models.pollen import SeverityLevel

# Published label spellings accepted as-is; anything else is ignored.
_PUBLISHED_LABELS = {
    "low": SeverityLevel.LOW,
    "medium": SeverityLevel.MEDIUM,
    "moderate": SeverityLevel.MEDIUM,
    "high": SeverityLevel.HIGH,
    "very high": SeverityLevel.VERY_HIGH,
    "severe": SeverityLevel.SEVERE,
    "extreme": SeverityLevel.SEVERE,
}


class SeverityScale:
    """Fixed threshold table. Bands are ordered and strictly increasing."""

    def __init__(self, bands: list[SeverityBand] | None = None):
        self.bands = list(bands or DEFAULT_SEVERITY_BANDS)
        self._by_level = {b.level: b for b in self.bands}

    @classmethod
    def from_config(cls, config: AppConfig) -> "SeverityScale":
        return cls(config.severity.bands)

    def level(self, count: int) -> SeverityLevel:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        result = self.bands[0].level
        for band in self.bands:
            if count >= band.min_count:
                result = band.level
            else:
                break
        return result

    def description(self, level: SeverityLevel) -> str:
        return self._by_level[SeverityLevel(level)].description

    def color(self, level: SeverityLevel) -> str:
        return self._by_level[SeverityLevel(level)].color


def parse_published_level(label: str | None) -> SeverityLevel | None:
    """Map a level string as printed in the report to a SeverityLevel.

    Returns None for missing or unrecognized labels.
    """
    if not label:
        return None
    normalized = " ".join(label.lower().split())
    return _PUBLISHED_LABELS.get(normalized)


DEFAULT_SCALE = SeverityScale()


def get_severity_level(count: int) -> SeverityLevel:
    return DEFAULT_SCALE.level(count)


def get_severity_description(level: SeverityLevel) -> str:
    return DEFAULT_SCALE.description(level)


def get_severity_color(level: SeverityLevel) -> str:
    return DEFAULT_SCALE.color(level)
