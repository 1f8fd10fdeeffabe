"""Default severity table for Austin cedar counts (grains/m³)."""

from pollencast.config.schema import SeverityBand
from pollencast.models.pollen import SeverityLevel

DEFAULT_SEVERITY_BANDS: list[SeverityBand] = [
    SeverityBand(
        level=SeverityLevel.LOW,
        min_count=0,
        color="#22C55E",
        description="Minimal cedar pollen.",
    ),
    SeverityBand(
        level=SeverityLevel.MEDIUM,
        min_count=50,
        color="#EAB308",
        description="Sensitive people may notice symptoms.",
    ),
    SeverityBand(
        level=SeverityLevel.HIGH,
        min_count=500,
        color="#F97316",
        description="Most allergy sufferers will feel it.",
    ),
    SeverityBand(
        level=SeverityLevel.VERY_HIGH,
        min_count=1500,
        color="#EF4444",
        description="Heavy cedar fever conditions.",
    ),
    SeverityBand(
        level=SeverityLevel.SEVERE,
        min_count=5000,
        color="#A855F7",
        description="Extreme counts, limit outdoor exposure.",
    ),
]
