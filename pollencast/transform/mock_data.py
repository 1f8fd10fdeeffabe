"""Deterministic synthetic pollen data shaped like an Austin cedar season.

Used as the fallback when the live report cannot be fetched or parsed, and
usable on its own for local development. Output depends only on the date.
"""

import math
from datetime import UTC, date, datetime, time, timedelta

from pollencast.config.loader import default_config
from pollencast.config.schema import AppConfig
from pollencast.models.common import round_half_up
from pollencast.models.pollen import PollenData, SourceKind
from pollencast.models.report import Allergen, RawReport, RawSeriesEntry
from pollencast.transform.normalizer import normalize

# (month, day) of the seasonal peak, peak count, spread in days, floor
CEDAR_CURVE = ((1, 15), 4500, 21.0, 5)
ELM_CURVE = ((2, 20), 600, 18.0, 2)
MOLD_BASE = 1550
MOLD_SWING = 650


def _days_from_peak(day: date, month: int, dom: int) -> int:
    """Signed distance to the nearest occurrence of month/day."""
    candidates = [date(day.year + y, month, dom) for y in (-1, 0, 1)]
    return min(((day - c).days for c in candidates), key=abs)


def _oscillation(day: date, frequency: float) -> float:
    return 1 + 0.25 * math.sin(day.toordinal() * frequency)


def seasonal_count(day: date, curve: tuple, frequency: float = 0.9) -> int:
    (month, dom), peak, spread, floor = curve
    offset = _days_from_peak(day, month, dom)
    shape = math.exp(-0.5 * (offset / spread) ** 2)
    return floor + round_half_up(peak * shape * _oscillation(day, frequency))


def mold_count(day: date) -> int:
    return round_half_up(MOLD_BASE + MOLD_SWING * math.sin(day.toordinal() * 0.35))


def generate_mock_report(today: date, config: AppConfig) -> RawReport:
    """Synthetic report covering the configured history window ending today."""
    window = [
        today - timedelta(days=n)
        for n in range(config.season.history_days - 1, -1, -1)
    ]
    return RawReport(
        cedar=tuple(RawSeriesEntry(d, seasonal_count(d, CEDAR_CURVE)) for d in window),
        elm=tuple(RawSeriesEntry(d, seasonal_count(d, ELM_CURVE, 0.7)) for d in window),
        mold=tuple(RawSeriesEntry(d, mold_count(d)) for d in window),
        levels={a: "" for a in Allergen},
        report_date=today,
        fetched_at=datetime.combine(today, time(0), tzinfo=UTC),
    )


def generate_mock_pollen_data(
    today: date | None = None, config: AppConfig | None = None
) -> PollenData:
    if today is None:
        today = date.today()
    if config is None:
        config = default_config()
    report = generate_mock_report(today, config)
    return normalize(report, config=config, today=today, kind=SourceKind.SYNTHETIC)
