"""Five-day pollen outlook synthesized from recent history.

The upstream report publishes observed counts only, so there is no forecast
source to consume. The outlook blends the latest count with the recent mean and
shapes each day with a bounded sinusoidal factor. It is a smoothed
extrapolation meant to look plausible, not a statistical forecast; treat the
numbers as an approximation.
"""

import math
from collections.abc import Sequence
from datetime import date, timedelta

from pollencast.config.schema import ForecastConfig
from pollencast.models.common import round_half_up
from pollencast.models.pollen import ForecastDay
from pollencast.transform.severity import SeverityScale

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Placeholder conditions; a weather provider is not consulted here.
DEFAULT_CONDITION = "Partly Cloudy"
DEFAULT_HUMIDITY = 50
DEFAULT_WIND_SPEED = 10


def day_factor(offset: int, config: ForecastConfig) -> float:
    """Bounded multiplier in [base - amplitude, base + amplitude]."""
    return config.factor_base + math.sin(offset * config.factor_frequency) * config.factor_amplitude


def synthesize(
    counts: Sequence[int],
    *,
    today: date,
    scale: SeverityScale,
    config: ForecastConfig,
) -> tuple[ForecastDay, ...]:
    """Build the outlook from a chronologically ordered count series.

    Returns an empty tuple when there is too little history to extrapolate.
    """
    if len(counts) < config.min_history:
        return ()

    recent = counts[-config.recent_window:]
    avg_recent = sum(recent) / len(recent)
    last_count = counts[-1]
    blended = last_count * config.last_weight + avg_recent * (1 - config.last_weight)

    days: list[ForecastDay] = []
    for i in range(1, config.days + 1):
        day = today + timedelta(days=i)
        count = max(0, round_half_up(blended * day_factor(i, config)))
        days.append(
            ForecastDay(
                date=day,
                day_name=DAY_NAMES[day.weekday()],
                level=scale.level(count),
                count=count,
                high_temp=55 + round_half_up(math.sin(i) * 10),
                low_temp=35 + round_half_up(math.cos(i) * 8),
                condition=DEFAULT_CONDITION,
                humidity=DEFAULT_HUMIDITY,
                wind_speed=DEFAULT_WIND_SPEED,
            )
        )
    return tuple(days)
