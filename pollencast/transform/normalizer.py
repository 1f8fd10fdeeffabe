"""Normalizer: raw scraped report -> canonical PollenData."""

import logging
from collections.abc import Sequence
from datetime import date

from pollencast.config.schema import AppConfig, SeasonConfig
from pollencast.models.common import round_half_up
from pollencast.models.pollen import (
    AllergenCounts,
    CurrentReading,
    HistoryEntry,
    PollenData,
    SeasonStats,
    SourceInfo,
    SourceKind,
)
from pollencast.models.report import Allergen, RawReport, RawSeriesEntry
from pollencast.transform.forecast import synthesize
from pollencast.transform.severity import SeverityScale, parse_published_level

logger = logging.getLogger(__name__)


def compute_season_stats(counts: Sequence[int], season: SeasonConfig) -> SeasonStats:
    """Peak, mean, high-day count and trailing streak over a count series."""
    if not counts:
        return SeasonStats(
            peak_count=0,
            avg_count=0,
            high_days=0,
            current_streak=0,
            season_start=season.season_start,
            season_end=season.season_end,
        )

    streak = 0
    for count in reversed(counts):
        if count < season.streak_threshold:
            break
        streak += 1

    return SeasonStats(
        peak_count=max(counts),
        avg_count=round_half_up(sum(counts) / len(counts)),
        high_days=sum(1 for c in counts if c >= season.high_day_threshold),
        current_streak=streak,
        season_start=season.season_start,
        season_end=season.season_end,
    )


def _history(series: Sequence[RawSeriesEntry], scale: SeverityScale) -> tuple[HistoryEntry, ...]:
    return tuple(
        HistoryEntry(date=e.date, count=e.count, level=scale.level(e.count))
        for e in series
    )


def _latest(series: Sequence[RawSeriesEntry]) -> int:
    return series[-1].count if series else 0


def _secondary_level(raw: RawReport, allergen: Allergen, scale: SeverityScale) -> str:
    series = raw.series(allergen)
    published = parse_published_level(raw.level(allergen))
    if published is not None:
        return published.value
    if not series:
        return ""
    return scale.level(series[-1].count).value


def normalize(
    raw: RawReport,
    *,
    config: AppConfig,
    today: date | None = None,
    kind: SourceKind = SourceKind.LIVE,
) -> PollenData:
    """Convert a scraped report into PollenData.

    The published cedar level wins over the computed one for the current
    reading only; history levels are always computed.
    """
    scale = SeverityScale.from_config(config)
    if today is None:
        today = raw.fetched_at.date()

    cedar = raw.cedar
    current_count = _latest(cedar)
    computed = scale.level(current_count)
    published = parse_published_level(raw.level(Allergen.CEDAR))
    if published is None and raw.level(Allergen.CEDAR):
        logger.info(
            "Ignoring unrecognized cedar level %r, using computed %s",
            raw.level(Allergen.CEDAR), computed,
        )
    level = published or computed

    counts = [e.count for e in cedar]
    source_name = (
        config.source.synthetic_name if kind == SourceKind.SYNTHETIC
        else config.source.name
    )

    return PollenData(
        current=CurrentReading(
            count=current_count,
            level=level,
            description=scale.description(level),
        ),
        forecast=synthesize(counts, today=today, scale=scale, config=config.forecast),
        history=_history(cedar, scale),
        allergens=AllergenCounts(
            cedar=current_count,
            elm=_latest(raw.elm),
            mold=_latest(raw.mold),
        ),
        last_updated=raw.fetched_at.isoformat(),
        season=compute_season_stats(counts, config.season),
        source=SourceInfo(
            name=source_name,
            url=config.source.url,
            report_date=raw.report_date,
            kind=kind,
        ),
        elm_history=_history(raw.elm, scale),
        mold_history=_history(raw.mold, scale),
        elm_level=_secondary_level(raw, Allergen.ELM, scale),
        mold_level=_secondary_level(raw, Allergen.MOLD, scale),
    )
