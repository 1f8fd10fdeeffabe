"""Tests for the normalizer and season statistics."""

from datetime import date

from pollencast.config.schema import AppConfig
from pollencast.models.pollen import SeverityLevel, SourceKind
from pollencast.models.report import Allergen
from pollencast.tests.helpers import make_report
from pollencast.transform.normalizer import compute_season_stats, normalize


class TestSeasonStats:
    def test_peak_avg_high_days(self, config: AppConfig):
        stats = compute_season_stats([100, 1600, 1700, 200], config.season)
        assert stats.peak_count == 1700
        assert stats.avg_count == 900
        assert stats.high_days == 2

    def test_streak_stops_at_first_day_below(self, config: AppConfig):
        stats = compute_season_stats([400, 600, 700, 300, 900], config.season)
        assert stats.current_streak == 1

    def test_streak_whole_series(self, config: AppConfig):
        stats = compute_season_stats([500, 600, 700], config.season)
        assert stats.current_streak == 3

    def test_streak_zero_when_latest_below(self, config: AppConfig):
        stats = compute_season_stats([900, 900, 499], config.season)
        assert stats.current_streak == 0

    def test_avg_rounds_half_up(self, config: AppConfig):
        assert compute_season_stats([1, 2], config.season).avg_count == 2

    def test_empty_history(self, config: AppConfig):
        stats = compute_season_stats([], config.season)
        assert (stats.peak_count, stats.avg_count, stats.high_days, stats.current_streak) == (0, 0, 0, 0)

    def test_season_window_from_config(self, config: AppConfig):
        stats = compute_season_stats([10], config.season)
        assert stats.season_start == date(2025, 12, 1)
        assert stats.season_end == date(2026, 2, 28)


class TestNormalize:
    def test_published_level_wins_for_current(self, config: AppConfig):
        raw = make_report(
            [800, 1000, 1200],
            levels={Allergen.CEDAR: "Very high", Allergen.ELM: "", Allergen.MOLD: ""},
        )
        data = normalize(raw, config=config)
        assert data.current.count == 1200
        assert data.current.level == SeverityLevel.VERY_HIGH
        # History levels are always computed
        assert data.history[-1].level == SeverityLevel.HIGH
        assert data.current.description == "Heavy cedar fever conditions."

    def test_unrecognized_level_falls_back_to_computed(self, config: AppConfig):
        raw = make_report(
            [800, 1000, 1200],
            levels={Allergen.CEDAR: "Off the charts"},
        )
        data = normalize(raw, config=config)
        assert data.current.level == SeverityLevel.HIGH

    def test_missing_level_uses_computed(self, config: AppConfig):
        data = normalize(make_report([10, 20, 30]), config=config)
        assert data.current.level == SeverityLevel.LOW
        assert data.current.description == "Minimal cedar pollen."

    def test_history_mirrors_cedar_series(self, config: AppConfig):
        raw = make_report([100, 1600, 1700, 200])
        data = normalize(raw, config=config)
        assert [h.count for h in data.history] == [100, 1600, 1700, 200]
        assert [h.date for h in data.history] == [e.date for e in raw.cedar]
        assert [h.level for h in data.history] == [
            SeverityLevel.MEDIUM,
            SeverityLevel.VERY_HIGH,
            SeverityLevel.VERY_HIGH,
            SeverityLevel.MEDIUM,
        ]
        assert data.season.peak_count == 1700
        assert data.season.avg_count == 900
        assert data.season.high_days == 2

    def test_allergens_latest_counts(self, config: AppConfig):
        raw = make_report([100, 200, 300], elm=[5, 7], mold=[])
        data = normalize(raw, config=config)
        assert data.allergens.cedar == 300
        assert data.allergens.elm == 7
        assert data.allergens.mold == 0
        assert [h.count for h in data.elm_history] == [5, 7]
        assert data.mold_history == ()

    def test_secondary_levels(self, config: AppConfig):
        raw = make_report(
            [100, 200, 300],
            elm=[5, 700],
            mold=[],
            levels={Allergen.MOLD: "Moderate"},
        )
        data = normalize(raw, config=config)
        assert data.elm_level == "High"
        assert data.mold_level == "Medium"

    def test_secondary_level_empty_when_no_data(self, config: AppConfig):
        data = normalize(make_report([100, 200, 300]), config=config)
        assert data.elm_level == ""

    def test_forecast_from_today(self, config: AppConfig):
        data = normalize(make_report([100, 200, 300]), config=config, today=date(2026, 2, 1))
        assert len(data.forecast) == 5
        assert data.forecast[0].date == date(2026, 2, 2)

    def test_short_history_has_no_forecast(self, config: AppConfig):
        data = normalize(make_report([100, 200]), config=config)
        assert data.forecast == ()

    def test_source_and_provenance(self, config: AppConfig):
        raw = make_report([100, 200, 300])
        data = normalize(raw, config=config)
        assert data.source.kind == SourceKind.LIVE
        assert data.source.name == config.source.name
        assert data.source.url == config.source.url
        assert data.source.report_date == raw.report_date
        assert data.last_updated == raw.fetched_at.isoformat()
        assert not data.is_synthetic

    def test_synthetic_kind_relabels_source(self, config: AppConfig):
        data = normalize(make_report([1, 2, 3]), config=config, kind=SourceKind.SYNTHETIC)
        assert data.is_synthetic
        assert data.source.name == config.source.synthetic_name

    def test_to_dict_wire_shape(self, config: AppConfig):
        payload = normalize(make_report([100, 200, 300]), config=config).to_dict()
        assert set(payload) >= {
            "current", "forecast", "history", "allergens",
            "lastUpdated", "season", "source",
        }
        assert payload["season"]["peakCount"] == 300
        assert payload["source"]["kind"] == "live"
        assert payload["forecast"][0]["dayName"]
        assert payload["history"][0]["date"] == "2026-01-15"
