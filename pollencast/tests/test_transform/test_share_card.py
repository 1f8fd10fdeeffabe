"""Tests for the preview card payload."""

from pollencast.config.schema import AppConfig
from pollencast.models.pollen import SeverityLevel
from pollencast.models.report import Allergen
from pollencast.tests.helpers import make_report
from pollencast.transform.normalizer import normalize
from pollencast.transform.share_card import build_share_card, format_count


class TestFormatCount:
    def test_small(self):
        assert format_count(999) == "999"

    def test_thousands(self):
        assert format_count(1000) == "1.0k"
        assert format_count(2345) == "2.3k"

    def test_tenths_round_half_up(self):
        assert format_count(1250) == "1.3k"
        assert format_count(1249) == "1.2k"
        assert format_count(9950) == "10.0k"


class TestBuildShareCard:
    def test_from_pollen_data(self, config: AppConfig):
        raw = make_report(
            list(range(100, 1100, 100)),
            levels={Allergen.CEDAR: "Very High"},
        )
        card = build_share_card(normalize(raw, config=config), config)
        assert card.count == 1000
        assert card.count_display == "1.0k"
        assert card.level == SeverityLevel.VERY_HIGH
        # Color and description follow the count itself
        assert card.color == "#F97316"
        assert len(card.sparkline) == 7
        assert card.sparkline[-1].count == 1000
        assert card.to_dict()["kind"] == "live"
