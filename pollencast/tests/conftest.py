"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from pollencast.config.loader import default_config
from pollencast.config.schema import AppConfig
from pollencast.tests.helpers import FakeClock

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def config() -> AppConfig:
    """Return AppConfig with default severity bands."""
    return default_config()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def report_html() -> str:
    return (FIXTURE_DIR / "kxan_report.html").read_text(encoding="utf-8")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "source": {"url": "https://test-report.example.com/allergy/"},
        "cache": {"pollen_ttl_seconds": 600},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
