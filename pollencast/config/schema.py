"""Pydantic v2 configuration schema with strict validation."""

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from pollencast.models.pollen import SeverityLevel

KXAN_REPORT_URL = "https://www.kxan.com/weather/allergy-forecast/"
DEFAULT_USER_AGENT = "pollencast/0.1.0"


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "KXAN / Allergy & Asthma Center of Georgetown"
    url: str = KXAN_REPORT_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=15.0, gt=0.0)
    synthetic_name: str = "Synthetic seasonal model"


class SeverityBand(BaseModel):
    model_config = {"extra": "forbid"}

    level: SeverityLevel
    min_count: int = Field(ge=0)
    color: str
    description: str


class SeverityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    bands: list[SeverityBand] = []

    @field_validator("bands")
    @classmethod
    def _bands_ordered(cls, bands: list[SeverityBand]) -> list[SeverityBand]:
        if not bands:
            return bands
        levels = [b.level for b in bands]
        if levels != list(SeverityLevel):
            raise ValueError(
                "bands must list every severity level once, in ascending order"
            )
        if bands[0].min_count != 0:
            raise ValueError("first severity band must start at 0")
        for prev, cur in zip(bands, bands[1:]):
            if cur.min_count <= prev.min_count:
                raise ValueError(
                    f"min_count must be strictly increasing: "
                    f"{prev.level}={prev.min_count}, {cur.level}={cur.min_count}"
                )
        return bands


class SeasonConfig(BaseModel):
    model_config = {"extra": "forbid"}

    season_start: date = date(2025, 12, 1)
    season_end: date = date(2026, 2, 28)
    high_day_threshold: int = Field(default=1500, ge=0)
    streak_threshold: int = Field(default=500, ge=0)
    history_days: int = Field(default=30, ge=1, le=366)

    @model_validator(mode="after")
    def _window_ordered(self) -> "SeasonConfig":
        if self.season_end < self.season_start:
            raise ValueError("season_end must not precede season_start")
        return self


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    days: int = Field(default=5, ge=1, le=14)
    min_history: int = Field(default=3, ge=1)
    recent_window: int = Field(default=5, ge=1)
    last_weight: float = Field(default=0.6, ge=0.0, le=1.0)
    factor_base: float = Field(default=0.8, gt=0.0)
    factor_amplitude: float = Field(default=0.4, ge=0.0)
    factor_frequency: float = Field(default=1.3, gt=0.0)

    @model_validator(mode="after")
    def _factor_non_negative(self) -> "ForecastConfig":
        if self.factor_amplitude > self.factor_base:
            raise ValueError("factor_amplitude must not exceed factor_base")
        return self


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    pollen_ttl_seconds: int = Field(default=7200, ge=1)
    share_card_ttl_seconds: int = Field(default=14400, ge=1)
    fetch_deadline_seconds: float = Field(default=20.0, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: SourceConfig = SourceConfig()
    severity: SeverityConfig = SeverityConfig()
    season: SeasonConfig = SeasonConfig()
    forecast: ForecastConfig = ForecastConfig()
    cache: CacheConfig = CacheConfig()
