"""Social preview card payload derived from PollenData."""

from pollencast.config.schema import AppConfig
from pollencast.models.common import round_half_up
from pollencast.models.pollen import PollenData, ShareCard, SparkPoint
from pollencast.transform.severity import SeverityScale

SPARKLINE_DAYS = 7


def format_count(count: int) -> str:
    if count >= 1000:
        return f"{round_half_up(count / 100) / 10:.1f}k"
    return str(count)


def build_share_card(data: PollenData, config: AppConfig) -> ShareCard:
    # Description and color follow the count, the label follows the reading.
    scale = SeverityScale.from_config(config)
    computed = scale.level(data.current.count)
    return ShareCard(
        count=data.current.count,
        count_display=format_count(data.current.count),
        level=data.current.level,
        description=scale.description(computed),
        color=scale.color(computed),
        sparkline=tuple(
            SparkPoint(date=h.date, count=h.count)
            for h in data.history[-SPARKLINE_DAYS:]
        ),
        kind=data.source.kind,
    )
