"""Output formatters for pollen data."""

import json

from pollencast.models.pollen import PollenData


def format_pollen_text(d: PollenData) -> str:
    """Plain text summary for the terminal."""
    source_label = "LIVE" if not d.is_synthetic else "SYNTHETIC"
    lines = [
        f"=== Austin Cedar Pollen ({source_label}) | Report {d.source.report_date} ===",
        f"Current: {d.current.count} grains/m³ ({d.current.level}) "
        f"- {d.current.description}",
        f"Elm: {d.allergens.elm} ({d.elm_level or 'n/a'}) | "
        f"Mold: {d.allergens.mold} ({d.mold_level or 'n/a'})",
        f"Season: peak {d.season.peak_count}, avg {d.season.avg_count}, "
        f"{d.season.high_days} high days, streak {d.season.current_streak}",
    ]
    if d.forecast:
        lines.append("Outlook (approximate):")
        for day in d.forecast:
            lines.append(f"  {day.day_name} {day.date}: {day.count} ({day.level})")
    else:
        lines.append("Outlook: not enough history")
    lines.append(f"Source: {d.source.name} | Updated {d.last_updated}")
    return "\n".join(lines)


def format_pollen_json(d: PollenData) -> str:
    """JSON payload for programmatic consumption."""
    return json.dumps(d.to_dict(), indent=2)
