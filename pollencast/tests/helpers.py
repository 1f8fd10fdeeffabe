"""Builders shared by the test modules."""

from datetime import UTC, date, datetime, timedelta

from pollencast.models.report import Allergen, RawReport, RawSeriesEntry


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_report(
    counts: list[int],
    *,
    end: date = date(2026, 1, 17),
    levels: dict[Allergen, str] | None = None,
    elm: list[int] | None = None,
    mold: list[int] | None = None,
) -> RawReport:
    """Build a RawReport whose series end on `end`, one entry per day."""

    def series(values: list[int] | None) -> tuple[RawSeriesEntry, ...]:
        values = values or []
        start = end - timedelta(days=len(values) - 1)
        return tuple(
            RawSeriesEntry(start + timedelta(days=i), v) for i, v in enumerate(values)
        )

    return RawReport(
        cedar=series(counts),
        elm=series(elm),
        mold=series(mold),
        levels=levels or {a: "" for a in Allergen},
        report_date=end,
        fetched_at=datetime.combine(end, datetime.min.time(), tzinfo=UTC),
    )
