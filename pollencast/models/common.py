"""Common types and helpers shared across models."""

import math
from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives.

    Python's round() uses banker's rounding; 2.5 must become 3 here.
    """
    return int(math.floor(value + 0.5))
