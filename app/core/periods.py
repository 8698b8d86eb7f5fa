"""Look-back periods for the weight history chart."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Literal, Optional

from app.core.timeutils import add_months
from app.models import WeightRecord

TimePeriod = Literal["1month", "3months", "6months", "1year", "all"]

PERIOD_LABELS: dict[str, str] = {
    "1month": "Last month",
    "3months": "Last 3 months",
    "6months": "Last 6 months",
    "1year": "Last year",
    "all": "All time",
}

_PERIOD_MONTHS = {"1month": 1, "3months": 3, "6months": 6, "1year": 12}

DEFAULT_PERIOD: TimePeriod = "6months"


def period_start(period: str, today: date) -> Optional[date]:
    """First date included in *period*; None means no lower bound."""
    if period == "all":
        return None
    return add_months(today, -_PERIOD_MONTHS.get(period, _PERIOD_MONTHS[DEFAULT_PERIOD]))


def filter_weights_by_period(records: Iterable[WeightRecord], period: str, today: date) -> list[WeightRecord]:
    start = period_start(period, today)
    if start is None:
        return list(records)
    return [r for r in records if r.measured_date >= start]
