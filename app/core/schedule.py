"""Which daily feeding slot comes next."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, time, tzinfo
from typing import Optional

from app.core.timeutils import to_local_datetime
from app.models import FeedingRecord, FeedingSchedule


def _active_times(schedules: Iterable[FeedingSchedule]) -> list[str]:
    return sorted(s.time for s in schedules if s.is_active)


def next_scheduled_time(schedules: Iterable[FeedingSchedule], now_local: datetime) -> Optional[str]:
    """First active slot after *now_local* today, else the first slot tomorrow."""
    times = _active_times(schedules)
    if not times:
        return None
    current = now_local.strftime("%H:%M")
    later = [t for t in times if t > current]
    return later[0] if later else times[0]


def next_unrecorded_time(
    schedules: Iterable[FeedingSchedule],
    records: Iterable[FeedingRecord],
    now_local: datetime,
    tz: tzinfo,
) -> Optional[str]:
    """
    Earliest active slot today with no feeding logged at that exact minute.

    Returns None when every slot of the day has a matching record.
    """
    today = now_local.date()
    recorded = {
        local.strftime("%H:%M")
        for local in (to_local_datetime(r.feeding_time, tz) for r in records)
        if local.date() == today
    }
    return next((t for t in _active_times(schedules) if t not in recorded), None)


def default_feeding_time(
    schedules: Iterable[FeedingSchedule],
    records: Iterable[FeedingRecord],
    now_local: datetime,
    tz: tzinfo,
) -> datetime:
    """Prefill for the feeding form: the next unrecorded slot today, else now."""
    slot = next_unrecorded_time(schedules, records, now_local, tz)
    if slot is None:
        return now_local.replace(second=0, microsecond=0)
    hour, minute = (int(part) for part in slot.split(":"))
    return datetime.combine(now_local.date(), time(hour, minute), tzinfo=now_local.tzinfo)
