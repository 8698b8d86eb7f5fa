"""Conversions between stored UTC instants and the user's local calendar days.

Records are stored as UTC instants while people reason in local days.
Every piece of day bucketing goes through ``to_local_calendar_day`` with an
explicit timezone; nothing in this module reads the host's timezone.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import NamedTuple, Optional
from zoneinfo import ZoneInfo

# date.weekday() numbering
MONDAY = 0
SUNDAY = 6


def load_timezone(name: str) -> tzinfo:
    """Build a timezone from an IANA name (``Asia/Tokyo``) or a fixed offset (``UTC+09:00``)."""
    upper = name.strip().upper()
    if upper in ("UTC", "Z"):
        return timezone.utc
    if upper.startswith(("UTC+", "UTC-")):
        sign = 1 if upper[3] == "+" else -1
        hours, _, minutes = upper[4:].partition(":")
        return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes or 0)))
    return ZoneInfo(name.strip())


class Month(NamedTuple):
    """A calendar month in the user's local time."""

    year: int
    month: int

    @classmethod
    def of(cls, day: date) -> Month:
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def shift(self, months: int) -> Month:
        index = self.year * 12 + (self.month - 1) + months
        return Month(index // 12, index % 12 + 1)

    def previous(self) -> Month:
        return self.shift(-1)

    def next(self) -> Month:
        return self.shift(1)

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def today_local(tz: tzinfo, now: Optional[datetime] = None) -> date:
    """Today's date in *tz*."""
    return as_utc(now or now_utc()).astimezone(tz).date()


def as_utc(instant: datetime) -> datetime:
    """Return *instant* as an aware UTC datetime. Naive values are already UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def to_utc(value: datetime, tz: tzinfo) -> datetime:
    """Convert user input to a UTC instant. Naive values are wall-clock time in *tz*."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value.astimezone(timezone.utc)


def to_local_datetime(instant: datetime, tz: tzinfo) -> datetime:
    return as_utc(instant).astimezone(tz)


def to_local_calendar_day(instant: datetime, tz: tzinfo) -> date:
    """Local calendar date of a stored instant. Local midnight starts its own day."""
    return to_local_datetime(instant, tz).date()


def local_day_bounds(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """First and last UTC instants (inclusive) of a local day."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day, time.max, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def compute_fetch_window(month: Month, tz: tzinfo) -> tuple[datetime, datetime]:
    """
    UTC range (inclusive) to request from the record store for *month*.

    The range runs from the start of the local day before the month to the
    end of the local day after it, so any record whose local day falls in
    the month is inside even if the store filters in another offset
    (up to the ±14h extremes). Over-inclusion is expected; callers bucket
    by local day afterwards.
    """
    start, _ = local_day_bounds(month.first_day - timedelta(days=1), tz)
    _, end = local_day_bounds(month.last_day + timedelta(days=1), tz)
    return start, end


def calendar_grid(month: Month, first_weekday: int = SUNDAY) -> list[date]:
    """Every date shown on a month page: full weeks, adjacent-month days included."""
    first, last = month.first_day, month.last_day
    start = first - timedelta(days=(first.weekday() - first_weekday) % 7)
    end = last + timedelta(days=(first_weekday - 1 - last.weekday()) % 7)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def add_months(day: date, months: int) -> date:
    """Shift *day* by whole months, clamping to the end of shorter months."""
    target = Month.of(day).shift(months)
    return date(target.year, target.month, min(day.day, target.last_day.day))


def to_iso_utc(instant: datetime) -> str:
    """Fixed-width ISO-8601 UTC string; sorts lexicographically in time order."""
    return as_utc(instant).isoformat(timespec="microseconds")


def parse_instant(value: str) -> datetime:
    """Parse a stored ISO-8601 string into an aware UTC datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(value))
