"""Per-local-day view over the feeding, weight and maintenance collections."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Optional

from app.core.timeutils import SUNDAY, Month, as_utc, calendar_grid, to_local_calendar_day
from app.models import FeedingRecord, MaintenanceRecord, WeightRecord


@dataclass(frozen=True)
class DayData:
    feeding: list[FeedingRecord] = field(default_factory=list)
    weight: list[WeightRecord] = field(default_factory=list)
    maintenance: list[MaintenanceRecord] = field(default_factory=list)

    @property
    def first_weight(self) -> Optional[WeightRecord]:
        """The weight shown in a calendar cell."""
        return self.weight[0] if self.weight else None

    @property
    def is_empty(self) -> bool:
        return not (self.feeding or self.weight or self.maintenance)


@dataclass(frozen=True)
class CalendarCell:
    day: date
    in_month: bool
    data: DayData


def _feeding_key(record: FeedingRecord):
    return as_utc(record.feeding_time), record.id


def _maintenance_key(record: MaintenanceRecord):
    return as_utc(record.performed_at), record.id


def get_day_data(
    day: date,
    feeding: Iterable[FeedingRecord],
    weight: Iterable[WeightRecord],
    maintenance: Iterable[MaintenanceRecord],
    tz: tzinfo,
) -> DayData:
    """
    Records belonging to local day *day*.

    Feeding and maintenance entries are matched on their local calendar day
    in *tz* and sorted by time; weights are matched on ``measured_date``.
    Pure: no I/O, inputs are not modified.
    """
    return DayData(
        feeding=sorted(
            (r for r in feeding if to_local_calendar_day(r.feeding_time, tz) == day),
            key=_feeding_key,
        ),
        weight=[r for r in weight if r.measured_date == day],
        maintenance=sorted(
            (r for r in maintenance if to_local_calendar_day(r.performed_at, tz) == day),
            key=_maintenance_key,
        ),
    )


class CalendarIndex:
    """
    The three collections grouped by local day once, for per-cell lookups.

    ``index.get_day_data(day)`` returns the same result as the module-level
    ``get_day_data`` over the collections the index was built from.
    """

    def __init__(
        self,
        feeding: Iterable[FeedingRecord],
        weight: Iterable[WeightRecord],
        maintenance: Iterable[MaintenanceRecord],
        tz: tzinfo,
    ) -> None:
        self.tz = tz
        self._feeding: dict[date, list[FeedingRecord]] = defaultdict(list)
        self._weight: dict[date, list[WeightRecord]] = defaultdict(list)
        self._maintenance: dict[date, list[MaintenanceRecord]] = defaultdict(list)

        for record in feeding:
            self._feeding[to_local_calendar_day(record.feeding_time, tz)].append(record)
        for record in weight:
            self._weight[record.measured_date].append(record)
        for record in maintenance:
            self._maintenance[to_local_calendar_day(record.performed_at, tz)].append(record)

        for records in self._feeding.values():
            records.sort(key=_feeding_key)
        for records in self._maintenance.values():
            records.sort(key=_maintenance_key)

    def get_day_data(self, day: date) -> DayData:
        return DayData(
            feeding=list(self._feeding.get(day, ())),
            weight=list(self._weight.get(day, ())),
            maintenance=list(self._maintenance.get(day, ())),
        )


def build_month_view(month: Month, index: CalendarIndex, first_weekday: int = SUNDAY) -> list[CalendarCell]:
    """One cell per grid day. Adjacent-month days are bucketed like any other."""
    return [
        CalendarCell(day=day, in_month=month.contains(day), data=index.get_day_data(day))
        for day in calendar_grid(month, first_weekday)
    ]


def weeks(cells: list[CalendarCell]) -> list[list[CalendarCell]]:
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
