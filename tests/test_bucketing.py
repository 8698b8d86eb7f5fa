"""Tests for per-local-day bucketing of the calendar collections."""

from datetime import date, timezone

from app.core.bucketing import CalendarIndex, build_month_view, get_day_data, weeks
from app.core.timeutils import Month, calendar_grid, to_local_calendar_day
from factories import NEW_YORK, TOKYO, feeding, maintenance, tokyo, utc, weight

FEEDING = [
    feeding(3, tokyo(2026, 10, 19, 18, 0)),
    feeding(1, tokyo(2026, 10, 19, 0, 0)),       # local midnight
    feeding(2, tokyo(2026, 10, 18, 23, 59)),
    feeding(4, tokyo(2026, 10, 19, 7, 30)),
    feeding(5, tokyo(2026, 9, 30, 20, 0)),       # adjacent month
]
WEIGHT = [
    weight(1, 1, 4.2, date(2026, 10, 19)),
    weight(2, 2, 3.1, date(2026, 10, 19)),
    weight(3, 1, 4.1, date(2026, 10, 12)),
]
MAINTENANCE = [
    maintenance(2, tokyo(2026, 10, 19, 21, 0), "water_filter"),
    maintenance(1, tokyo(2026, 10, 19, 8, 0), "litter_box"),
    maintenance(3, tokyo(2026, 10, 20, 0, 30), "nail_clipping"),
]


def test_day_data_groups_by_local_day_and_sorts():
    data = get_day_data(date(2026, 10, 19), FEEDING, WEIGHT, MAINTENANCE, TOKYO)
    assert [r.id for r in data.feeding] == [1, 4, 3]
    assert [r.id for r in data.weight] == [1, 2]
    assert data.first_weight.id == 1
    assert [r.id for r in data.maintenance] == [1, 2]


def test_same_instants_fall_on_other_days_in_another_zone():
    data = get_day_data(date(2026, 10, 19), FEEDING, WEIGHT, MAINTENANCE, NEW_YORK)
    # 2026-10-19 00:00 JST is 2026-10-18 11:00 EDT
    assert [r.id for r in data.feeding] == [3]
    assert [r.id for r in data.maintenance] == [2, 3]


def test_every_returned_feeding_is_on_the_requested_day():
    for day in calendar_grid(Month(2026, 10)):
        data = get_day_data(day, FEEDING, WEIGHT, MAINTENANCE, TOKYO)
        times = [r.feeding_time for r in data.feeding]
        assert times == sorted(times)
        assert all(to_local_calendar_day(t, TOKYO) == day for t in times)


def test_empty_day():
    data = get_day_data(date(2026, 10, 1), FEEDING, WEIGHT, MAINTENANCE, TOKYO)
    assert data.is_empty
    assert data.first_weight is None


def test_bucketing_does_not_modify_inputs():
    feeding_copy = list(FEEDING)
    get_day_data(date(2026, 10, 19), FEEDING, WEIGHT, MAINTENANCE, TOKYO)
    CalendarIndex(FEEDING, WEIGHT, MAINTENANCE, TOKYO)
    assert FEEDING == feeding_copy


def test_index_matches_direct_bucketing():
    index = CalendarIndex(FEEDING, WEIGHT, MAINTENANCE, TOKYO)
    for day in calendar_grid(Month(2026, 10)):
        assert index.get_day_data(day) == get_day_data(day, FEEDING, WEIGHT, MAINTENANCE, TOKYO)


def test_ties_are_ordered_by_id():
    same_time = utc(2026, 10, 19, 0, 0)
    records = [feeding(9, same_time), feeding(8, same_time)]
    data = get_day_data(date(2026, 10, 19), records, [], [], timezone.utc)
    assert [r.id for r in data.feeding] == [8, 9]


def test_month_view_buckets_adjacent_days_too():
    cells = build_month_view(Month(2026, 10), CalendarIndex(FEEDING, WEIGHT, MAINTENANCE, TOKYO))
    assert len(cells) == 35
    by_day = {c.day: c for c in cells}
    september = by_day[date(2026, 9, 30)]
    assert not september.in_month
    assert [r.id for r in september.data.feeding] == [5]
    assert by_day[date(2026, 10, 19)].in_month
    assert len(weeks(cells)) == 5
    assert all(len(week) == 7 for week in weeks(cells))
