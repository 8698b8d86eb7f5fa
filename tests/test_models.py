"""Validation rules carried by the pydantic payload models."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from app.models import (
    FeedTypeCreate, MaintenanceRecord, MaintenanceRecordCreate, PetCreate, ScheduleCreate,
    WeightRecordCreate,
)

PERFORMED = datetime(2026, 10, 19, tzinfo=timezone.utc)


@pytest.mark.parametrize("time", ["00:00", "08:00", "19:59", "23:59"])
def test_schedule_accepts_24_hour_times(time):
    assert ScheduleCreate(time=time).time == time


@pytest.mark.parametrize("time", ["24:00", "25:00", "8:00", "08:60", "08:0", "08-00", "noon"])
def test_schedule_rejects_malformed_times(time):
    with pytest.raises(ValidationError):
        ScheduleCreate(time=time)


@pytest.mark.parametrize("value", [0.01, 4.2, 5.12, 10])
def test_weight_with_two_decimals_or_fewer(value):
    assert WeightRecordCreate(weight=value, measured_date=date(2026, 10, 19)).weight == value


@pytest.mark.parametrize("value", [5.123, 0, -1, 0.001])
def test_weight_rejected(value):
    with pytest.raises(ValidationError):
        WeightRecordCreate(weight=value, measured_date=date(2026, 10, 19))


def test_names_are_stripped_and_required():
    assert PetCreate(name="  Mochi ").name == "Mochi"
    with pytest.raises(ValidationError):
        PetCreate(name="   ")
    with pytest.raises(ValidationError):
        FeedTypeCreate(manufacturer="Acme", product_name="")


def test_blank_maintenance_notes_become_none():
    assert MaintenanceRecordCreate(type="litter_box", performed_at=PERFORMED, notes="  ").notes is None
    assert MaintenanceRecordCreate(type="litter_box", performed_at=PERFORMED, notes=" new bag ").notes == "new bag"


def test_maintenance_type_is_closed():
    with pytest.raises(ValidationError):
        MaintenanceRecordCreate(type="bath", performed_at=PERFORMED)


def test_maintenance_label():
    record = MaintenanceRecord(
        id=1, type="water_filter", performed_at=PERFORMED, notes=None, created_at=PERFORMED,
    )
    assert record.label == "Water filter change"
