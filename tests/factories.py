"""Model builders and an in-memory RecordStore shared by the core tests."""

from __future__ import annotations

import asyncio
import itertools
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from app.core.store import RemoteFailure
from app.core.timeutils import as_utc
from app.models import (
    FeedingRecord, FeedingSchedule, FeedType, MaintenanceRecord, Pet, WeightRecord,
)

TOKYO = ZoneInfo("Asia/Tokyo")
NEW_YORK = ZoneInfo("America/New_York")

# 2026-10-19 12:00 in Tokyo
NOW = datetime(2026, 10, 19, 3, 0, tzinfo=timezone.utc)
CREATED = datetime(2026, 1, 1, tzinfo=timezone.utc)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def tokyo(*args) -> datetime:
    return datetime(*args, tzinfo=TOKYO)


def feed_type(id: int = 1, manufacturer: str = "Acme", product_name: str = "Chicken Pate") -> FeedType:
    return FeedType(id=id, manufacturer=manufacturer, product_name=product_name, created_at=CREATED)


def feeding(id: int, feeding_time: datetime, consumed: Optional[bool] = None, feed_type_id: int = 1) -> FeedingRecord:
    return FeedingRecord(
        id=id, feed_type_id=feed_type_id, feeding_time=feeding_time,
        consumed=consumed, created_at=CREATED,
    )


def pet(id: int, name: str = "Mochi") -> Pet:
    return Pet(id=id, name=name, created_at=CREATED)


def weight(id: int, pet_id: int, value: float, measured_date: date) -> WeightRecord:
    return WeightRecord(id=id, pet_id=pet_id, weight=value, measured_date=measured_date, created_at=CREATED)


def maintenance(id: int, performed_at: datetime, type: str = "litter_box", notes: Optional[str] = None) -> MaintenanceRecord:
    return MaintenanceRecord(id=id, type=type, performed_at=performed_at, notes=notes, created_at=CREATED)


def schedule(id: int, time: str, is_active: bool = True) -> FeedingSchedule:
    return FeedingSchedule(id=id, time=time, is_active=is_active, created_at=CREATED)


class FakeRecordStore:
    """
    RecordStore over plain lists.

    ``failing`` holds operation names that raise ``RemoteFailure``
    ("*" fails everything). ``calls`` logs every operation invoked.
    ``feeding_delays`` are popped one per range fetch and slept first,
    to make concurrent month loads resolve out of order.
    """

    def __init__(self) -> None:
        self.feed_types: list[FeedType] = []
        self.feeding: list[FeedingRecord] = []
        self.weights: list[WeightRecord] = []
        self.pets: list[Pet] = []
        self.maintenance: list[MaintenanceRecord] = []
        self.schedules: list[FeedingSchedule] = []
        self.calls: list[tuple[str, tuple]] = []
        self.failing: set[str] = set()
        self.feeding_delays: list[float] = []
        self._ids = itertools.count(100)

    def _enter(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name in self.failing or "*" in self.failing:
            raise RemoteFailure(f"{name} failed")

    def called(self, name: str) -> list[tuple]:
        return [args for op, args in self.calls if op == name]

    def _replace(self, items: list, new) -> None:
        for i, item in enumerate(items):
            if item.id == new.id:
                items[i] = new
                return
        raise RemoteFailure(f"{new.id} not found")

    @staticmethod
    def _get(items: list, item_id: int):
        for item in items:
            if item.id == item_id:
                return item
        raise RemoteFailure(f"{item_id} not found")

    # Feeding records

    async def fetch_feeding_records_in_range(self, start, end):
        self._enter("fetch_feeding_records_in_range", start, end)
        if self.feeding_delays:
            await asyncio.sleep(self.feeding_delays.pop(0))
        return [r for r in self.feeding if start <= as_utc(r.feeding_time) <= end]

    async def fetch_all_feeding_records(self):
        self._enter("fetch_all_feeding_records")
        return sorted(self.feeding, key=lambda r: as_utc(r.feeding_time), reverse=True)

    async def fetch_latest_unconsumed_feeding_record(self):
        self._enter("fetch_latest_unconsumed_feeding_record")
        pending = [r for r in self.feeding if r.consumed is None]
        return max(pending, key=lambda r: (as_utc(r.feeding_time), r.id)) if pending else None

    async def create_feeding_record(self, feed_type_id, feeding_time):
        self._enter("create_feeding_record", feed_type_id, feeding_time)
        record = feeding(next(self._ids), feeding_time, None, feed_type_id)
        self.feeding.append(record)
        return record

    async def update_feeding_consumption(self, record_id, consumed):
        self._enter("update_feeding_consumption", record_id, consumed)
        updated = self._get(self.feeding, record_id).model_copy(update={"consumed": consumed})
        self._replace(self.feeding, updated)
        return updated

    async def update_feeding_record(self, record_id, feed_type_id, feeding_time):
        self._enter("update_feeding_record", record_id, feed_type_id, feeding_time)
        updated = self._get(self.feeding, record_id).model_copy(
            update={"feed_type_id": feed_type_id, "feeding_time": feeding_time}
        )
        self._replace(self.feeding, updated)
        return updated

    async def delete_feeding_record(self, record_id):
        self._enter("delete_feeding_record", record_id)
        self.feeding.remove(self._get(self.feeding, record_id))

    # Feed types

    async def fetch_all_feed_types(self):
        self._enter("fetch_all_feed_types")
        return list(self.feed_types)

    async def create_feed_type(self, manufacturer, product_name):
        self._enter("create_feed_type", manufacturer, product_name)
        created = feed_type(next(self._ids), manufacturer, product_name)
        self.feed_types.append(created)
        return created

    # Weights

    async def fetch_weight_records_in_range(self, start, end):
        self._enter("fetch_weight_records_in_range", start, end)
        first, last = as_utc(start).date(), as_utc(end).date()
        return [w for w in self.weights if first <= w.measured_date <= last]

    async def fetch_weight_records_for_pet(self, pet_id):
        self._enter("fetch_weight_records_for_pet", pet_id)
        return sorted((w for w in self.weights if w.pet_id == pet_id), key=lambda w: w.measured_date)

    async def create_weight_record(self, pet_id, value, measured_date):
        self._enter("create_weight_record", pet_id, value, measured_date)
        created = weight(next(self._ids), pet_id, value, measured_date)
        self.weights.append(created)
        return created

    # Pets

    async def fetch_all_pets(self):
        self._enter("fetch_all_pets")
        return list(self.pets)

    async def create_pet(self, name):
        self._enter("create_pet", name)
        created = pet(next(self._ids), name)
        self.pets.append(created)
        return created

    async def update_pet(self, pet_id, name):
        self._enter("update_pet", pet_id, name)
        updated = self._get(self.pets, pet_id).model_copy(update={"name": name})
        self._replace(self.pets, updated)
        return updated

    async def delete_pet(self, pet_id):
        self._enter("delete_pet", pet_id)
        self.pets.remove(self._get(self.pets, pet_id))
        self.weights = [w for w in self.weights if w.pet_id != pet_id]

    # Maintenance

    async def fetch_all_maintenance_records(self):
        self._enter("fetch_all_maintenance_records")
        return list(self.maintenance)

    async def create_maintenance_record(self, type, performed_at, notes=None):
        self._enter("create_maintenance_record", type, performed_at, notes)
        created = maintenance(next(self._ids), performed_at, type, notes)
        self.maintenance.append(created)
        return created

    async def update_maintenance_record(self, record_id, type, performed_at, notes=None):
        self._enter("update_maintenance_record", record_id, type, performed_at, notes)
        updated = maintenance(record_id, performed_at, type, notes)
        self._replace(self.maintenance, updated)
        return updated

    async def delete_maintenance_record(self, record_id):
        self._enter("delete_maintenance_record", record_id)
        self.maintenance.remove(self._get(self.maintenance, record_id))

    # Schedules

    async def fetch_all_schedules(self):
        self._enter("fetch_all_schedules")
        return list(self.schedules)

    async def create_schedule(self, time):
        self._enter("create_schedule", time)
        created = schedule(next(self._ids), time)
        self.schedules.append(created)
        return created

    async def update_schedule(self, schedule_id, time):
        self._enter("update_schedule", schedule_id, time)
        updated = self._get(self.schedules, schedule_id).model_copy(update={"time": time})
        self._replace(self.schedules, updated)
        return updated

    async def toggle_schedule(self, schedule_id):
        self._enter("toggle_schedule", schedule_id)
        current = self._get(self.schedules, schedule_id)
        updated = current.model_copy(update={"is_active": not current.is_active})
        self._replace(self.schedules, updated)
        return updated

    async def delete_schedule(self, schedule_id):
        self._enter("delete_schedule", schedule_id)
        self.schedules.remove(self._get(self.schedules, schedule_id))
