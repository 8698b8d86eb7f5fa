"""RecordStore backed directly by the aiosqlite services (no HTTP hop)."""

import logging
from datetime import date, datetime
from typing import Optional

import aiosqlite

from app.core.store import RemoteFailure
from app.core.timeutils import as_utc
from app.models import (
    FeedingRecordCreate, FeedingRecordUpdate, FeedTypeCreate, MaintenanceRecordCreate,
    MaintenanceRecordUpdate, PetCreate, PetUpdate, ScheduleCreate, ScheduleUpdate,
    WeightRecordCreate,
)
from app.services import (
    feed_type_service, feeding_service, maintenance_service, pet_service,
    schedule_service, weight_service,
)

logger = logging.getLogger(__name__)


def _found(value, what: str, record_id: int):
    if value is None or value is False:
        raise RemoteFailure(f"{what} {record_id} not found")
    return value


class LocalRecordStore:
    """
    Implements ``app.core.store.RecordStore`` on one open connection.

    Database errors and missing rows surface as ``RemoteFailure`` just like
    an HTTP error would through ``ui.api_client.ApiRecordStore``.
    """

    def __init__(self, db: aiosqlite.Connection) -> None:
        self.db = db

    async def _call(self, operation, *args):
        try:
            return await operation(self.db, *args)
        except aiosqlite.Error as exc:
            logger.warning("%s failed: %s", operation.__name__, exc)
            raise RemoteFailure(str(exc)) from exc

    # Feeding records

    async def fetch_feeding_records_in_range(self, start: datetime, end: datetime):
        return await self._call(feeding_service.get_feeding_records_by_range, start, end)

    async def fetch_all_feeding_records(self):
        return await self._call(feeding_service.get_all_feeding_records)

    async def fetch_latest_unconsumed_feeding_record(self):
        return await self._call(feeding_service.get_latest_unconsumed_feeding_record)

    async def create_feeding_record(self, feed_type_id: int, feeding_time: datetime):
        payload = FeedingRecordCreate(feed_type_id=feed_type_id, feeding_time=feeding_time)
        return await self._call(feeding_service.add_feeding_record, payload)

    async def update_feeding_consumption(self, record_id: int, consumed: Optional[bool]):
        record = await self._call(feeding_service.update_consumption, record_id, consumed)
        return _found(record, "Feeding record", record_id)

    async def update_feeding_record(self, record_id: int, feed_type_id: int, feeding_time: datetime):
        payload = FeedingRecordUpdate(feed_type_id=feed_type_id, feeding_time=feeding_time)
        record = await self._call(feeding_service.update_feeding_record, record_id, payload)
        return _found(record, "Feeding record", record_id)

    async def delete_feeding_record(self, record_id: int) -> None:
        _found(await self._call(feeding_service.delete_feeding_record, record_id), "Feeding record", record_id)

    # Feed types

    async def fetch_all_feed_types(self):
        return await self._call(feed_type_service.get_all_feed_types)

    async def create_feed_type(self, manufacturer: str, product_name: str):
        payload = FeedTypeCreate(manufacturer=manufacturer, product_name=product_name)
        return await self._call(feed_type_service.create_feed_type, payload)

    # Weights

    async def fetch_weight_records_in_range(self, start: datetime, end: datetime):
        return await self._call(
            weight_service.get_weight_records_by_date_range, as_utc(start).date(), as_utc(end).date()
        )

    async def fetch_weight_records_for_pet(self, pet_id: int):
        return await self._call(weight_service.get_weight_records_by_pet, pet_id)

    async def create_weight_record(self, pet_id: int, weight: float, measured_date: date):
        payload = WeightRecordCreate(weight=weight, measured_date=measured_date)
        return await self._call(weight_service.add_weight_record, pet_id, payload)

    # Pets

    async def fetch_all_pets(self):
        return await self._call(pet_service.get_all_pets)

    async def create_pet(self, name: str):
        return await self._call(pet_service.create_pet, PetCreate(name=name))

    async def update_pet(self, pet_id: int, name: str):
        return _found(await self._call(pet_service.update_pet, pet_id, PetUpdate(name=name)), "Pet", pet_id)

    async def delete_pet(self, pet_id: int) -> None:
        _found(await self._call(pet_service.delete_pet, pet_id), "Pet", pet_id)

    # Maintenance

    async def fetch_all_maintenance_records(self):
        return await self._call(maintenance_service.get_all_maintenance_records)

    async def create_maintenance_record(self, type: str, performed_at: datetime, notes: Optional[str] = None):
        payload = MaintenanceRecordCreate(type=type, performed_at=performed_at, notes=notes)
        return await self._call(maintenance_service.add_maintenance_record, payload)

    async def update_maintenance_record(
        self, record_id: int, type: str, performed_at: datetime, notes: Optional[str] = None
    ):
        payload = MaintenanceRecordUpdate(type=type, performed_at=performed_at, notes=notes)
        record = await self._call(maintenance_service.update_maintenance_record, record_id, payload)
        return _found(record, "Maintenance record", record_id)

    async def delete_maintenance_record(self, record_id: int) -> None:
        _found(
            await self._call(maintenance_service.delete_maintenance_record, record_id),
            "Maintenance record", record_id,
        )

    # Schedules

    async def fetch_all_schedules(self):
        return await self._call(schedule_service.get_all_schedules)

    async def create_schedule(self, time: str):
        return await self._call(schedule_service.create_schedule, ScheduleCreate(time=time))

    async def update_schedule(self, schedule_id: int, time: str):
        schedule = await self._call(schedule_service.update_schedule, schedule_id, ScheduleUpdate(time=time))
        return _found(schedule, "Schedule", schedule_id)

    async def toggle_schedule(self, schedule_id: int):
        return _found(await self._call(schedule_service.toggle_schedule, schedule_id), "Schedule", schedule_id)

    async def delete_schedule(self, schedule_id: int) -> None:
        _found(await self._call(schedule_service.delete_schedule, schedule_id), "Schedule", schedule_id)
