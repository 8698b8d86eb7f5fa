"""The record-store operations the core depends on.

Implementations: ``ui.api_client.ApiRecordStore`` (HTTP) and
``app.services.store.LocalRecordStore`` (direct SQLite access).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from app.models import (
    FeedingRecord, FeedingSchedule, FeedType, MaintenanceRecord, MaintenanceType,
    Pet, WeightRecord,
)


class RemoteFailure(Exception):
    """A record-store call was rejected or never reached the store."""


class RecordStore(Protocol):
    """Every method raises ``RemoteFailure`` when the call does not succeed."""

    # Feeding records
    async def fetch_feeding_records_in_range(self, start: datetime, end: datetime) -> list[FeedingRecord]: ...
    async def fetch_all_feeding_records(self) -> list[FeedingRecord]: ...
    async def fetch_latest_unconsumed_feeding_record(self) -> Optional[FeedingRecord]: ...
    async def create_feeding_record(self, feed_type_id: int, feeding_time: datetime) -> FeedingRecord: ...
    async def update_feeding_consumption(self, record_id: int, consumed: Optional[bool]) -> FeedingRecord: ...
    async def update_feeding_record(self, record_id: int, feed_type_id: int, feeding_time: datetime) -> FeedingRecord: ...
    async def delete_feeding_record(self, record_id: int) -> None: ...

    # Feed types
    async def fetch_all_feed_types(self) -> list[FeedType]: ...
    async def create_feed_type(self, manufacturer: str, product_name: str) -> FeedType: ...

    # Weights and pets
    async def fetch_weight_records_in_range(self, start: datetime, end: datetime) -> list[WeightRecord]: ...
    async def fetch_weight_records_for_pet(self, pet_id: int) -> list[WeightRecord]: ...
    async def create_weight_record(self, pet_id: int, weight: float, measured_date: date) -> WeightRecord: ...
    async def fetch_all_pets(self) -> list[Pet]: ...
    async def create_pet(self, name: str) -> Pet: ...
    async def update_pet(self, pet_id: int, name: str) -> Pet: ...
    async def delete_pet(self, pet_id: int) -> None: ...

    # Maintenance
    async def fetch_all_maintenance_records(self) -> list[MaintenanceRecord]: ...
    async def create_maintenance_record(
        self, type: MaintenanceType, performed_at: datetime, notes: Optional[str] = None
    ) -> MaintenanceRecord: ...
    async def update_maintenance_record(
        self, record_id: int, type: MaintenanceType, performed_at: datetime, notes: Optional[str] = None
    ) -> MaintenanceRecord: ...
    async def delete_maintenance_record(self, record_id: int) -> None: ...

    # Schedules
    async def fetch_all_schedules(self) -> list[FeedingSchedule]: ...
    async def create_schedule(self, time: str) -> FeedingSchedule: ...
    async def update_schedule(self, schedule_id: int, time: str) -> FeedingSchedule: ...
    async def toggle_schedule(self, schedule_id: int) -> FeedingSchedule: ...
    async def delete_schedule(self, schedule_id: int) -> None: ...
