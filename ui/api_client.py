"""Lightweight HTTP client for the PetLog API."""

from __future__ import annotations

import asyncio
import os
from datetime import date, datetime
from typing import Any, Optional

import requests

from app.core.store import RemoteFailure
from app.core.timeutils import as_utc, to_iso_utc
from app.models import FeedingRecord, FeedingSchedule, FeedType, MaintenanceRecord, Pet, WeightRecord

API_BASE = os.getenv("PETLOG_API_URL", "http://localhost:8000")
TIMEOUT = 10  # seconds


def _get(path: str, params: dict | None = None) -> Any:
    resp = requests.get(f"{API_BASE}{path}", params=params, timeout=TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def _post(path: str, payload: dict) -> Any:
    resp = requests.post(f"{API_BASE}{path}", json=payload, timeout=TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def _request(method: str, path: str, payload: dict | None = None) -> Any:
    """PUT / PATCH / DELETE. Returns None for empty (204) responses."""
    resp = requests.request(method, f"{API_BASE}{path}", json=payload, timeout=TIMEOUT)
    resp.raise_for_status()
    return resp.json() if resp.content else None


# ── Feed types ─────────────────────────────────────────────────────────────


def list_feed_types() -> list[dict]:
    return _get("/feeds")


def create_feed_type(manufacturer: str, product_name: str) -> dict:
    return _post("/feeds", {"manufacturer": manufacturer, "product_name": product_name})


# ── Feeding records ────────────────────────────────────────────────────────


def list_feeding_records(start: Optional[datetime] = None, end: Optional[datetime] = None) -> list[dict]:
    params: dict = {}
    if start:
        params["start"] = to_iso_utc(start)
    if end:
        params["end"] = to_iso_utc(end)
    return _get("/feeding-records", params=params)


def latest_unconsumed_feeding_record() -> Optional[dict]:
    return _get("/feeding-records/latest-unconsumed")


def create_feeding_record(feed_type_id: int, feeding_time: datetime) -> dict:
    return _post("/feeding-records", {
        "feed_type_id": feed_type_id,
        "feeding_time": to_iso_utc(feeding_time),
    })


def update_feeding_record(record_id: int, feed_type_id: int, feeding_time: datetime) -> dict:
    return _request("PUT", f"/feeding-records/{record_id}", {
        "feed_type_id": feed_type_id,
        "feeding_time": to_iso_utc(feeding_time),
    })


def update_consumption(record_id: int, consumed: Optional[bool]) -> dict:
    return _request("PATCH", f"/feeding-records/{record_id}/consumption", {"consumed": consumed})


def delete_feeding_record(record_id: int) -> None:
    _request("DELETE", f"/feeding-records/{record_id}")


# ── Pets and weights ───────────────────────────────────────────────────────


def list_pets() -> list[dict]:
    return _get("/pets")


def create_pet(name: str) -> dict:
    return _post("/pets", {"name": name})


def update_pet(pet_id: int, name: str) -> dict:
    return _request("PUT", f"/pets/{pet_id}", {"name": name})


def delete_pet(pet_id: int) -> None:
    _request("DELETE", f"/pets/{pet_id}")


def list_pet_weights(pet_id: int) -> list[dict]:
    return _get(f"/pets/{pet_id}/weights")


def latest_pet_weight(pet_id: int) -> Optional[dict]:
    return _get(f"/pets/{pet_id}/weights/latest")


def add_pet_weight(pet_id: int, weight: float, measured_date: date) -> dict:
    return _post(f"/pets/{pet_id}/weights", {
        "weight": weight,
        "measured_date": measured_date.isoformat(),
    })


def list_weight_records(start: date, end: date) -> list[dict]:
    return _get("/weight-records", params={"start": start.isoformat(), "end": end.isoformat()})


# ── Maintenance ────────────────────────────────────────────────────────────


def list_maintenance_records(type: Optional[str] = None) -> list[dict]:
    params = {"type": type} if type else None
    return _get("/maintenance", params=params)


def _maintenance_payload(type: str, performed_at: datetime, notes: Optional[str]) -> dict:
    payload: dict = {"type": type, "performed_at": to_iso_utc(performed_at)}
    if notes:
        payload["notes"] = notes
    return payload


def create_maintenance_record(type: str, performed_at: datetime, notes: Optional[str] = None) -> dict:
    return _post("/maintenance", _maintenance_payload(type, performed_at, notes))


def update_maintenance_record(
    record_id: int, type: str, performed_at: datetime, notes: Optional[str] = None
) -> dict:
    return _request("PUT", f"/maintenance/{record_id}", _maintenance_payload(type, performed_at, notes))


def delete_maintenance_record(record_id: int) -> None:
    _request("DELETE", f"/maintenance/{record_id}")


# ── Schedules ──────────────────────────────────────────────────────────────


def list_schedules() -> list[dict]:
    return _get("/feeding-schedules")


def next_schedule() -> Optional[str]:
    return _get("/feeding-schedules/next").get("time")


def create_schedule(time: str) -> dict:
    return _post("/feeding-schedules", {"time": time})


def update_schedule(schedule_id: int, time: str) -> dict:
    return _request("PUT", f"/feeding-schedules/{schedule_id}", {"time": time})


def toggle_schedule(schedule_id: int) -> dict:
    return _request("PATCH", f"/feeding-schedules/{schedule_id}/toggle")


def delete_schedule(schedule_id: int) -> None:
    _request("DELETE", f"/feeding-schedules/{schedule_id}")


# ── Health check ───────────────────────────────────────────────────────────


def health() -> dict:
    return _get("/health")


# ── RecordStore adapter ────────────────────────────────────────────────────


class ApiRecordStore:
    """
    ``app.core.store.RecordStore`` over the HTTP API.

    The blocking ``requests`` calls run in worker threads; any
    ``requests.RequestException`` (connection error, timeout, 4xx/5xx)
    becomes ``RemoteFailure``.
    """

    async def _call(self, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except requests.RequestException as exc:
            raise RemoteFailure(str(exc)) from exc

    # Feeding records

    async def fetch_feeding_records_in_range(self, start: datetime, end: datetime) -> list[FeedingRecord]:
        rows = await self._call(list_feeding_records, start, end)
        return [FeedingRecord.model_validate(r) for r in rows]

    async def fetch_all_feeding_records(self) -> list[FeedingRecord]:
        rows = await self._call(list_feeding_records)
        return [FeedingRecord.model_validate(r) for r in rows]

    async def fetch_latest_unconsumed_feeding_record(self) -> Optional[FeedingRecord]:
        row = await self._call(latest_unconsumed_feeding_record)
        return FeedingRecord.model_validate(row) if row else None

    async def create_feeding_record(self, feed_type_id: int, feeding_time: datetime) -> FeedingRecord:
        return FeedingRecord.model_validate(await self._call(create_feeding_record, feed_type_id, feeding_time))

    async def update_feeding_consumption(self, record_id: int, consumed: Optional[bool]) -> FeedingRecord:
        return FeedingRecord.model_validate(await self._call(update_consumption, record_id, consumed))

    async def update_feeding_record(self, record_id: int, feed_type_id: int, feeding_time: datetime) -> FeedingRecord:
        row = await self._call(update_feeding_record, record_id, feed_type_id, feeding_time)
        return FeedingRecord.model_validate(row)

    async def delete_feeding_record(self, record_id: int) -> None:
        await self._call(delete_feeding_record, record_id)

    # Feed types

    async def fetch_all_feed_types(self) -> list[FeedType]:
        return [FeedType.model_validate(r) for r in await self._call(list_feed_types)]

    async def create_feed_type(self, manufacturer: str, product_name: str) -> FeedType:
        return FeedType.model_validate(await self._call(create_feed_type, manufacturer, product_name))

    # Weights

    async def fetch_weight_records_in_range(self, start: datetime, end: datetime) -> list[WeightRecord]:
        rows = await self._call(list_weight_records, as_utc(start).date(), as_utc(end).date())
        return [WeightRecord.model_validate(r) for r in rows]

    async def fetch_weight_records_for_pet(self, pet_id: int) -> list[WeightRecord]:
        return [WeightRecord.model_validate(r) for r in await self._call(list_pet_weights, pet_id)]

    async def create_weight_record(self, pet_id: int, weight: float, measured_date: date) -> WeightRecord:
        return WeightRecord.model_validate(await self._call(add_pet_weight, pet_id, weight, measured_date))

    # Pets

    async def fetch_all_pets(self) -> list[Pet]:
        return [Pet.model_validate(r) for r in await self._call(list_pets)]

    async def create_pet(self, name: str) -> Pet:
        return Pet.model_validate(await self._call(create_pet, name))

    async def update_pet(self, pet_id: int, name: str) -> Pet:
        return Pet.model_validate(await self._call(update_pet, pet_id, name))

    async def delete_pet(self, pet_id: int) -> None:
        await self._call(delete_pet, pet_id)

    # Maintenance

    async def fetch_all_maintenance_records(self) -> list[MaintenanceRecord]:
        return [MaintenanceRecord.model_validate(r) for r in await self._call(list_maintenance_records)]

    async def create_maintenance_record(
        self, type: str, performed_at: datetime, notes: Optional[str] = None
    ) -> MaintenanceRecord:
        row = await self._call(create_maintenance_record, type, performed_at, notes)
        return MaintenanceRecord.model_validate(row)

    async def update_maintenance_record(
        self, record_id: int, type: str, performed_at: datetime, notes: Optional[str] = None
    ) -> MaintenanceRecord:
        row = await self._call(update_maintenance_record, record_id, type, performed_at, notes)
        return MaintenanceRecord.model_validate(row)

    async def delete_maintenance_record(self, record_id: int) -> None:
        await self._call(delete_maintenance_record, record_id)

    # Schedules

    async def fetch_all_schedules(self) -> list[FeedingSchedule]:
        return [FeedingSchedule.model_validate(r) for r in await self._call(list_schedules)]

    async def create_schedule(self, time: str) -> FeedingSchedule:
        return FeedingSchedule.model_validate(await self._call(create_schedule, time))

    async def update_schedule(self, schedule_id: int, time: str) -> FeedingSchedule:
        return FeedingSchedule.model_validate(await self._call(update_schedule, schedule_id, time))

    async def toggle_schedule(self, schedule_id: int) -> FeedingSchedule:
        return FeedingSchedule.model_validate(await self._call(toggle_schedule, schedule_id))

    async def delete_schedule(self, schedule_id: int) -> None:
        await self._call(delete_schedule, schedule_id)
