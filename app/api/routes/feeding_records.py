"""Endpoints for feeding records."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import DbDep
from app.core.timeutils import as_utc
from app.models.feeding import (
    ConsumptionUpdate, FeedingRecord, FeedingRecordCreate, FeedingRecordUpdate,
)
from app.services import feed_type_service, feeding_service

router = APIRouter(prefix="/feeding-records", tags=["feeding-records"])


async def _require_feed_type(db, feed_type_id: int) -> None:
    if not await feed_type_service.get_feed_type(db, feed_type_id):
        raise HTTPException(status_code=400, detail=f"Feed type {feed_type_id} does not exist")


@router.get("", response_model=list[FeedingRecord])
async def list_feeding_records(
    db: DbDep,
    start: Optional[datetime] = Query(None, description="Range start, ISO-8601 instant (inclusive)"),
    end: Optional[datetime] = Query(None, description="Range end, ISO-8601 instant (inclusive)"),
) -> list[FeedingRecord]:
    """All feeding records (newest first), or those inside [start, end] (chronological)."""
    if start is None and end is None:
        return await feeding_service.get_all_feeding_records(db)
    if start is None or end is None:
        raise HTTPException(status_code=400, detail="'start' and 'end' must be given together")
    start, end = as_utc(start), as_utc(end)
    if end < start:
        raise HTTPException(status_code=400, detail="'end' must be >= 'start'")
    return await feeding_service.get_feeding_records_by_range(db, start, end)


@router.get("/latest-unconsumed", response_model=Optional[FeedingRecord])
async def latest_unconsumed(db: DbDep) -> Optional[FeedingRecord]:
    """The newest feeding whose consumption is not recorded yet, or null."""
    return await feeding_service.get_latest_unconsumed_feeding_record(db)


@router.get("/{record_id}", response_model=FeedingRecord)
async def get_feeding_record(record_id: int, db: DbDep) -> FeedingRecord:
    record = await feeding_service.get_feeding_record(db, record_id)
    if not record:
        raise HTTPException(status_code=404, detail=f"Feeding record {record_id} not found")
    return record


@router.post("", response_model=FeedingRecord, status_code=status.HTTP_201_CREATED)
async def create_feeding_record(payload: FeedingRecordCreate, db: DbDep) -> FeedingRecord:
    await _require_feed_type(db, payload.feed_type_id)
    return await feeding_service.add_feeding_record(db, payload)


@router.put("/{record_id}", response_model=FeedingRecord)
async def update_feeding_record(record_id: int, payload: FeedingRecordUpdate, db: DbDep) -> FeedingRecord:
    await _require_feed_type(db, payload.feed_type_id)
    record = await feeding_service.update_feeding_record(db, record_id, payload)
    if not record:
        raise HTTPException(status_code=404, detail=f"Feeding record {record_id} not found")
    return record


@router.patch("/{record_id}/consumption", response_model=FeedingRecord)
async def update_consumption(record_id: int, payload: ConsumptionUpdate, db: DbDep) -> FeedingRecord:
    """Set consumed to true, false, or null (not recorded)."""
    record = await feeding_service.update_consumption(db, record_id, payload.consumed)
    if not record:
        raise HTTPException(status_code=404, detail=f"Feeding record {record_id} not found")
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feeding_record(record_id: int, db: DbDep) -> None:
    deleted = await feeding_service.delete_feeding_record(db, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Feeding record {record_id} not found")
