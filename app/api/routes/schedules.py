"""Endpoints for daily feeding slots."""

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.api.dependencies import DbDep, TimezoneDep
from app.core.schedule import next_scheduled_time
from app.core.timeutils import now_utc, to_local_datetime
from app.models.schedule import FeedingSchedule, ScheduleCreate, ScheduleUpdate
from app.services import schedule_service

router = APIRouter(prefix="/feeding-schedules", tags=["schedules"])


class NextFeedingResponse(BaseModel):
    time: Optional[str]


@router.get("", response_model=list[FeedingSchedule])
async def list_schedules(db: DbDep) -> list[FeedingSchedule]:
    return await schedule_service.get_all_schedules(db)


@router.get("/next", response_model=NextFeedingResponse)
async def next_feeding(db: DbDep, tz: TimezoneDep) -> NextFeedingResponse:
    """Next active slot after the current local time, wrapping to tomorrow."""
    schedules = await schedule_service.get_all_schedules(db)
    return NextFeedingResponse(time=next_scheduled_time(schedules, to_local_datetime(now_utc(), tz)))


@router.post("", response_model=FeedingSchedule, status_code=status.HTTP_201_CREATED)
async def create_schedule(payload: ScheduleCreate, db: DbDep) -> FeedingSchedule:
    return await schedule_service.create_schedule(db, payload)


@router.put("/{schedule_id}", response_model=FeedingSchedule)
async def update_schedule(schedule_id: int, payload: ScheduleUpdate, db: DbDep) -> FeedingSchedule:
    schedule = await schedule_service.update_schedule(db, schedule_id, payload)
    if not schedule:
        raise HTTPException(status_code=404, detail=f"Schedule {schedule_id} not found")
    return schedule


@router.patch("/{schedule_id}/toggle", response_model=FeedingSchedule)
async def toggle_schedule(schedule_id: int, db: DbDep) -> FeedingSchedule:
    """Pause or resume a slot."""
    schedule = await schedule_service.toggle_schedule(db, schedule_id)
    if not schedule:
        raise HTTPException(status_code=404, detail=f"Schedule {schedule_id} not found")
    return schedule


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(schedule_id: int, db: DbDep) -> None:
    deleted = await schedule_service.delete_schedule(db, schedule_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Schedule {schedule_id} not found")
