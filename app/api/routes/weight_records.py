"""Weight records of every pet over a date range (calendar view)."""

from datetime import date

from fastapi import APIRouter, HTTPException, Query

from app.api.dependencies import DbDep
from app.models.weight import WeightRecord
from app.services import weight_service

router = APIRouter(prefix="/weight-records", tags=["weights"])


@router.get("", response_model=list[WeightRecord])
async def list_weight_records(
    db: DbDep,
    start: date = Query(..., description="Range start (YYYY-MM-DD)"),
    end: date = Query(..., description="Range end (YYYY-MM-DD)"),
) -> list[WeightRecord]:
    if end < start:
        raise HTTPException(status_code=400, detail="'end' must be >= 'start'")
    return await weight_service.get_weight_records_by_date_range(db, start, end)
