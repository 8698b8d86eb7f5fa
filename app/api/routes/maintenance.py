"""Endpoints for maintenance records (water filter, litter, nails)."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import DbDep
from app.core.validation import InputError, ensure_not_future_instant
from app.models.maintenance import (
    MaintenanceRecord, MaintenanceRecordCreate, MaintenanceRecordUpdate, MaintenanceType,
)
from app.services import maintenance_service

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


def _check_not_future(payload: MaintenanceRecordCreate | MaintenanceRecordUpdate) -> None:
    try:
        ensure_not_future_instant(payload.performed_at)
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[MaintenanceRecord])
async def list_maintenance_records(
    db: DbDep,
    type: Optional[MaintenanceType] = Query(None, description="Only records of this type"),
) -> list[MaintenanceRecord]:
    """Every maintenance record, most recent first."""
    return await maintenance_service.get_all_maintenance_records(db, type)


@router.get("/{record_id}", response_model=MaintenanceRecord)
async def get_maintenance_record(record_id: int, db: DbDep) -> MaintenanceRecord:
    record = await maintenance_service.get_maintenance_record(db, record_id)
    if not record:
        raise HTTPException(status_code=404, detail=f"Maintenance record {record_id} not found")
    return record


@router.post("", response_model=MaintenanceRecord, status_code=status.HTTP_201_CREATED)
async def create_maintenance_record(payload: MaintenanceRecordCreate, db: DbDep) -> MaintenanceRecord:
    _check_not_future(payload)
    return await maintenance_service.add_maintenance_record(db, payload)


@router.put("/{record_id}", response_model=MaintenanceRecord)
async def update_maintenance_record(
    record_id: int, payload: MaintenanceRecordUpdate, db: DbDep
) -> MaintenanceRecord:
    _check_not_future(payload)
    record = await maintenance_service.update_maintenance_record(db, record_id, payload)
    if not record:
        raise HTTPException(status_code=404, detail=f"Maintenance record {record_id} not found")
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_maintenance_record(record_id: int, db: DbDep) -> None:
    deleted = await maintenance_service.delete_maintenance_record(db, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Maintenance record {record_id} not found")
