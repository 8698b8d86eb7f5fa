"""Endpoints for pets and their weight history."""

from typing import Optional

from fastapi import APIRouter, HTTPException, status

from app.api.dependencies import DbDep, TimezoneDep
from app.core.validation import InputError, ensure_not_future_date
from app.models.pet import Pet, PetCreate, PetUpdate
from app.models.weight import WeightRecord, WeightRecordCreate
from app.services import pet_service, weight_service

router = APIRouter(prefix="/pets", tags=["pets"])


async def _require_pet(db, pet_id: int) -> Pet:
    pet = await pet_service.get_pet(db, pet_id)
    if not pet:
        raise HTTPException(status_code=404, detail=f"Pet {pet_id} not found")
    return pet


@router.get("", response_model=list[Pet])
async def list_pets(db: DbDep) -> list[Pet]:
    return await pet_service.get_all_pets(db)


@router.post("", response_model=Pet, status_code=status.HTTP_201_CREATED)
async def create_pet(payload: PetCreate, db: DbDep) -> Pet:
    return await pet_service.create_pet(db, payload)


@router.get("/{pet_id}", response_model=Pet)
async def get_pet(pet_id: int, db: DbDep) -> Pet:
    return await _require_pet(db, pet_id)


@router.put("/{pet_id}", response_model=Pet)
async def update_pet(pet_id: int, payload: PetUpdate, db: DbDep) -> Pet:
    pet = await pet_service.update_pet(db, pet_id, payload)
    if not pet:
        raise HTTPException(status_code=404, detail=f"Pet {pet_id} not found")
    return pet


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(pet_id: int, db: DbDep) -> None:
    """Delete a pet together with all of its weight records."""
    deleted = await pet_service.delete_pet(db, pet_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Pet {pet_id} not found")


@router.get("/{pet_id}/weights", response_model=list[WeightRecord])
async def list_weights(pet_id: int, db: DbDep) -> list[WeightRecord]:
    """Weight history of a pet, oldest first."""
    await _require_pet(db, pet_id)
    return await weight_service.get_weight_records_by_pet(db, pet_id)


@router.get("/{pet_id}/weights/latest", response_model=Optional[WeightRecord])
async def latest_weight(pet_id: int, db: DbDep) -> Optional[WeightRecord]:
    await _require_pet(db, pet_id)
    return await weight_service.get_latest_weight_record(db, pet_id)


@router.post("/{pet_id}/weights", response_model=WeightRecord, status_code=status.HTTP_201_CREATED)
async def add_weight(pet_id: int, payload: WeightRecordCreate, db: DbDep, tz: TimezoneDep) -> WeightRecord:
    """Record a weight measurement. The date may not be after today (local)."""
    await _require_pet(db, pet_id)
    try:
        ensure_not_future_date(payload.measured_date, tz)
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await weight_service.add_weight_record(db, pet_id, payload)
