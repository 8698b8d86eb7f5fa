"""Unit tests for pet_service and weight_service."""

from datetime import date

import pytest

from app.models.pet import PetCreate, PetUpdate
from app.models.weight import WeightRecordCreate
from app.services.pet_service import create_pet, delete_pet, get_all_pets, get_pet, update_pet
from app.services.weight_service import (
    add_weight_record,
    get_latest_weight_record,
    get_weight_record,
    get_weight_records_by_date_range,
    get_weight_records_by_pet,
)

pytestmark = pytest.mark.asyncio


async def _make_pet(db, name="Mochi"):
    return await create_pet(db, PetCreate(name=name))


def _weight(value: float, day: date) -> WeightRecordCreate:
    return WeightRecordCreate(weight=value, measured_date=day)


async def test_create_and_list_pets(db):
    await _make_pet(db, "Mochi")
    await _make_pet(db, "Kinako")
    assert [p.name for p in await get_all_pets(db)] == ["Mochi", "Kinako"]


async def test_rename_pet(db):
    pet = await _make_pet(db)
    renamed = await update_pet(db, pet.id, PetUpdate(name="Anko"))
    assert renamed.name == "Anko"
    assert await update_pet(db, 9999, PetUpdate(name="Anko")) is None


async def test_add_weight_record(db):
    pet = await _make_pet(db)
    record = await add_weight_record(db, pet.id, _weight(4.25, date(2026, 10, 19)))
    assert record.weight == 4.25
    assert record.measured_date == date(2026, 10, 19)
    assert record.pet.name == "Mochi"


async def test_get_weight_record_not_found(db):
    assert await get_weight_record(db, 9999) is None


async def test_records_by_pet_are_chronological(db):
    pet = await _make_pet(db)
    other = await _make_pet(db, "Kinako")
    await add_weight_record(db, pet.id, _weight(4.3, date(2026, 10, 15)))
    await add_weight_record(db, pet.id, _weight(4.2, date(2026, 10, 1)))
    await add_weight_record(db, other.id, _weight(3.0, date(2026, 10, 5)))

    records = await get_weight_records_by_pet(db, pet.id)

    assert [r.measured_date for r in records] == [date(2026, 10, 1), date(2026, 10, 15)]


async def test_latest_weight(db):
    pet = await _make_pet(db)
    assert await get_latest_weight_record(db, pet.id) is None
    await add_weight_record(db, pet.id, _weight(4.3, date(2026, 10, 15)))
    await add_weight_record(db, pet.id, _weight(4.2, date(2026, 10, 1)))
    assert (await get_latest_weight_record(db, pet.id)).weight == 4.3


async def test_date_range_covers_every_pet(db):
    mochi = await _make_pet(db)
    kinako = await _make_pet(db, "Kinako")
    await add_weight_record(db, mochi.id, _weight(4.2, date(2026, 9, 30)))
    await add_weight_record(db, kinako.id, _weight(3.0, date(2026, 10, 31)))
    await add_weight_record(db, mochi.id, _weight(4.4, date(2026, 11, 1)))

    records = await get_weight_records_by_date_range(db, date(2026, 9, 30), date(2026, 10, 31))

    assert [(r.pet.name, r.weight) for r in records] == [("Mochi", 4.2), ("Kinako", 3.0)]


async def test_deleting_a_pet_deletes_its_weights(db):
    pet = await _make_pet(db)
    other = await _make_pet(db, "Kinako")
    record = await add_weight_record(db, pet.id, _weight(4.2, date(2026, 10, 1)))
    kept = await add_weight_record(db, other.id, _weight(3.0, date(2026, 10, 1)))

    assert await delete_pet(db, pet.id) is True

    assert await get_pet(db, pet.id) is None
    assert await get_weight_record(db, record.id) is None
    assert await get_weight_record(db, kept.id) is not None
    assert await delete_pet(db, pet.id) is False
