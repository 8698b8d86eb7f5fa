"""Async CRUD operations for pet weight records."""

from datetime import date

import aiosqlite

from app.core.timeutils import parse_instant
from app.models.pet import Pet
from app.models.weight import WeightRecord, WeightRecordCreate

_SELECT = """
SELECT wr.*,
       p.name       AS pet_name,
       p.created_at AS pet_created_at
  FROM weight_records wr
  JOIN pets p ON p.id = wr.pet_id
"""


def _row_to_weight_record(row: aiosqlite.Row) -> WeightRecord:
    return WeightRecord(
        id=row["id"],
        pet_id=row["pet_id"],
        weight=row["weight"],
        measured_date=date.fromisoformat(row["measured_date"]),
        created_at=parse_instant(row["created_at"]),
        pet=Pet(id=row["pet_id"], name=row["pet_name"], created_at=parse_instant(row["pet_created_at"])),
    )


async def add_weight_record(
    db: aiosqlite.Connection, pet_id: int, record: WeightRecordCreate
) -> WeightRecord:
    """Record a weight measurement for a pet."""
    cursor = await db.execute(
        "INSERT INTO weight_records (pet_id, weight, measured_date) VALUES (?, ?, ?)",
        (pet_id, record.weight, record.measured_date.isoformat()),
    )
    await db.commit()
    return await get_weight_record(db, cursor.lastrowid)


async def get_weight_record(db: aiosqlite.Connection, record_id: int) -> WeightRecord | None:
    async with db.execute(_SELECT + " WHERE wr.id = ?", (record_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_weight_record(row) if row else None


async def get_weight_records_by_pet(db: aiosqlite.Connection, pet_id: int) -> list[WeightRecord]:
    """Return all weight records for a pet, chronologically ordered."""
    rows = await db.execute_fetchall(
        _SELECT + " WHERE wr.pet_id = ? ORDER BY wr.measured_date ASC, wr.id ASC",
        (pet_id,),
    )
    return [_row_to_weight_record(r) for r in rows]


async def get_latest_weight_record(db: aiosqlite.Connection, pet_id: int) -> WeightRecord | None:
    """Most recent measurement of a pet, or None."""
    async with db.execute(
        _SELECT + " WHERE wr.pet_id = ? ORDER BY wr.measured_date DESC, wr.id DESC LIMIT 1",
        (pet_id,),
    ) as cur:
        row = await cur.fetchone()
    return _row_to_weight_record(row) if row else None


async def get_weight_records_by_date_range(
    db: aiosqlite.Connection, start: date, end: date
) -> list[WeightRecord]:
    """Return weight records of every pet measured between start and end (inclusive)."""
    rows = await db.execute_fetchall(
        _SELECT + """
         WHERE wr.measured_date >= ?
           AND wr.measured_date <= ?
         ORDER BY wr.measured_date ASC, wr.id ASC""",
        (start.isoformat(), end.isoformat()),
    )
    return [_row_to_weight_record(r) for r in rows]
