"""Async CRUD operations for maintenance records."""

from typing import Optional

import aiosqlite

from app.core.timeutils import parse_instant, to_iso_utc
from app.models.maintenance import (
    MaintenanceRecord, MaintenanceRecordCreate, MaintenanceRecordUpdate,
)


def _row_to_maintenance_record(row: aiosqlite.Row) -> MaintenanceRecord:
    return MaintenanceRecord(
        id=row["id"],
        type=row["type"],
        performed_at=parse_instant(row["performed_at"]),
        notes=row["notes"],
        created_at=parse_instant(row["created_at"]),
    )


async def add_maintenance_record(
    db: aiosqlite.Connection, record: MaintenanceRecordCreate
) -> MaintenanceRecord:
    """Log a maintenance task and return the full record."""
    cursor = await db.execute(
        "INSERT INTO maintenance_records (type, performed_at, notes) VALUES (?, ?, ?)",
        (record.type, to_iso_utc(record.performed_at), record.notes),
    )
    await db.commit()
    return await get_maintenance_record(db, cursor.lastrowid)


async def get_maintenance_record(db: aiosqlite.Connection, record_id: int) -> MaintenanceRecord | None:
    async with db.execute("SELECT * FROM maintenance_records WHERE id = ?", (record_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_maintenance_record(row) if row else None


async def get_all_maintenance_records(
    db: aiosqlite.Connection, type: Optional[str] = None
) -> list[MaintenanceRecord]:
    """Return maintenance records, most recent first, optionally of one type."""
    if type is None:
        rows = await db.execute_fetchall(
            "SELECT * FROM maintenance_records ORDER BY performed_at DESC, id DESC"
        )
    else:
        rows = await db.execute_fetchall(
            "SELECT * FROM maintenance_records WHERE type = ? ORDER BY performed_at DESC, id DESC",
            (type,),
        )
    return [_row_to_maintenance_record(r) for r in rows]


async def update_maintenance_record(
    db: aiosqlite.Connection, record_id: int, update: MaintenanceRecordUpdate
) -> MaintenanceRecord | None:
    """Replace every field of a maintenance record."""
    cursor = await db.execute(
        "UPDATE maintenance_records SET type = ?, performed_at = ?, notes = ? WHERE id = ?",
        (update.type, to_iso_utc(update.performed_at), update.notes, record_id),
    )
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_maintenance_record(db, record_id)


async def delete_maintenance_record(db: aiosqlite.Connection, record_id: int) -> bool:
    cursor = await db.execute("DELETE FROM maintenance_records WHERE id = ?", (record_id,))
    await db.commit()
    return cursor.rowcount > 0
