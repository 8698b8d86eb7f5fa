"""Async CRUD operations for pets."""

import aiosqlite

from app.core.timeutils import parse_instant
from app.models.pet import Pet, PetCreate, PetUpdate


def _row_to_pet(row: aiosqlite.Row) -> Pet:
    return Pet(
        id=row["id"],
        name=row["name"],
        created_at=parse_instant(row["created_at"]),
    )


async def create_pet(db: aiosqlite.Connection, pet: PetCreate) -> Pet:
    """Insert a new pet and return the full record."""
    cursor = await db.execute("INSERT INTO pets (name) VALUES (?)", (pet.name,))
    await db.commit()
    rows = await db.execute_fetchall("SELECT * FROM pets WHERE id = ?", (cursor.lastrowid,))
    return _row_to_pet(rows[0])


async def get_pet(db: aiosqlite.Connection, pet_id: int) -> Pet | None:
    """Return a pet by id, or None if not found."""
    async with db.execute("SELECT * FROM pets WHERE id = ?", (pet_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_pet(row) if row else None


async def get_all_pets(db: aiosqlite.Connection) -> list[Pet]:
    """Return all registered pets, oldest first."""
    rows = await db.execute_fetchall("SELECT * FROM pets ORDER BY created_at, id")
    return [_row_to_pet(r) for r in rows]


async def update_pet(db: aiosqlite.Connection, pet_id: int, data: PetUpdate) -> Pet | None:
    """Rename a pet and return it, or None if it does not exist."""
    cursor = await db.execute("UPDATE pets SET name = ? WHERE id = ?", (data.name, pet_id))
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_pet(db, pet_id)


async def delete_pet(db: aiosqlite.Connection, pet_id: int) -> bool:
    """Delete a pet (and its weight records via cascade). Returns True if deleted."""
    cursor = await db.execute("DELETE FROM pets WHERE id = ?", (pet_id,))
    await db.commit()
    return cursor.rowcount > 0
