"""SQLite initialization and async connection management via aiosqlite."""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import aiosqlite

from app.config import DATABASE_URL

__all__ = ["DATABASE_URL", "SCHEMA", "create_tables", "init_schema", "get_db"]

# Instants are stored as fixed-width ISO-8601 UTC strings (see
# app.core.timeutils.to_iso_utc) so string comparison follows time order.

_CREATE_FEED_TYPES = """
CREATE TABLE IF NOT EXISTS feed_types (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    manufacturer  TEXT    NOT NULL,
    product_name  TEXT    NOT NULL,
    created_at    TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_PETS = """
CREATE TABLE IF NOT EXISTS pets (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT    NOT NULL,
    created_at  TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_FEEDING_SCHEDULES = """
CREATE TABLE IF NOT EXISTS feeding_schedules (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    time        TEXT    NOT NULL,
    is_active   INTEGER NOT NULL DEFAULT 1,
    created_at  TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_FEEDING_RECORDS = """
CREATE TABLE IF NOT EXISTS feeding_records (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    feed_type_id  INTEGER NOT NULL REFERENCES feed_types(id),
    feeding_time  TEXT    NOT NULL,
    consumed      INTEGER CHECK(consumed IN (0, 1)),
    created_at    TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_WEIGHT_RECORDS = """
CREATE TABLE IF NOT EXISTS weight_records (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    pet_id         INTEGER NOT NULL REFERENCES pets(id) ON DELETE CASCADE,
    weight         REAL    NOT NULL CHECK(weight > 0),
    measured_date  TEXT    NOT NULL,
    created_at     TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_MAINTENANCE_RECORDS = """
CREATE TABLE IF NOT EXISTS maintenance_records (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    type          TEXT    NOT NULL CHECK(type IN ('water_filter', 'litter_box', 'nail_clipping')),
    performed_at  TEXT    NOT NULL,
    notes         TEXT,
    created_at    TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_INDEXES = (
    "CREATE INDEX IF NOT EXISTS idx_feeding_records_time ON feeding_records(feeding_time)",
    "CREATE INDEX IF NOT EXISTS idx_weight_records_pet_date ON weight_records(pet_id, measured_date)",
    "CREATE INDEX IF NOT EXISTS idx_maintenance_records_performed ON maintenance_records(performed_at)",
)

SCHEMA = (
    _CREATE_FEED_TYPES,
    _CREATE_PETS,
    _CREATE_FEEDING_SCHEDULES,
    _CREATE_FEEDING_RECORDS,
    _CREATE_WEIGHT_RECORDS,
    _CREATE_MAINTENANCE_RECORDS,
    *_CREATE_INDEXES,
)


async def init_schema(db: aiosqlite.Connection) -> None:
    """Create every table and index on an open connection."""
    await db.execute("PRAGMA foreign_keys = ON")
    for statement in SCHEMA:
        await db.execute(statement)
    await db.commit()


async def create_tables(db_url: str = DATABASE_URL) -> None:
    """Create all application tables if they don't exist."""
    os.makedirs(os.path.dirname(db_url) if os.path.dirname(db_url) else ".", exist_ok=True)
    async with aiosqlite.connect(db_url) as db:
        await init_schema(db)


@asynccontextmanager
async def get_db(db_url: str = DATABASE_URL) -> AsyncGenerator[aiosqlite.Connection, None]:
    """Context manager that provides a SQLite connection with foreign keys enabled."""
    async with aiosqlite.connect(db_url) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db
