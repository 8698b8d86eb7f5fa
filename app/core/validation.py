"""Input checks that must pass before any record-store call is made."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional

from pydantic import ValidationError

from app.core.timeutils import as_utc, now_utc, today_local


class InputError(ValueError):
    """User input rejected on the client side."""


def ensure_not_future_date(day: date, tz: tzinfo, now: Optional[datetime] = None) -> None:
    """Dates up to and including today (local) are allowed."""
    if day > today_local(tz, now):
        raise InputError("Measured date cannot be in the future")


def ensure_not_future_instant(instant: datetime, now: Optional[datetime] = None) -> None:
    if as_utc(instant) > (now or now_utc()):
        raise InputError("Performed date cannot be in the future")


def describe_validation_error(exc: ValidationError) -> str:
    """First pydantic error as a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    first = errors[0]
    message = first.get("msg", "Invalid input")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {message}" if location else message
