"""Pydantic models for recurring daily feeding slots."""

from datetime import datetime

from pydantic import BaseModel, Field

# 24-hour clock, leading zero required.
SCHEDULE_TIME_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]$"


class ScheduleBase(BaseModel):
    time: str = Field(..., pattern=SCHEDULE_TIME_PATTERN, description="Local time, HH:mm")

    model_config = {"str_strip_whitespace": True}


class ScheduleCreate(ScheduleBase):
    """Payload to add a daily feeding slot."""
    pass


class ScheduleUpdate(ScheduleBase):
    """Payload to move a feeding slot to another time."""
    pass


class FeedingSchedule(ScheduleBase):
    """Full model returned from the database."""
    id: int
    is_active: bool = True
    created_at: datetime

    model_config = {"from_attributes": True, "str_strip_whitespace": True}
