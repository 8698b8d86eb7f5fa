from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .feed_type import FeedType


class FeedingRecordBase(BaseModel):
    feed_type_id: int
    feeding_time: datetime


class FeedingRecordCreate(FeedingRecordBase):
    """Payload to record a feeding. Consumption starts unrecorded."""
    pass


class FeedingRecordUpdate(FeedingRecordBase):
    """Payload to edit a feeding. Feed type and time are replaced together."""
    pass


class ConsumptionUpdate(BaseModel):
    """Payload to set whether the food was eaten (None = not recorded)."""
    consumed: Optional[bool] = None


class FeedingRecord(FeedingRecordBase):
    """Full model returned from the database."""
    id: int
    consumed: Optional[bool] = None
    created_at: datetime
    feed_type: Optional[FeedType] = None

    model_config = {"from_attributes": True}
