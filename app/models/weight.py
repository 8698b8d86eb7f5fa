from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .pet import Pet


class WeightRecordBase(BaseModel):
    weight: float = Field(..., gt=0, description="Weight in kilograms")
    measured_date: date

    @field_validator("weight")
    @classmethod
    def _at_most_two_decimals(cls, value: float) -> float:
        if round(value, 2) != value:
            raise ValueError("Weight must have at most 2 decimal places")
        return value


class WeightRecordCreate(WeightRecordBase):
    """Payload to record a weight measurement for a pet."""
    pass


class WeightRecord(WeightRecordBase):
    """Full weight record returned from the database."""
    id: int
    pet_id: int
    created_at: datetime
    pet: Optional[Pet] = None

    model_config = {"from_attributes": True}
