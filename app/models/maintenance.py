"""Pydantic models for household maintenance tasks."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


MaintenanceType = Literal["water_filter", "litter_box", "nail_clipping"]

MAINTENANCE_LABELS: dict[str, str] = {
    "water_filter": "Water filter change",
    "litter_box": "Litter change",
    "nail_clipping": "Nail clipping",
}


class MaintenanceRecordBase(BaseModel):
    type: MaintenanceType
    performed_at: datetime
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("notes")
    @classmethod
    def _blank_notes_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class MaintenanceRecordCreate(MaintenanceRecordBase):
    """Payload to log a maintenance task."""
    pass


class MaintenanceRecordUpdate(MaintenanceRecordBase):
    """Payload to edit a maintenance task. All fields are replaced."""
    pass


class MaintenanceRecord(MaintenanceRecordBase):
    """Full model returned from the database."""
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}

    @property
    def label(self) -> str:
        return MAINTENANCE_LABELS[self.type]
