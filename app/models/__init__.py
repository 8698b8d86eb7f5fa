from .feed_type import FeedType, FeedTypeCreate
from .feeding import ConsumptionUpdate, FeedingRecord, FeedingRecordCreate, FeedingRecordUpdate
from .maintenance import (
    MAINTENANCE_LABELS, MaintenanceRecord, MaintenanceRecordCreate,
    MaintenanceRecordUpdate, MaintenanceType,
)
from .pet import Pet, PetCreate, PetUpdate
from .schedule import FeedingSchedule, ScheduleCreate, ScheduleUpdate
from .weight import WeightRecord, WeightRecordCreate

__all__ = [
    "FeedType", "FeedTypeCreate",
    "ConsumptionUpdate", "FeedingRecord", "FeedingRecordCreate", "FeedingRecordUpdate",
    "MAINTENANCE_LABELS", "MaintenanceRecord", "MaintenanceRecordCreate",
    "MaintenanceRecordUpdate", "MaintenanceType",
    "Pet", "PetCreate", "PetUpdate",
    "FeedingSchedule", "ScheduleCreate", "ScheduleUpdate",
    "WeightRecord", "WeightRecordCreate",
]
