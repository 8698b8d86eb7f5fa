"""Route package: exports every FastAPI router."""

from .feeding_records import router as feeding_records_router
from .feeds import router as feeds_router
from .health import router as health_router
from .maintenance import router as maintenance_router
from .pets import router as pets_router
from .schedules import router as schedules_router
from .weight_records import router as weight_records_router

__all__ = [
    "health_router", "feeds_router", "schedules_router", "feeding_records_router",
    "pets_router", "weight_records_router", "maintenance_router",
]
