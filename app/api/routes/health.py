"""Healthcheck endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import TIMEZONE_NAME

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timezone: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service status and the configured user timezone."""
    return HealthResponse(status="ok", timezone=TIMEZONE_NAME)
