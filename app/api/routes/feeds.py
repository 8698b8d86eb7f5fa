"""Endpoints for food products."""

from fastapi import APIRouter, status

from app.api.dependencies import DbDep
from app.models.feed_type import FeedType, FeedTypeCreate
from app.services import feed_type_service

router = APIRouter(prefix="/feeds", tags=["feeds"])


@router.get("", response_model=list[FeedType])
async def list_feed_types(db: DbDep) -> list[FeedType]:
    return await feed_type_service.get_all_feed_types(db)


@router.post("", response_model=FeedType, status_code=status.HTTP_201_CREATED)
async def create_feed_type(payload: FeedTypeCreate, db: DbDep) -> FeedType:
    """Register a food product."""
    return await feed_type_service.create_feed_type(db, payload)
