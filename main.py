"""PetLog API application entry point."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()  # load .env before anything reads os.getenv()

from fastapi import FastAPI

from app.api.routes import (
    feeding_records_router, feeds_router, health_router, maintenance_router,
    pets_router, schedules_router, weight_records_router,
)
from app.config import DATABASE_URL, TIMEZONE_NAME
from app.services.database import create_tables

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the SQLite tables at startup."""
    await create_tables(DATABASE_URL)
    logger.info("SQLite database ready at %s (user timezone %s)", DATABASE_URL, TIMEZONE_NAME)

    yield

    logger.info("PetLog API stopped")


app = FastAPI(
    title="PetLog API",
    description="Pet feeding, weight and maintenance log with calendar views.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(feeds_router)
app.include_router(schedules_router)
app.include_router(feeding_records_router)
app.include_router(pets_router)
app.include_router(weight_records_router)
app.include_router(maintenance_router)
