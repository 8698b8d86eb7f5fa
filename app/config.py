"""Runtime configuration read from the environment (.env supported)."""

import os
from datetime import tzinfo
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "data/petlog.db")

# Every local-day computation goes through this zone, never the host's.
TIMEZONE_NAME = os.getenv("PETLOG_TIMEZONE", "Asia/Tokyo")


@lru_cache(maxsize=None)
def get_timezone(name: str = TIMEZONE_NAME) -> tzinfo:
    """Return the configured user timezone."""
    from app.core.timeutils import load_timezone

    return load_timezone(name)
