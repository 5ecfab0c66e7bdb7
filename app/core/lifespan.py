"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (schema creation,
sample data, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.seed import seed_sample_tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: create tables (if database_auto_create), insert sample tasks
    (if seed_sample_data). Shutdown: SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.database_auto_create:
        await database.create_schema()
        logger.info("Database schema ensured")

    if settings.seed_sample_data:
        session_factory = database._ensure_engine()
        async with session_factory() as session:
            async with session.begin():
                await seed_sample_tasks(session)

    yield

    # ---- Shutdown ----
    await database.dispose_engine()
