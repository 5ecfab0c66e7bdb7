"""Seed the sample tasks into the configured database.

Creates the tasks table if missing, then inserts the sample tasks when the
table is empty (see app.infrastructure.persistence.seed).

Usage:
    python -m scripts.seed_dev_data

Reads DATABASE_URL from the environment or .env in the project root.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from dotenv import load_dotenv


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run() -> int:
    from app.infrastructure.persistence import database
    from app.infrastructure.persistence.seed import seed_sample_tasks

    await database.create_schema()
    session_factory = database._ensure_engine()
    try:
        async with session_factory() as session:
            async with session.begin():
                inserted = await seed_sample_tasks(session)
    finally:
        await database.dispose_engine()
    return inserted


def main() -> None:
    _load_env()
    inserted = asyncio.run(run())
    print(f"Seed completed: {inserted} task(s) inserted.")


if __name__ == "__main__":
    main()
