#!/usr/bin/env python3
"""
Create the markers and messages tables.

For deployments that run with DB_CREATE_ALL=false; safe to run repeatedly.
"""
import asyncio
import sys
from pathlib import Path
from typing import List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine

from emotionmap.config import Settings
from emotionmap.models import Base


async def init_db(database_url: str, echo: bool = False) -> List[str]:
    """Create all tables and return the table names now present."""
    engine = create_async_engine(database_url, echo=echo)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    finally:
        await engine.dispose()
    return sorted(tables)


def main() -> None:
    settings = Settings.from_env()
    print(f"Initializing schema at {settings.masked_database_url}")
    tables = asyncio.run(init_db(settings.database_url, echo=settings.debug))
    print(f"Database schema initialized successfully! Tables: {', '.join(tables)}")


if __name__ == "__main__":
    main()
