"""
Database setup script.

Creates the database (PostgreSQL) if missing and then creates all tables.
Run this before starting the application.

Usage:
    python -m scripts.setup_db
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import asyncpg
from sqlalchemy.engine import make_url

from core.config import get_settings
from core.logging import configure_logging, get_logger
from core.storage import Database


logger = get_logger(__name__)


async def ensure_postgres_database(url: str) -> None:
    """Create the target PostgreSQL database when it does not exist."""
    db_url = make_url(url)
    db_name = db_url.database

    conn = await asyncpg.connect(
        host=db_url.host,
        port=db_url.port or 5432,
        user=db_url.username,
        password=db_url.password,
        database="postgres",
    )
    try:
        exists = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1",
            db_name,
        )
        if not exists:
            logger.info("Creating database", database=db_name)
            await conn.execute(f'CREATE DATABASE "{db_name}"')
        else:
            logger.info("Database already exists", database=db_name)
    finally:
        await conn.close()


async def setup_database() -> None:
    """Create database and tables."""
    settings = get_settings()
    configure_logging(settings)

    if settings.database_url.startswith("postgresql"):
        await ensure_postgres_database(settings.database_url)

    database = Database(settings.database_url, echo=settings.debug)
    database.connect()
    try:
        await database.create_all()
    finally:
        await database.close()

    logger.info("Database setup complete")


if __name__ == "__main__":
    asyncio.run(setup_database())
