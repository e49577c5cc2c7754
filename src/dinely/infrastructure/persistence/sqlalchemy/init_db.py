"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import create_async_engine

from dinely.infrastructure.persistence.sqlalchemy.models import Base
from dinely_config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_engine():
    """Get the database engine for initialization."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


def _display_url(database_url: str) -> str:
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = _get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables() -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    engine = _get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
    logger.info("Database tables dropped successfully")


async def _reset_database(force: bool = False) -> None:
    """Drop all tables and recreate them (USE WITH CAUTION!)."""
    database_url = get_settings().database_url
    print(f"Database: {_display_url(database_url)}")
    print()

    if not force:
        print("WARNING: This will DELETE ALL DATA in the database!")
        print()
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)
        print()

    await drop_tables()
    await create_tables()
    logger.info("Database recreated successfully!")


def db_init() -> None:
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    logger.info("Database: %s", _display_url(get_settings().database_url))
    asyncio.run(create_tables())


def db_reset() -> None:
    """Drop and recreate all database tables."""
    logging.basicConfig(level=logging.INFO)
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
