"""Create and drop the content-object tables.

Every table mapped on Base.metadata belongs to a content-object class, so
the schema is derived from the registered classes. The ``vellum db``
commands wrap these helpers.
"""

from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import vellum.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from vellum.infrastructure.persistence.sqlalchemy.models.base import Base
from vellum_config import get_settings

logger = logging.getLogger(__name__)


def content_table_names() -> list[str]:
    """Names of all tables mapped by content-object classes."""
    return sorted(Base.metadata.tables)


def _engine_from_settings() -> AsyncEngine:
    return create_async_engine(get_settings().database_url, pool_pre_ping=True)


async def missing_tables(engine: AsyncEngine) -> list[str]:
    """Content-object tables that do not exist in the database yet."""
    async with engine.connect() as conn:
        existing = await conn.run_sync(
            lambda sync_conn: set(inspect(sync_conn).get_table_names()),
        )
    return [name for name in content_table_names() if name not in existing]


async def create_tables(engine: AsyncEngine | None = None) -> list[str]:
    """Create missing content-object tables and return their names.

    Existing tables are left untouched. An engine built from the settings
    is used (and disposed) when none is given.
    """
    owned = engine is None
    engine = engine or _engine_from_settings()
    try:
        missing = await missing_tables(engine)
        if missing:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Created tables: %s", ", ".join(missing))
        else:
            logger.info("All %d content tables exist", len(content_table_names()))
        return missing
    finally:
        if owned:
            await engine.dispose()


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """Drop every content-object table, deleting all stored objects."""
    owned = engine is None
    engine = engine or _engine_from_settings()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.warning("Dropped tables: %s", ", ".join(content_table_names()))
    finally:
        if owned:
            await engine.dispose()


async def reset_tables(engine: AsyncEngine | None = None) -> None:
    """Drop and recreate all content-object tables."""
    owned = engine is None
    engine = engine or _engine_from_settings()
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        if owned:
            await engine.dispose()
