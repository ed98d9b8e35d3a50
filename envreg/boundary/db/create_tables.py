"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, envreg.configs
System role: Database schema initialization

Usage:
    python -m envreg.boundary.db.create_tables
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine

from envreg.boundary.db.base import Base
from envreg.boundary.db.connection import get_async_engine
from envreg.observability import configure_logging, get_logger

# Import all models to register them with Base.metadata
from envreg.boundary.db.models import (  # noqa: F401
    ComplianceReportModel,
    ConversationModel,
    MessageModel,
)

logger = get_logger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Engine to use; defaults to the configured async engine

    Raises:
        SQLAlchemyError: If the connection or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "Database tables created",
        extra={"tables": sorted(Base.metadata.tables)},
    )


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All database tables dropped")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())
