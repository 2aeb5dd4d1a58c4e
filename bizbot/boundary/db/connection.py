"""
Database connection management.

Provides the async SQLAlchemy engine, session factory and table creation
for the knowledge store.

Dependencies: sqlalchemy, bizbot.configs.database
System role: Database connection lifecycle management
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from bizbot.boundary.db.base import Base
from bizbot.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_async_engine(settings: DatabaseSettings | None = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    pool_pre_ping verifies connections before use to detect stale
    connections early.

    Args:
        settings: Database settings (loaded from environment if None)

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    db_config = settings or DatabaseSettings()

    engine = create_async_engine(
        db_config.url,
        echo=db_config.echo_sql,
        pool_pre_ping=db_config.pool_pre_ping,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Args:
        engine: Engine to bind (a new one from settings if None)

    Returns:
        async_sessionmaker: Session factory with manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all tables registered on Base.metadata.

    Idempotent: existing tables are left unchanged.

    Args:
        engine: Target engine
    """
    # Register models with the metadata
    import bizbot.boundary.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{__name__}:create_tables - Tables created")
