"""
Database Configuration.

SQLAlchemy async engine and session management.
Uses lazy initialization to prevent import-time failures when config is not in place.
"""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

from sqlalchemy import event, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from learning_journal.backend.core.logging import get_logger

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker[AsyncSession] | None = None


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every SQLite connection.

    SQLite ships with foreign keys disabled; entry_tags relies on
    ON DELETE CASCADE, so each new connection must opt in.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _create_engine() -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    from learning_journal.backend.core.config import get_app_config, get_database_url

    db_config = get_app_config().database
    url = get_database_url()

    if url.startswith("sqlite"):
        if ":memory:" in url:
            # One shared connection, otherwise every checkout sees an empty database
            engine = create_async_engine(
                url,
                echo=db_config.echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            database = make_url(url).database
            if database:
                Path(database).parent.mkdir(parents=True, exist_ok=True)
            engine = create_async_engine(url, echo=db_config.echo)
        enable_sqlite_foreign_keys(engine)
    else:
        engine = create_async_engine(
            url,
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_recycle=db_config.pool_recycle,
            echo=db_config.echo,
        )

    logger.debug("Database engine created", extra={"driver": engine.dialect.name})
    return engine


def get_engine() -> AsyncEngine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy async engine instance
    """
    global _engine
    if _engine is None:
        _engine = _create_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get the session factory, creating it on first use.

    Returns:
        SQLAlchemy async session factory
    """
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_factory


async def init_models() -> None:
    """Create all tables that do not exist yet. Intended for local SQLite databases."""
    from learning_journal.backend.models import Base

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory."""
    global _engine, _async_session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_factory = None


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    One session per request: committed when the handler returns,
    rolled back when it raises, so every write in a request is atomic.

    Usage in endpoints:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
