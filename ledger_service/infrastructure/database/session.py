"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ledger_service.core.config import DatabaseSettings
from ledger_service.infrastructure.database.base import Base


def build_engine(settings: DatabaseSettings) -> AsyncEngine:
    url = make_url(settings.dsn)
    engine_kwargs: dict[str, Any] = {
        "echo": settings.echo,
        "future": True,
    }
    backend = url.get_backend_name()
    if backend == "sqlite":
        # sqlite3 waits up to ``timeout`` seconds for the database lock
        engine_kwargs["connect_args"] = {"timeout": settings.lock_timeout_ms / 1000}
    else:
        if settings.pool_size is not None:
            engine_kwargs["pool_size"] = settings.pool_size
        if settings.max_overflow is not None:
            engine_kwargs["max_overflow"] = settings.max_overflow
        if url.get_driver_name() == "asyncpg" and settings.lock_timeout_ms:
            engine_kwargs["connect_args"] = {
                "server_settings": {"lock_timeout": str(settings.lock_timeout_ms)},
            }

    engine = create_async_engine(url, **engine_kwargs)
    if backend == "sqlite":
        _use_immediate_transactions(engine)
    return engine


def _use_immediate_transactions(engine: AsyncEngine) -> None:
    """Make every SQLite transaction take the write lock up front.

    SQLite has no row locks and ignores ``FOR UPDATE``; ``BEGIN IMMEDIATE``
    serializes writers on the database lock instead, so two transfers can
    never interleave their read-check-write sequences.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create database tables (alembic migrations are the alternative)."""
    from ledger_service.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(engine: AsyncEngine) -> bool:
    async with engine.connect() as conn:
        result = await conn.execute(text("SELECT 1"))
        return result.scalar() == 1
