"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from economy.core.config import DatabaseSettings
from economy.infrastructure.database.base import Base
from economy.modules.common.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


def _enable_immediate_transactions(engine: AsyncEngine) -> None:
    """Make every SQLite transaction take the write lock at BEGIN.

    pysqlite/aiosqlite defer BEGIN until the first write, which lets two
    transactions read the same balance before either writes.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # noqa: ARG001
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(settings: DatabaseSettings, *, debug: bool = False) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {"echo": settings.echo or debug}
    is_sqlite = settings.url.startswith("sqlite")
    if is_sqlite:
        engine_kwargs["connect_args"] = {"timeout": settings.sqlite_busy_timeout}
    if settings.pool_size is not None:
        engine_kwargs["pool_size"] = settings.pool_size
    if settings.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.max_overflow

    engine = create_async_engine(settings.url, **engine_kwargs)
    if is_sqlite:
        _enable_immediate_transactions(engine)
    return engine


class Database:
    """Storage handle owned by the process entry point and injected into services."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings, *, debug: bool = False) -> "Database":
        return cls(build_engine(settings, debug=debug))

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside one transaction: commit on success, roll back on error.

        Driver failures other than constraint violations surface as
        ``StorageUnavailableError`` so callers can retry them.
        """
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except IntegrityError:
                raise
            except DBAPIError as exc:
                logger.warning("Storage failure, transaction rolled back: %s", exc)
                raise StorageUnavailableError(str(exc.orig or exc)) from exc

    async def create_all(self) -> None:
        """Create database tables in development mode (migrations preferred)."""
        from economy.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


__all__ = ["Database", "build_engine"]
