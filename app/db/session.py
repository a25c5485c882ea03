"""Async database engine ownership and per-request sessions."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine (connection pool) and session factory for one application."""

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self._session_maker is None:
            raise RuntimeError("Database is not connected")
        return self._session_maker

    def connect(self) -> None:
        """Create the engine and session factory. Connections are opened lazily by the pool."""
        if self._engine is not None:
            return
        kwargs: dict = {"echo": self.echo}
        # SQLite uses a static/single-connection pool that takes no sizing arguments
        if make_url(self.url).get_backend_name() != "sqlite":
            kwargs.update(pool_size=self.pool_size, max_overflow=self.max_overflow)
        self._engine = create_async_engine(self.url, **kwargs)
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
        logger.info("Database engine created for %s", make_url(self.url).render_as_string())

    async def create_tables(self) -> None:
        """Create missing tables (development and tests; production uses Alembic)."""
        import app.models  # noqa: F401 - register all models

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.info("Database engine disposed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async DB session from the application's Database.

    Repository writes commit themselves; this commits anything left over and
    rolls back on error.
    """
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
