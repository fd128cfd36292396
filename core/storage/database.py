"""
Database connection and session management.

Wraps a SQLAlchemy async engine and session factory. One instance is built
by the composition root and shared by every domain service.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.logging import get_logger
from core.storage.base import Base


logger = get_logger(__name__)


class Database:
    """Async engine lifecycle, sessions, and schema creation."""

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        """
        Args:
            url: SQLAlchemy async URL (e.g. postgresql+asyncpg://...)
            echo: Whether to echo SQL statements
            pool_size: Connection pool size (server databases only)
            max_overflow: Extra connections allowed above pool_size
        """
        self._url = url
        self._echo = echo
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def connect(self) -> None:
        """Create the engine and session factory. Idempotent."""
        if self._engine is not None:
            return

        engine_kwargs: dict[str, Any] = {"echo": self._echo, "pool_pre_ping": True}
        if not self._url.startswith("sqlite"):
            engine_kwargs["pool_size"] = self._pool_size
            engine_kwargs["max_overflow"] = self._max_overflow

        self._engine = create_async_engine(self._url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database engine created", dialect=self._engine.dialect.name)

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager for database sessions.

        Commits on success, rolls back on error.

        Usage:
            async with database.session() as session:
                session.add(client)
        """
        if self._session_factory is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created", tables=sorted(Base.metadata.tables))

    async def ping(self) -> bool:
        """Check database connectivity."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed", error=str(e))
            return False
        return True

    async def close(self) -> None:
        """Dispose of the engine and its pool."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
        logger.info("Database engine disposed")
