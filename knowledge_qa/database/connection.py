import asyncio
import contextlib
from pathlib import Path
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from knowledge_qa.config import Settings
from knowledge_qa.exceptions import StorageError
from knowledge_qa.logger import AppLogger

from . import models  # noqa: F401  (registers tables on Base.metadata)
from .base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the async engine and session factory.

    `connect()` is explicit and idempotent: the first call creates the engine and the
    schema, concurrent callers wait on the same lock and then return, later calls are
    no-ops. Nothing is created at import time.
    """

    def __init__(self, settings: Settings, logger: AppLogger):
        self.db_url = settings.database_url
        self.echo = settings.log_level == "DEBUG"
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self.logger = logger.get_logger(__name__)
        self._connect_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    def _engine_options(self) -> Dict[str, Any]:
        url = make_url(self.db_url)
        options: Dict[str, Any] = {"echo": self.echo}

        if url.get_backend_name() != "sqlite":
            options.update(pool_pre_ping=True, pool_recycle=3600)
            return options

        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            options.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
        else:
            Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

        return options

    async def connect(self) -> None:
        """Creates the database engine, the session factory and the schema (once)."""
        async with self._connect_lock:
            if self.engine is not None:
                self.logger.info("Database engine already initialized.")
                return

            self.logger.info("Creating database engine and session factory...")
            try:
                engine = create_async_engine(self.db_url, **self._engine_options())
            except (SQLAlchemyError, OSError) as e:
                self.logger.exception("Could not create database engine.")
                raise StorageError("Failed to connect to database", {"reason": str(e)}) from e

            if engine.dialect.name == "sqlite":
                event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

            try:
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except (SQLAlchemyError, OSError) as e:
                self.logger.exception("Database schema initialization failed.")
                await engine.dispose()
                raise StorageError("Failed to initialize database", {"reason": str(e)}) from e

            self.engine = engine
            self.session_factory = async_sessionmaker(
                self.engine,
                expire_on_commit=False,
                class_=AsyncSession,
            )
            self.logger.info("Database initialized successfully.")

    async def disconnect(self) -> None:
        """Disposes of the database engine."""
        async with self._connect_lock:
            if self.engine:
                self.logger.info("Closing database connections...")
                await self.engine.dispose()
                self.engine = None
                self.session_factory = None
                self.logger.info("Database connections closed.")

    @contextlib.asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provides a database session within a context manager."""
        if self.session_factory is None:
            self.logger.error("Session requested before the database was connected.")
            raise StorageError("Database is not connected. Call connect() first.")

        session: AsyncSession = self.session_factory()
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            self.logger.exception("Database error occurred, rolling back session.")
            await session.rollback()
            raise StorageError("Database operation failed", {"reason": str(e)}) from e
        finally:
            await session.close()
