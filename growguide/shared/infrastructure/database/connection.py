# 📄 File: growguide/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the GrowGuide database, making sure we can talk to our data storage
# and handing out connections efficiently without overwhelming the database.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle (explicit initialize/close, no module-level singleton),
# connection event registration, and a retrying health check.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - growguide/shared/config/database.py (engine configuration)
# - asyncpg (PostgreSQL async driver) / aiosqlite (tests)
#
# 🔄 Connected Modules / Calls From:
# - growguide/shared/infrastructure/database/session.py (session management)
# - growguide/main.py (application lifespan)
# - growguide/api/v1/health.py (database health monitoring)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from growguide.shared.config.database import DatabaseConfig
from growguide.shared.config.settings import Settings

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Owns the async engine for one application instance.

    Built explicitly (normally in the FastAPI lifespan) and passed to whoever
    needs it; ``initialize`` creates the engine, ``close`` disposes it.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._config = DatabaseConfig(settings)
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 0.5

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    async def initialize(self) -> None:
        """Create the engine and register connection event listeners."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database engine...")
        self._engine = create_async_engine(
            self._config.database_url,
            **self._config.engine_kwargs
        )
        self._register_connection_events()
        logger.info(
            "Database engine initialized",
            extra={"dialect": self._engine.dialect.name},
        )

    def _register_connection_events(self) -> None:
        """Register SQLAlchemy connection event listeners."""
        if self._engine is None or not self._config.is_sqlite:
            return

        # pysqlite/aiosqlite emit their own BEGIN lazily, which breaks SAVEPOINT;
        # take over transaction control and turn on foreign key enforcement.
        @event.listens_for(self._engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(self._engine.sync_engine, "begin")
        def do_begin(conn):
            conn.exec_driver_sql("BEGIN")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "dialect": self._engine.dialect.name,
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database engine disposed")
