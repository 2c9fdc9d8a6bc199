# 📄 File: growguide/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) making sure each request
# gets its own clean session and that a half-finished change is always undone.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management: one transaction per unit of work, commit on success,
# full rollback on any exception, translation of unexpected failures to TransactionError.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - growguide/shared/infrastructure/database/connection.py (database engine)
# - growguide/shared/core/exceptions.py
#
# 🔄 Connected Modules / Calls From:
# - growguide/shared/core/dependencies.py (FastAPI dependency)
# - Cultivation command and query handlers (transaction boundaries)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from growguide.shared.core.exceptions import (
    DatabaseError,
    GrowGuideException,
    RepositoryError,
    TransactionError,
)
from growguide.shared.infrastructure.database.connection import DatabaseConnectionManager

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, connection_manager: DatabaseConnectionManager):
        self._connection_manager = connection_manager
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def initialize(self) -> None:
        """Initialize the session factory with the database engine."""
        try:
            self._session_factory = async_sessionmaker(
                self._connection_manager.engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Keep objects accessible after commit
                autoflush=False,         # Repositories flush explicitly
            )
            logger.info("Database session factory initialized successfully")

        except RuntimeError as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}") from e

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None

    @asynccontextmanager
    async def transaction(self, operation: str = "unit_of_work") -> AsyncGenerator[AsyncSession, None]:
        """
        Open a session whose work commits as one transaction.

        Domain exceptions raised inside the block roll the transaction back
        and propagate unchanged. Storage failures, whether raised by the
        driver or already wrapped by a repository, and anything else are
        rolled back and re-raised as ``TransactionError``.

        Raises:
            DatabaseError: If the manager was never initialized
            TransactionError: If the unit of work failed unexpectedly
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug(f"Transaction started: {operation}")
            yield session

            await session.commit()
            logger.debug(f"Transaction committed: {operation}")

        except (RepositoryError, DatabaseError) as e:
            await session.rollback()
            logger.error(f"Storage failure, transaction rolled back ({operation}): {e.message}")
            raise TransactionError(
                "Database operation failed; no changes were saved",
                operation=operation,
                details={"error_type": type(e).__name__, "cause": e.details},
            ) from e

        except GrowGuideException:
            await session.rollback()
            logger.info(f"Transaction rolled back: {operation}")
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back ({operation}): {e}")
            raise TransactionError(
                "Database operation failed; no changes were saved",
                operation=operation,
                details={"error_type": type(e).__name__},
            ) from e

        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected error occurred, transaction rolled back ({operation}): {e}")
            raise TransactionError(
                "Transaction failed; no changes were saved",
                operation=operation,
                details={"error_type": type(e).__name__},
            ) from e

        finally:
            await session.close()

    @asynccontextmanager
    async def read_only(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a read-only database session (no automatic commit).
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            yield session

        except exc.SQLAlchemyError as e:
            logger.error(f"Read-only session error: {e}")
            raise DatabaseError(f"Read operation failed: {e}") from e

        finally:
            await session.rollback()
            await session.close()
