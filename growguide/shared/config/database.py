# 📄 File: growguide/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the GrowGuide database and the shared base
# that every stored record (setups, plants, day entries) is built on.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async engine configuration per dialect and environment, plus the
# declarative base with a constraint naming convention used by ORM models and
# Alembic migrations.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine
# - growguide.shared.config.settings
# - PostgreSQL driver (asyncpg) in production, aiosqlite in tests
#
# 🔄 Connected Modules / Calls From:
# - growguide.shared.infrastructure.database.connection
# - growguide.modules.cultivation.infrastructure.database.models
# - migrations/env.py

from typing import Any, Dict, Optional

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from .settings import Settings, get_settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def database_url(self) -> str:
        """Get the database URL for async connections."""
        return self.settings.database_url

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.database_url).get_backend_name() == "sqlite"

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on dialect and environment."""

        base_config: Dict[str, Any] = {
            "echo": self.settings.DB_ECHO,
            "future": True,
        }

        if self.is_sqlite:
            # File-backed SQLite (tests, local tooling); one connection per checkout
            base_config["poolclass"] = NullPool
            return base_config

        base_config["connect_args"] = {
            "server_settings": {
                "application_name": f"growguide_{self.settings.ENVIRONMENT}",
                "jit": "off",  # Disable JIT for better connection times
            }
        }

        if self.settings.is_testing:
            base_config["poolclass"] = NullPool
            return base_config

        base_config.update({
            "pool_size": self.settings.DB_POOL_SIZE,
            "max_overflow": self.settings.DB_MAX_OVERFLOW,
            "pool_timeout": self.settings.DB_POOL_TIMEOUT,
            "pool_recycle": self.settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,  # Verify connections before use
        })

        if self.settings.is_production:
            base_config["connect_args"].update({
                "command_timeout": 30,
                "server_settings": {
                    **base_config["connect_args"]["server_settings"],
                    "timezone": "UTC",
                    "statement_timeout": "300000",  # 5 minutes
                    "idle_in_transaction_session_timeout": "300000",
                }
            })

        return base_config


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata (and its naming convention) for every
    table in the GrowGuide schema.
    """
    metadata = metadata


# =============================================================================
# TESTING UTILITIES
# =============================================================================

async def create_test_schema(engine: AsyncEngine) -> None:
    """Create all tables directly from metadata (test databases only)."""
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)


async def drop_test_schema(engine: AsyncEngine) -> None:
    """Drop all tables created from metadata (test databases only)."""
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.drop_all)
