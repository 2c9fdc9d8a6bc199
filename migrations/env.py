# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic how to reach the GrowGuide database and which tables it manages, so schema
# changes are applied the same way in every environment.
# 🧪 Purpose (Technical Summary):
# Alembic environment: resolves the URL from GrowGuide settings (with .env support), targets
# the shared declarative metadata and runs migrations over an async engine.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy async engine (asyncpg in production)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

load_dotenv()

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from growguide.shared.config.database import DatabaseBase  # noqa: E402
from growguide.shared.config.settings import Settings  # noqa: E402

# Register cultivation tables on the shared metadata
import growguide.modules.cultivation.infrastructure.database.models  # noqa: E402,F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = DatabaseBase.metadata

exclude_tables = config.get_main_option("exclude_tables", "")


def get_database_url() -> str:
    """Database URL from DATABASE_URL or the DB_* settings."""
    return Settings().database_url


def include_object(object, name, type_, reflected, compare_to):
    """Skip tables listed in ``exclude_tables`` (alembic.ini)."""
    if type_ == "table" and name in exclude_tables.split(","):
        return False
    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode, emitting SQL to the script output
    without a live connection.
    """
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        include_object=include_object,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
