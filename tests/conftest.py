"""
Shared fixtures for the GrowGuide test suite.

Database tests run against a temporary SQLite file through aiosqlite, with
the schema created from the ORM metadata. HTTP tests drive the FastAPI app
through httpx's ASGI transport with the same database managers attached.
"""

from datetime import date
from typing import List, Optional, Sequence, Tuple

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import func, select

from growguide.modules.cultivation.infrastructure.database.models import (
    PlantDayEntryModel,
    PlantModel,
    SetupMembershipModel,
    SetupModel,
)
from growguide.shared.config.database import create_test_schema
from growguide.shared.config.settings import Settings
from growguide.shared.infrastructure.database.connection import DatabaseConnectionManager
from growguide.shared.infrastructure.database.session import DatabaseSessionManager

OWNER_ID = 1
OTHER_USER_ID = 2


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'growguide.db'}",
        LOG_FORMAT="text",
        RATE_LIMIT_ENABLED=False,
    )


@pytest_asyncio.fixture
async def connection_manager(settings):
    manager = DatabaseConnectionManager(settings)
    await manager.initialize()
    await create_test_schema(manager.engine)
    yield manager
    await manager.close()


@pytest.fixture
def session_manager(connection_manager) -> DatabaseSessionManager:
    manager = DatabaseSessionManager(connection_manager)
    manager.initialize()
    return manager


class CultivationSeeder:
    """Writes setups, plants and direct plant entries straight through the ORM."""

    def __init__(self, session_manager: DatabaseSessionManager):
        self._session_manager = session_manager

    async def setup_with_plants(
        self,
        plants: Sequence[Tuple[str, Optional[date]]],
        user_id: int = OWNER_ID,
        name: str = "GreenhouseA",
        water_limit: int = 1000,
    ) -> Tuple[int, List[int]]:
        async with self._session_manager.transaction("seed_setup") as session:
            setup = SetupModel(user_id=user_id, name=name, water_limit=water_limit)
            session.add(setup)
            await session.flush()

            plant_ids = []
            for plant_name, start_date in plants:
                plant = PlantModel(user_id=user_id, name=plant_name, start_date=start_date)
                session.add(plant)
                await session.flush()
                session.add(SetupMembershipModel(setup_id=setup.id, plant_id=plant.id))
                await session.flush()
                plant_ids.append(plant.id)

            return setup.id, plant_ids

    async def plant_day(self, plant_id: int, entry_date: date, watering_amount: float = 50) -> int:
        async with self._session_manager.transaction("seed_plant_day") as session:
            entry = PlantDayEntryModel(
                plant_id=plant_id,
                date=entry_date,
                watered=True,
                watering_amount=watering_amount,
            )
            session.add(entry)
            await session.flush()
            return entry.id

    async def set_flowering(self, plant_id: int, flowering_date: date) -> None:
        async with self._session_manager.transaction("seed_flowering") as session:
            plant = await session.get(PlantModel, plant_id)
            plant.flowering_start_date = flowering_date


@pytest.fixture
def seeder(session_manager) -> CultivationSeeder:
    return CultivationSeeder(session_manager)


@pytest_asyncio.fixture
async def greenhouse(seeder) -> Tuple[int, List[int]]:
    """Setup "GreenhouseA" with P1 (started 2024-01-01) and P2 (started 2024-01-05)."""
    return await seeder.setup_with_plants(
        [("P1", date(2024, 1, 1)), ("P2", date(2024, 1, 5))]
    )


@pytest.fixture
def count_rows(session_manager):
    async def _count(model, *criteria) -> int:
        async with session_manager.read_only() as session:
            stmt = select(func.count()).select_from(model)
            if criteria:
                stmt = stmt.where(*criteria)
            return (await session.execute(stmt)).scalar_one()

    return _count


@pytest.fixture
def fetch_all(session_manager):
    async def _fetch(model, *criteria, order_by=None):
        async with session_manager.read_only() as session:
            stmt = select(model).where(*criteria).order_by(order_by if order_by is not None else model.id)
            rows = list((await session.execute(stmt)).scalars().all())
            # keep loaded attributes readable after the read-only rollback
            session.expunge_all()
            return rows

    return _fetch


@pytest_asyncio.fixture
async def app(settings, connection_manager, session_manager):
    from growguide.main import create_application

    application = create_application(settings)
    application.state.connection_manager = connection_manager
    application.state.session_manager = session_manager
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-User-Id": str(OWNER_ID)},
    ) as http_client:
        yield http_client
