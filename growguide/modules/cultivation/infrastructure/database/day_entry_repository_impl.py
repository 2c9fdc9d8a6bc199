# 📄 File: growguide/modules/cultivation/infrastructure/database/day_entry_repository_impl.py
#
# 🧭 Purpose (Layman Explanation):
# Saves, finds and removes the daily care logs for setups and plants.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of DayEntryRepository. Inserts run inside SAVEPOINTs so a unique
# (owner, date) violation, confirmed by re-reading the slot, surfaces as DuplicateDayEntryError
# and leaves the outer transaction usable.
#
# 🔗 Dependencies:
# - SQLAlchemy async session (begin_nested savepoints)
# - Cultivation ORM models and domain models
# - growguide.shared.core.exceptions (RepositoryError)
#
# 🔄 Connected Modules / Calls From:
# - DuplicateEntryGuard
# - Fanout, cascade deletion and list handlers

import logging
from datetime import date
from typing import Awaitable, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from growguide.modules.cultivation.domain.models.day_entry import PlantDayEntry, SetupDayEntry
from growguide.modules.cultivation.domain.repositories.day_entry_repository import (
    DayEntryRepository,
    DuplicateDayEntryError,
)
from growguide.modules.cultivation.infrastructure.database.models import (
    PlantDayEntryModel,
    SetupDayEntryModel,
)
from growguide.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)

_CARE_FIELDS = (
    "watered",
    "topped",
    "ph_value",
    "watering_amount",
    "temperature",
    "humidity",
    "notes",
)


class DayEntryRepositoryImpl(DayEntryRepository):
    """
    SQLAlchemy implementation of the DayEntryRepository interface.

    Never commits; the session manager owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    # =========================================================================
    # SETUP DAY ENTRIES
    # =========================================================================

    async def get_setup_day(self, setup_id: int, entry_date: date) -> Optional[SetupDayEntry]:
        model = await self._setup_day_model(setup_id, entry_date)
        return SetupDayEntry.model_validate(model) if model else None

    async def get_setup_day_by_id(self, setup_id: int, day_entry_id: int) -> Optional[SetupDayEntry]:
        stmt = select(SetupDayEntryModel).where(
            SetupDayEntryModel.id == day_entry_id,
            SetupDayEntryModel.setup_id == setup_id,
        )
        model = await self._scalar_one_or_none(stmt, "get_setup_day_by_id")
        return SetupDayEntry.model_validate(model) if model else None

    async def list_setup_days(self, setup_id: int) -> List[SetupDayEntry]:
        try:
            stmt = (
                select(SetupDayEntryModel)
                .where(SetupDayEntryModel.setup_id == setup_id)
                .order_by(SetupDayEntryModel.date.desc())
            )
            result = await self._session.execute(stmt)
            return [SetupDayEntry.model_validate(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing day entries of setup {setup_id}: {str(e)}")
            raise RepositoryError(
                "Failed to list setup day entries", operation="list_setup_days", entity="setup_day_entry"
            ) from e

    async def create_setup_day(self, entry: SetupDayEntry) -> SetupDayEntry:
        model = SetupDayEntryModel(
            setup_id=entry.setup_id,
            date=entry.date,
            **{field: getattr(entry, field) for field in _CARE_FIELDS},
        )
        await self._insert(
            model,
            "setup_day_entry",
            find_existing=lambda: self._setup_day_model(entry.setup_id, entry.date),
        )

        logger.info(f"Created setup day entry {model.id} for setup {entry.setup_id} on {entry.date}")
        return SetupDayEntry.model_validate(model)

    async def delete_setup_day(self, day_entry_id: int) -> bool:
        try:
            result = await self._session.execute(
                delete(SetupDayEntryModel).where(SetupDayEntryModel.id == day_entry_id)
            )
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting setup day entry {day_entry_id}: {str(e)}")
            raise RepositoryError(
                "Failed to delete setup day entry", operation="delete_setup_day", entity="setup_day_entry"
            ) from e

    # =========================================================================
    # PLANT DAY ENTRIES
    # =========================================================================

    async def get_plant_day(self, plant_id: int, entry_date: date) -> Optional[PlantDayEntry]:
        model = await self._plant_day_model(plant_id, entry_date)
        return PlantDayEntry.model_validate(model) if model else None

    async def create_plant_day(self, entry: PlantDayEntry) -> PlantDayEntry:
        model = PlantDayEntryModel(
            plant_id=entry.plant_id,
            date=entry.date,
            day_number=entry.day_number,
            setup_entry_id=entry.setup_entry_id,
            **{field: getattr(entry, field) for field in _CARE_FIELDS},
        )
        await self._insert(
            model,
            "plant_day_entry",
            find_existing=lambda: self._plant_day_model(entry.plant_id, entry.date),
        )

        logger.debug(f"Created plant day entry {model.id} for plant {entry.plant_id} on {entry.date}")
        return PlantDayEntry.model_validate(model)

    async def list_plant_days_for_setup_day(self, setup_day_id: int) -> List[PlantDayEntry]:
        try:
            stmt = (
                select(PlantDayEntryModel)
                .where(PlantDayEntryModel.setup_entry_id == setup_day_id)
                .order_by(PlantDayEntryModel.id)
            )
            result = await self._session.execute(stmt)
            return [PlantDayEntry.model_validate(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing plant days of setup entry {setup_day_id}: {str(e)}")
            raise RepositoryError(
                "Failed to list plant day entries",
                operation="list_plant_days_for_setup_day",
                entity="plant_day_entry",
            ) from e

    async def delete_plant_day(self, plant_day_id: int) -> bool:
        try:
            result = await self._session.execute(
                delete(PlantDayEntryModel).where(PlantDayEntryModel.id == plant_day_id)
            )
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting plant day entry {plant_day_id}: {str(e)}")
            raise RepositoryError(
                "Failed to delete plant day entry", operation="delete_plant_day", entity="plant_day_entry"
            ) from e

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _insert(self, model, entity: str, find_existing: Callable[[], Awaitable[object]]) -> None:
        """
        Flush one new row inside a savepoint.

        An integrity failure is a duplicate only when ``find_existing`` sees
        the row that holds the (owner, date) slot; foreign key and NOT NULL
        failures surface as RepositoryError.
        """
        try:
            async with self._session.begin_nested():
                self._session.add(model)
                await self._session.flush()

        except IntegrityError as e:
            if await find_existing() is not None:
                logger.info(f"Duplicate {entity} rejected by unique constraint")
                raise DuplicateDayEntryError(f"{entity} already exists for this date") from e

            logger.error(f"Integrity error creating {entity}: {e.orig}")
            raise RepositoryError(
                f"Failed to create {entity}", operation="create", entity=entity
            ) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error creating {entity}: {str(e)}")
            raise RepositoryError(
                f"Failed to create {entity}", operation="create", entity=entity
            ) from e

    async def _setup_day_model(self, setup_id: int, entry_date: date) -> Optional[SetupDayEntryModel]:
        stmt = select(SetupDayEntryModel).where(
            SetupDayEntryModel.setup_id == setup_id,
            SetupDayEntryModel.date == entry_date,
        )
        return await self._scalar_one_or_none(stmt, "get_setup_day")

    async def _plant_day_model(self, plant_id: int, entry_date: date) -> Optional[PlantDayEntryModel]:
        stmt = select(PlantDayEntryModel).where(
            PlantDayEntryModel.plant_id == plant_id,
            PlantDayEntryModel.date == entry_date,
        )
        return await self._scalar_one_or_none(stmt, "get_plant_day")

    async def _scalar_one_or_none(self, stmt, operation: str):
        try:
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Database error in {operation}: {str(e)}")
            raise RepositoryError(
                "Failed to read day entry", operation=operation, entity="day_entry"
            ) from e
