# 📄 File: growguide/modules/cultivation/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processors" for setup days: logging a day for every plant
# in a setup at once, undoing such a day, and starting flowering for a setup.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers. Each handle() call is one transaction obtained from the
# DatabaseSessionManager; repositories are bound to that session through a factory so the
# fanout and the cascade deletion commit or roll back as a whole.
#
# 🔗 Dependencies:
# - growguide.shared.infrastructure.database.session (transaction boundary)
# - Cultivation domain services (age calculator, duplicate guard, fertilizer manager)
# - Cultivation repository implementations (CultivationRepositories)
#
# 🔄 Connected Modules / Calls From:
# - presentation/dependencies.py (handler providers)
# - presentation/api/v1/setup_days.py (API endpoints invoke handlers)

__all__ = [
    "CreateBatchDayEntryCommandHandler",
    "DeleteSetupDayEntryCommandHandler",
    "StartFloweringCommandHandler",
]

import logging
from datetime import date
from typing import Callable, List

from sqlalchemy.ext.asyncio import AsyncSession

from growguide.modules.cultivation.application.commands.create_batch_day_entry import CreateBatchDayEntryCommand
from growguide.modules.cultivation.application.commands.delete_setup_day_entry import DeleteSetupDayEntryCommand
from growguide.modules.cultivation.application.commands.start_flowering import StartFloweringCommand
from growguide.modules.cultivation.application.dto.day_entry_dto import (
    BatchDayEntryResultDTO,
    DeleteSetupDayEntryResultDTO,
    SetupDayEntryDTO,
    StartFloweringResultDTO,
)
from growguide.modules.cultivation.domain.models.day_entry import PlantDayEntry, SetupDayEntry
from growguide.modules.cultivation.domain.models.setup import Plant, Setup
from growguide.modules.cultivation.domain.repositories.day_entry_repository import DuplicateDayEntryError
from growguide.modules.cultivation.domain.services.age_calculator import day_number, is_before_start
from growguide.modules.cultivation.domain.services.duplicate_guard import DuplicateEntryGuard
from growguide.modules.cultivation.domain.services.fertilizer_service import FertilizerAssociationManager
from growguide.modules.cultivation.infrastructure.database import CultivationRepositories
from growguide.shared.core.exceptions import (
    DayEntryNotFoundError,
    NotFoundError,
    SetupDayConflictError,
    SetupNotFoundError,
    ValidationError,
)
from growguide.shared.infrastructure.database.session import DatabaseSessionManager

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[AsyncSession], CultivationRepositories]


async def _get_owned_setup(repositories: CultivationRepositories, setup_id: int, user_id: int) -> Setup:
    setup = await repositories.setups.get_owned(setup_id, user_id)
    if setup is None:
        raise SetupNotFoundError(setup_id, user_id=user_id)
    return setup


class CreateBatchDayEntryCommandHandler:
    """
    Fans one setup day entry out to every member plant.

    Runs as a single transaction: the setup entry, every plant entry and
    every fertilizer row commit together or not at all. Plants already
    logged for the date are skipped, never overwritten.
    """

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        repository_factory: RepositoryFactory = CultivationRepositories,
    ):
        self._session_manager = session_manager
        self._repository_factory = repository_factory

    async def handle(self, command: CreateBatchDayEntryCommand) -> BatchDayEntryResultDTO:
        if command.date is None:
            raise ValidationError("Date is required", field="date", constraint="required")

        entry_date = command.date
        logger.info(f"Starting day entry fanout for setup {command.setup_id} on {entry_date}")

        async with self._session_manager.transaction("create_batch_day_entry") as session:
            repositories = self._repository_factory(session)
            guard = DuplicateEntryGuard(repositories.day_entries)
            fertilizer_manager = FertilizerAssociationManager(repositories.fertilizers)

            setup = await _get_owned_setup(repositories, command.setup_id, command.user_id)
            await guard.ensure_setup_day_available(setup.id, entry_date)

            members = await repositories.setups.list_member_plants(setup.id)
            self._validate_distribution(command, members)

            care = command.care_fields()
            watering_amounts = command.watering_amounts([plant.id for plant in members])
            try:
                setup_day = await repositories.day_entries.create_setup_day(
                    SetupDayEntry(setup_id=setup.id, date=entry_date, **care.model_dump())
                )
            except DuplicateDayEntryError:
                existing = await repositories.day_entries.get_setup_day(setup.id, entry_date)
                raise SetupDayConflictError(
                    setup_id=setup.id,
                    entry_date=entry_date,
                    existing_day_entry=existing.model_dump(mode="json") if existing else None,
                )

            setup_fertilizers = await fertilizer_manager.attach(
                command.fertilizers, setup_day_id=setup_day.id
            )

            created = 0
            skipped: List[int] = []
            for plant in members:
                if await guard.plant_day_exists(plant.id, entry_date):
                    logger.info(f"Plant {plant.id} already has an entry for {entry_date}, skipping")
                    skipped.append(plant.id)
                    continue

                age = day_number(entry_date, plant.start_date)
                if is_before_start(entry_date, plant.start_date):
                    logger.warning(
                        f"Entry date {entry_date} precedes start date {plant.start_date} "
                        f"of plant {plant.id} (day {age})"
                    )

                try:
                    plant_day = await repositories.day_entries.create_plant_day(
                        PlantDayEntry(
                            plant_id=plant.id,
                            date=entry_date,
                            day_number=age,
                            setup_entry_id=setup_day.id,
                            **care.model_dump(exclude={"watering_amount"}),
                            watering_amount=watering_amounts[plant.id],
                        )
                    )
                except DuplicateDayEntryError:
                    logger.info(f"Plant {plant.id} was logged concurrently for {entry_date}, skipping")
                    skipped.append(plant.id)
                    continue

                await fertilizer_manager.attach(command.fertilizers, plant_day_id=plant_day.id)
                created += 1

            flowering_started = 0
            if command.flowering:
                flowering_started = await repositories.setups.start_flowering(
                    [plant.id for plant in members], entry_date
                )

        mismatch = None
        if command.custom_distribution is not None:
            mismatch = sum(s.amount for s in command.custom_distribution) - command.watering_amount
            if mismatch:
                logger.warning(
                    f"Custom distribution for setup {setup.id} differs from total "
                    f"{command.watering_amount} by {mismatch}"
                )

        logger.info(
            f"Day entry {setup_day.id} committed for setup {setup.id}: "
            f"{created} created, {len(skipped)} skipped of {len(members)} plant(s)"
        )

        return BatchDayEntryResultDTO(
            day_entry=SetupDayEntryDTO.from_domain(setup_day, setup_fertilizers),
            affected_plants=len(members),
            created_plant_days=created,
            skipped_plant_ids=skipped,
            distribution_mismatch=mismatch,
            flowering_started=flowering_started,
        )

    def _validate_distribution(self, command: CreateBatchDayEntryCommand, members: List[Plant]) -> None:
        """Distribution entries must name distinct current members."""
        if command.custom_distribution is None:
            return

        member_ids = {plant.id for plant in members}
        seen = set()
        for share in command.custom_distribution:
            if share.plant_id in seen:
                raise ValidationError(
                    f"Plant {share.plant_id} appears more than once in the distribution",
                    field="custom_distribution",
                    value=share.plant_id,
                    constraint="unique plant_id",
                )
            if share.plant_id not in member_ids:
                raise ValidationError(
                    f"Plant {share.plant_id} is not a member of setup {command.setup_id}",
                    field="custom_distribution",
                    value=share.plant_id,
                    constraint="setup member",
                )
            seen.add(share.plant_id)


class DeleteSetupDayEntryCommandHandler:
    """
    Deletes a setup day entry together with the plant entries it produced
    and every fertilizer row attached to either.
    """

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        repository_factory: RepositoryFactory = CultivationRepositories,
    ):
        self._session_manager = session_manager
        self._repository_factory = repository_factory

    async def handle(self, command: DeleteSetupDayEntryCommand) -> DeleteSetupDayEntryResultDTO:
        async with self._session_manager.transaction("delete_setup_day_entry") as session:
            repositories = self._repository_factory(session)
            fertilizer_manager = FertilizerAssociationManager(repositories.fertilizers)

            setup = await _get_owned_setup(repositories, command.setup_id, command.user_id)
            entry = await repositories.day_entries.get_setup_day_by_id(setup.id, command.day_entry_id)
            if entry is None:
                raise DayEntryNotFoundError(command.day_entry_id, setup_id=setup.id)

            deleted_fertilizers = await fertilizer_manager.detach_setup_day(entry.id)

            plant_days = await repositories.day_entries.list_plant_days_for_setup_day(entry.id)
            for plant_day in plant_days:
                deleted_fertilizers += await fertilizer_manager.detach_plant_day(plant_day.id)
                await repositories.day_entries.delete_plant_day(plant_day.id)

            await repositories.day_entries.delete_setup_day(entry.id)

        logger.info(
            f"Deleted setup day entry {entry.id} with {len(plant_days)} plant entries "
            f"and {deleted_fertilizers} fertilizer line(s)"
        )
        return DeleteSetupDayEntryResultDTO(
            day_entry_id=entry.id,
            deleted_plant_days=len(plant_days),
            deleted_fertilizers=deleted_fertilizers,
        )


class StartFloweringCommandHandler:

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        repository_factory: RepositoryFactory = CultivationRepositories,
    ):
        self._session_manager = session_manager
        self._repository_factory = repository_factory

    async def handle(self, command: StartFloweringCommand) -> StartFloweringResultDTO:
        flowering_date = command.flowering_date or date.today()

        async with self._session_manager.transaction("start_flowering") as session:
            repositories = self._repository_factory(session)
            setup = await _get_owned_setup(repositories, command.setup_id, command.user_id)

            members = await repositories.setups.list_member_plants(setup.id)
            if not members:
                raise NotFoundError(
                    "No plants found in this setup",
                    resource_type="plant",
                    details={"setup_id": setup.id},
                )

            updated = await repositories.setups.start_flowering(
                [plant.id for plant in members], flowering_date
            )

        return StartFloweringResultDTO(
            setup_id=setup.id,
            flowering_date=flowering_date,
            updated_plants=updated,
        )
