"""
Deleting a setup day entry removes what its fanout produced, and nothing else.
"""

from datetime import date

import pytest

from growguide.modules.cultivation.application.commands.create_batch_day_entry import CreateBatchDayEntryCommand
from growguide.modules.cultivation.application.commands.delete_setup_day_entry import DeleteSetupDayEntryCommand
from growguide.modules.cultivation.application.handlers.command_handlers import (
    CreateBatchDayEntryCommandHandler,
    DeleteSetupDayEntryCommandHandler,
)
from growguide.modules.cultivation.domain.models.fertilizer import FertilizerLine
from growguide.modules.cultivation.infrastructure.database.models import (
    FertilizerUsageModel,
    PlantDayEntryModel,
    SetupDayEntryModel,
)
from growguide.shared.core.exceptions import DayEntryNotFoundError, SetupNotFoundError
from tests.conftest import OTHER_USER_ID, OWNER_ID

pytestmark = pytest.mark.integration


async def fan_out(session_manager, setup_id, entry_date, fertilizers=("GrowA", "BloomB")):
    command = CreateBatchDayEntryCommand(
        setup_id=setup_id,
        user_id=OWNER_ID,
        date=entry_date,
        watered=True,
        watering_amount=200,
        fertilizers=[FertilizerLine(name=name, amount="5ml") for name in fertilizers],
    )
    return await CreateBatchDayEntryCommandHandler(session_manager).handle(command)


@pytest.fixture
def delete_handler(session_manager) -> DeleteSetupDayEntryCommandHandler:
    return DeleteSetupDayEntryCommandHandler(session_manager)


async def test_deletes_setup_entry_plant_entries_and_fertilizers(
    session_manager, delete_handler, greenhouse, count_rows
):
    setup_id, _ = greenhouse
    result = await fan_out(session_manager, setup_id, date(2024, 1, 10))
    assert await count_rows(FertilizerUsageModel) == 6

    deleted = await delete_handler.handle(
        DeleteSetupDayEntryCommand(setup_id=setup_id, day_entry_id=result.day_entry.id, user_id=OWNER_ID)
    )

    assert deleted.day_entry_id == result.day_entry.id
    assert deleted.deleted_plant_days == 2
    assert deleted.deleted_fertilizers == 6
    assert await count_rows(SetupDayEntryModel) == 0
    assert await count_rows(PlantDayEntryModel) == 0
    assert await count_rows(FertilizerUsageModel) == 0


async def test_direct_plant_entries_survive(session_manager, delete_handler, greenhouse, seeder, fetch_all):
    setup_id, (p1, p2) = greenhouse
    direct_entry_id = await seeder.plant_day(p2, date(2024, 1, 10), watering_amount=75)
    result = await fan_out(session_manager, setup_id, date(2024, 1, 10))
    assert result.skipped_plant_ids == [p2]

    deleted = await delete_handler.handle(
        DeleteSetupDayEntryCommand(setup_id=setup_id, day_entry_id=result.day_entry.id, user_id=OWNER_ID)
    )

    assert deleted.deleted_plant_days == 1
    remaining = await fetch_all(PlantDayEntryModel)
    assert [(e.id, e.plant_id, e.watering_amount) for e in remaining] == [(direct_entry_id, p2, 75)]


async def test_other_dates_are_untouched(session_manager, delete_handler, greenhouse, count_rows):
    setup_id, _ = greenhouse
    first = await fan_out(session_manager, setup_id, date(2024, 1, 10))
    await fan_out(session_manager, setup_id, date(2024, 1, 11), fertilizers=("GrowA",))

    await delete_handler.handle(
        DeleteSetupDayEntryCommand(setup_id=setup_id, day_entry_id=first.day_entry.id, user_id=OWNER_ID)
    )

    assert await count_rows(SetupDayEntryModel) == 1
    assert await count_rows(PlantDayEntryModel, PlantDayEntryModel.date == date(2024, 1, 11)) == 2
    assert await count_rows(FertilizerUsageModel) == 3


async def test_date_can_be_logged_again_after_delete(session_manager, delete_handler, greenhouse, count_rows):
    setup_id, _ = greenhouse
    first = await fan_out(session_manager, setup_id, date(2024, 1, 10))
    await delete_handler.handle(
        DeleteSetupDayEntryCommand(setup_id=setup_id, day_entry_id=first.day_entry.id, user_id=OWNER_ID)
    )

    again = await fan_out(session_manager, setup_id, date(2024, 1, 10))

    assert again.created_plant_days == 2
    assert await count_rows(SetupDayEntryModel) == 1


async def test_unknown_day_entry(delete_handler, greenhouse):
    setup_id, _ = greenhouse

    with pytest.raises(DayEntryNotFoundError):
        await delete_handler.handle(
            DeleteSetupDayEntryCommand(setup_id=setup_id, day_entry_id=9999, user_id=OWNER_ID)
        )


async def test_day_entry_of_another_setup(session_manager, delete_handler, greenhouse, seeder, count_rows):
    setup_id, _ = greenhouse
    other_setup_id, _ = await seeder.setup_with_plants([("Solo", date(2024, 1, 1))], name="Tent")
    other = await fan_out(session_manager, other_setup_id, date(2024, 1, 10))

    with pytest.raises(DayEntryNotFoundError):
        await delete_handler.handle(
            DeleteSetupDayEntryCommand(setup_id=setup_id, day_entry_id=other.day_entry.id, user_id=OWNER_ID)
        )

    assert await count_rows(SetupDayEntryModel) == 1


async def test_setup_owned_by_someone_else(session_manager, delete_handler, greenhouse, count_rows):
    setup_id, _ = greenhouse
    result = await fan_out(session_manager, setup_id, date(2024, 1, 10))

    with pytest.raises(SetupNotFoundError):
        await delete_handler.handle(
            DeleteSetupDayEntryCommand(
                setup_id=setup_id, day_entry_id=result.day_entry.id, user_id=OTHER_USER_ID
            )
        )

    assert await count_rows(PlantDayEntryModel) == 2
