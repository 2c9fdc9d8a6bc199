from datetime import date
from unittest.mock import AsyncMock

import pytest

from growguide.modules.cultivation.domain.models.day_entry import PlantDayEntry, SetupDayEntry
from growguide.modules.cultivation.domain.models.fertilizer import FertilizerLine, FertilizerUsage
from growguide.modules.cultivation.domain.services.duplicate_guard import DuplicateEntryGuard
from growguide.modules.cultivation.domain.services.fertilizer_service import FertilizerAssociationManager
from growguide.shared.core.exceptions import ConflictError, SetupDayConflictError


class InMemoryFertilizerRepository:
    def __init__(self):
        self.rows = []

    async def add(self, name, amount, setup_day_id=None, plant_day_id=None):
        usage = FertilizerUsage(
            id=len(self.rows) + 1,
            name=name,
            amount=amount,
            setup_day_id=setup_day_id,
            plant_day_id=plant_day_id,
        )
        self.rows.append(usage)
        return usage

    async def list_for_setup_day(self, setup_day_id):
        return [r for r in self.rows if r.setup_day_id == setup_day_id]

    async def list_for_plant_day(self, plant_day_id):
        return [r for r in self.rows if r.plant_day_id == plant_day_id]

    async def delete_for_setup_day(self, setup_day_id):
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.setup_day_id != setup_day_id]
        return before - len(self.rows)

    async def delete_for_plant_day(self, plant_day_id):
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.plant_day_id != plant_day_id]
        return before - len(self.rows)


class TestFertilizerAssociationManager:

    async def test_same_lines_replicated_to_each_scope(self):
        repository = InMemoryFertilizerRepository()
        manager = FertilizerAssociationManager(repository)
        lines = [FertilizerLine(name="GrowA", amount="10ml"), FertilizerLine(name="BloomB", amount="2 tsp")]

        await manager.attach(lines, setup_day_id=1)
        await manager.attach(lines, plant_day_id=7)
        await manager.attach(lines, plant_day_id=8)

        assert len(repository.rows) == 6
        for plant_day_id in (7, 8):
            stored = await manager.list_for_plant_day(plant_day_id)
            assert [(f.name, f.amount) for f in stored] == [("GrowA", "10ml"), ("BloomB", "2 tsp")]

    async def test_blank_lines_are_dropped(self):
        repository = InMemoryFertilizerRepository()
        manager = FertilizerAssociationManager(repository)

        attached = await manager.attach(
            [FertilizerLine(name="  ", amount="5ml"), FertilizerLine(name="GrowA", amount=None)],
            setup_day_id=1,
        )

        assert [f.name for f in attached] == ["GrowA"]
        assert attached[0].amount is None

    @pytest.mark.parametrize("scopes", [{}, {"setup_day_id": 1, "plant_day_id": 2}])
    async def test_exactly_one_scope_required(self, scopes):
        manager = FertilizerAssociationManager(InMemoryFertilizerRepository())

        with pytest.raises(ValueError):
            await manager.attach([FertilizerLine(name="GrowA")], **scopes)

    async def test_detach_counts_only_its_scope(self):
        repository = InMemoryFertilizerRepository()
        manager = FertilizerAssociationManager(repository)
        await manager.attach([FertilizerLine(name="GrowA"), FertilizerLine(name="CalMag")], setup_day_id=1)
        await manager.attach([FertilizerLine(name="GrowA")], plant_day_id=3)

        assert await manager.detach_setup_day(1) == 2
        assert await manager.detach_plant_day(3) == 1
        assert repository.rows == []


def test_fertilizer_usage_requires_single_scope():
    with pytest.raises(ValueError):
        FertilizerUsage(id=1, name="GrowA", setup_day_id=1, plant_day_id=2)


class TestDuplicateEntryGuard:

    async def test_existing_setup_day_raises_conflict_with_entry(self):
        existing = SetupDayEntry(id=42, setup_id=3, date=date(2024, 1, 10), watering_amount=300)
        repository = AsyncMock()
        repository.get_setup_day.return_value = existing
        guard = DuplicateEntryGuard(repository)

        with pytest.raises(SetupDayConflictError) as exc_info:
            await guard.ensure_setup_day_available(3, date(2024, 1, 10))

        error = exc_info.value
        assert isinstance(error, ConflictError)
        assert error.status_code == 409
        assert error.existing_day_entry["id"] == 42
        assert error.details["existing_day_entry"]["date"] == "2024-01-10"
        repository.get_setup_day.assert_awaited_once_with(3, date(2024, 1, 10))

    async def test_free_date_passes(self):
        repository = AsyncMock()
        repository.get_setup_day.return_value = None

        await DuplicateEntryGuard(repository).ensure_setup_day_available(3, date(2024, 1, 10))

    async def test_plant_duplicates_are_reported_not_raised(self):
        repository = AsyncMock()
        repository.get_plant_day.side_effect = [
            PlantDayEntry(id=5, plant_id=1, date=date(2024, 1, 10)),
            None,
        ]
        guard = DuplicateEntryGuard(repository)

        assert await guard.plant_day_exists(1, date(2024, 1, 10)) is True
        assert await guard.plant_day_exists(2, date(2024, 1, 10)) is False
