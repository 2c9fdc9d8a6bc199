# 📄 File: growguide/modules/cultivation/domain/services/duplicate_guard.py
# 🧭 Purpose (Layman Explanation):
# Stops a second log for the same setup on the same day, but quietly leaves alone plants that
# were already logged individually that day
# 🧪 Purpose (Technical Summary):
# Asymmetric duplicate policy: setup-level duplicates raise SetupDayConflictError carrying the
# existing entry, plant-level duplicates are reported as a boolean for the caller to skip
# 🔗 Dependencies:
# DayEntryRepository, shared exceptions
# 🔄 Connected Modules / Calls From:
# CreateBatchDayEntryCommandHandler

import logging
from datetime import date

from growguide.shared.core.exceptions import SetupDayConflictError

from ..repositories.day_entry_repository import DayEntryRepository

logger = logging.getLogger(__name__)


class DuplicateEntryGuard:
    """Enforces one setup entry per date and detects per-plant duplicates."""

    def __init__(self, day_entry_repository: DayEntryRepository):
        self.day_entry_repository = day_entry_repository

    async def ensure_setup_day_available(self, setup_id: int, entry_date: date) -> None:
        """
        Raises:
            SetupDayConflictError: If the setup already has an entry for the date
        """
        existing = await self.day_entry_repository.get_setup_day(setup_id, entry_date)
        if existing is not None:
            logger.info(
                f"Setup {setup_id} already has day entry {existing.id} for {entry_date}"
            )
            raise SetupDayConflictError(
                setup_id=setup_id,
                entry_date=entry_date,
                existing_day_entry=existing.model_dump(mode="json"),
            )

    async def plant_day_exists(self, plant_id: int, entry_date: date) -> bool:
        return await self.day_entry_repository.get_plant_day(plant_id, entry_date) is not None
