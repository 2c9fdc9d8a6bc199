# 📄 File: growguide/modules/cultivation/domain/repositories/day_entry_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how daily care records for setups and plants are saved, found and removed
# 🧪 Purpose (Technical Summary):
# Repository interface for SetupDayEntry and PlantDayEntry persistence, including the
# lookups the duplicate guard and cascade deletion rely on
# 🔗 Dependencies:
# Domain models (SetupDayEntry, PlantDayEntry), typing, abc
# 🔄 Connected Modules / Calls From:
# Command/query handlers, DuplicateEntryGuard, infrastructure implementation

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ..models.day_entry import PlantDayEntry, SetupDayEntry


class DuplicateDayEntryError(Exception):
    """
    Raised by implementations when a unique (owner, date) constraint rejects
    an insert, for example because a concurrent request won the race.
    """


class DayEntryRepository(ABC):
    """
    Repository interface for setup and plant day entries.

    All methods run inside the caller's transaction.
    """

    # ------------------------------------------------------------------
    # Setup day entries
    # ------------------------------------------------------------------

    @abstractmethod
    async def get_setup_day(self, setup_id: int, entry_date: date) -> Optional[SetupDayEntry]:
        pass

    @abstractmethod
    async def get_setup_day_by_id(self, setup_id: int, day_entry_id: int) -> Optional[SetupDayEntry]:
        """Get a setup day entry by id, only if it belongs to ``setup_id``."""
        pass

    @abstractmethod
    async def list_setup_days(self, setup_id: int) -> List[SetupDayEntry]:
        """List a setup's day entries, newest date first."""
        pass

    @abstractmethod
    async def create_setup_day(self, entry: SetupDayEntry) -> SetupDayEntry:
        """
        Insert a setup day entry.

        Raises:
            DuplicateDayEntryError: If the setup already has an entry for the date
        """
        pass

    @abstractmethod
    async def delete_setup_day(self, day_entry_id: int) -> bool:
        pass

    # ------------------------------------------------------------------
    # Plant day entries
    # ------------------------------------------------------------------

    @abstractmethod
    async def get_plant_day(self, plant_id: int, entry_date: date) -> Optional[PlantDayEntry]:
        pass

    @abstractmethod
    async def create_plant_day(self, entry: PlantDayEntry) -> PlantDayEntry:
        """
        Insert a plant day entry without disturbing the surrounding
        transaction if it is rejected.

        Raises:
            DuplicateDayEntryError: If the plant already has an entry for the date
        """
        pass

    @abstractmethod
    async def list_plant_days_for_setup_day(self, setup_day_id: int) -> List[PlantDayEntry]:
        """Plant entries whose ``setup_entry_id`` points at the setup entry."""
        pass

    @abstractmethod
    async def delete_plant_day(self, plant_day_id: int) -> bool:
        pass
