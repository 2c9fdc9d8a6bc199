# 📄 File: growguide/modules/cultivation/domain/repositories/setup_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how we look up a user's setups and the plants that currently belong to them,
# without saying which database does the work
# 🧪 Purpose (Technical Summary):
# Repository interface for Setup reads, live membership reads and the batch flowering update
# 🔗 Dependencies:
# Domain models (Setup, Plant), typing, abc
# 🔄 Connected Modules / Calls From:
# Command/query handlers, infrastructure implementation

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence

from ..models.setup import Plant, Setup


class SetupRepository(ABC):
    """
    Repository interface for setups and their memberships.

    Implementations operate inside the caller's transaction; they never
    commit on their own.
    """

    @abstractmethod
    async def get_owned(self, setup_id: int, user_id: int) -> Optional[Setup]:
        """
        Get a setup only if it belongs to the given user.

        Returns:
            Setup entity if found and owned, None otherwise
        """
        pass

    @abstractmethod
    async def list_member_plants(self, setup_id: int) -> List[Plant]:
        """
        Get the setup's current member plants in membership order
        (the order plants were added to the setup).
        """
        pass

    @abstractmethod
    async def start_flowering(self, plant_ids: Sequence[int], flowering_date: date) -> int:
        """
        Set ``flowering_start_date`` on those plants that have none.

        Returns:
            Number of plants updated
        """
        pass
