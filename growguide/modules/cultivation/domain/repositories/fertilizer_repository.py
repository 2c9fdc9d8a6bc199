# 📄 File: growguide/modules/cultivation/domain/repositories/fertilizer_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how fertilizer lines attached to day entries are stored and removed
# 🧪 Purpose (Technical Summary):
# Repository interface for FertilizerUsage rows scoped to a setup day or a plant day
# 🔗 Dependencies:
# Domain models (FertilizerUsage), typing, abc
# 🔄 Connected Modules / Calls From:
# FertilizerAssociationManager, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.fertilizer import FertilizerUsage


class FertilizerRepository(ABC):

    @abstractmethod
    async def add(
        self,
        name: str,
        amount: Optional[str],
        setup_day_id: Optional[int] = None,
        plant_day_id: Optional[int] = None,
    ) -> FertilizerUsage:
        """Insert one usage row bound to exactly one of the two scopes."""
        pass

    @abstractmethod
    async def list_for_setup_day(self, setup_day_id: int) -> List[FertilizerUsage]:
        pass

    @abstractmethod
    async def list_for_plant_day(self, plant_day_id: int) -> List[FertilizerUsage]:
        pass

    @abstractmethod
    async def delete_for_setup_day(self, setup_day_id: int) -> int:
        """Returns the number of rows deleted."""
        pass

    @abstractmethod
    async def delete_for_plant_day(self, plant_day_id: int) -> int:
        """Returns the number of rows deleted."""
        pass
