# 📄 File: growguide/modules/cultivation/domain/services/fertilizer_service.py
# 🧭 Purpose (Layman Explanation):
# Records which fertilizers were given on a day, copying the same list to the setup and to
# each plant, and removes them again when the day is deleted
# 🧪 Purpose (Technical Summary):
# Writes FertilizerUsage rows to exactly one scope (setup day or plant day), replicating the
# submitted lines verbatim; blank lines are dropped
# 🔗 Dependencies:
# FertilizerRepository, domain models
# 🔄 Connected Modules / Calls From:
# Fanout and cascade deletion handlers, list query handler

import logging
from typing import List, Optional, Sequence

from ..models.fertilizer import FertilizerLine, FertilizerUsage
from ..repositories.fertilizer_repository import FertilizerRepository

logger = logging.getLogger(__name__)


class FertilizerAssociationManager:

    def __init__(self, fertilizer_repository: FertilizerRepository):
        self.fertilizer_repository = fertilizer_repository

    async def attach(
        self,
        lines: Sequence[FertilizerLine],
        setup_day_id: Optional[int] = None,
        plant_day_id: Optional[int] = None,
    ) -> List[FertilizerUsage]:
        """
        Store one usage row per non-blank line for the given scope.

        Exactly one of ``setup_day_id`` and ``plant_day_id`` must be set.
        Amounts are copied as given; nothing is scaled.
        """
        if (setup_day_id is None) == (plant_day_id is None):
            raise ValueError("Exactly one of setup_day_id or plant_day_id is required")

        attached = []
        for line in lines:
            if line.is_blank:
                continue
            usage = await self.fertilizer_repository.add(
                name=line.name.strip(),
                amount=line.amount,
                setup_day_id=setup_day_id,
                plant_day_id=plant_day_id,
            )
            attached.append(usage)

        if attached:
            logger.debug(
                f"Attached {len(attached)} fertilizer(s) to "
                f"{'setup day ' + str(setup_day_id) if setup_day_id else 'plant day ' + str(plant_day_id)}"
            )
        return attached

    async def list_for_setup_day(self, setup_day_id: int) -> List[FertilizerUsage]:
        return await self.fertilizer_repository.list_for_setup_day(setup_day_id)

    async def list_for_plant_day(self, plant_day_id: int) -> List[FertilizerUsage]:
        return await self.fertilizer_repository.list_for_plant_day(plant_day_id)

    async def detach_setup_day(self, setup_day_id: int) -> int:
        return await self.fertilizer_repository.delete_for_setup_day(setup_day_id)

    async def detach_plant_day(self, plant_day_id: int) -> int:
        return await self.fertilizer_repository.delete_for_plant_day(plant_day_id)
