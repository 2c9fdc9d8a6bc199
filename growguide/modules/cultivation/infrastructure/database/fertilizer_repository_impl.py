# 📄 File: growguide/modules/cultivation/infrastructure/database/fertilizer_repository_impl.py
#
# 🧭 Purpose (Layman Explanation):
# Stores and removes fertilizer records attached to setup or plant day logs.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of FertilizerRepository over the fertilizer_usage table.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - FertilizerUsageModel, FertilizerUsage domain model
#
# 🔄 Connected Modules / Calls From:
# - FertilizerAssociationManager

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from growguide.modules.cultivation.domain.models.fertilizer import FertilizerUsage
from growguide.modules.cultivation.domain.repositories.fertilizer_repository import FertilizerRepository
from growguide.modules.cultivation.infrastructure.database.models import FertilizerUsageModel
from growguide.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class FertilizerRepositoryImpl(FertilizerRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(
        self,
        name: str,
        amount: Optional[str],
        setup_day_id: Optional[int] = None,
        plant_day_id: Optional[int] = None,
    ) -> FertilizerUsage:
        model = FertilizerUsageModel(
            fertilizer_name=name,
            amount=amount,
            setup_day_id=setup_day_id,
            plant_day_id=plant_day_id,
        )
        try:
            self._session.add(model)
            await self._session.flush()
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error adding fertilizer usage '{name}': {str(e)}")
            raise RepositoryError(
                "Failed to add fertilizer usage", operation="add", entity="fertilizer_usage"
            ) from e

    async def list_for_setup_day(self, setup_day_id: int) -> List[FertilizerUsage]:
        return await self._list(FertilizerUsageModel.setup_day_id == setup_day_id)

    async def list_for_plant_day(self, plant_day_id: int) -> List[FertilizerUsage]:
        return await self._list(FertilizerUsageModel.plant_day_id == plant_day_id)

    async def delete_for_setup_day(self, setup_day_id: int) -> int:
        return await self._delete(FertilizerUsageModel.setup_day_id == setup_day_id)

    async def delete_for_plant_day(self, plant_day_id: int) -> int:
        return await self._delete(FertilizerUsageModel.plant_day_id == plant_day_id)

    async def _list(self, condition) -> List[FertilizerUsage]:
        try:
            stmt = select(FertilizerUsageModel).where(condition).order_by(FertilizerUsageModel.id)
            result = await self._session.execute(stmt)
            return [self._model_to_domain(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing fertilizer usage: {str(e)}")
            raise RepositoryError(
                "Failed to list fertilizer usage", operation="list", entity="fertilizer_usage"
            ) from e

    async def _delete(self, condition) -> int:
        try:
            result = await self._session.execute(delete(FertilizerUsageModel).where(condition))
            return result.rowcount

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting fertilizer usage: {str(e)}")
            raise RepositoryError(
                "Failed to delete fertilizer usage", operation="delete", entity="fertilizer_usage"
            ) from e

    def _model_to_domain(self, model: FertilizerUsageModel) -> FertilizerUsage:
        return FertilizerUsage(
            id=model.id,
            name=model.fertilizer_name,
            amount=model.amount,
            setup_day_id=model.setup_day_id,
            plant_day_id=model.plant_day_id,
        )
