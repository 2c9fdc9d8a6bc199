# 📄 File: growguide/modules/cultivation/infrastructure/database/setup_repository_impl.py
#
# 🧭 Purpose (Layman Explanation):
# Looks up a grower's setups and the plants currently in them, and marks plants as flowering.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of SetupRepository. Membership is read live inside the caller's
# transaction and ordered by setup_plants.id.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - Cultivation ORM models and domain models
# - growguide.shared.core.exceptions (RepositoryError)
#
# 🔄 Connected Modules / Calls From:
# - Cultivation command and query handlers (through CultivationRepositories)

import logging
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from growguide.modules.cultivation.domain.models.setup import Plant, Setup
from growguide.modules.cultivation.domain.repositories.setup_repository import SetupRepository
from growguide.modules.cultivation.infrastructure.database.models import (
    PlantModel,
    SetupMembershipModel,
    SetupModel,
)
from growguide.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class SetupRepositoryImpl(SetupRepository):
    """SQLAlchemy implementation of the SetupRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_owned(self, setup_id: int, user_id: int) -> Optional[Setup]:
        try:
            stmt = select(SetupModel).where(
                SetupModel.id == setup_id,
                SetupModel.user_id == user_id,
            )
            result = await self._session.execute(stmt)
            setup_model = result.scalar_one_or_none()

            if setup_model is None:
                logger.debug(f"Setup {setup_id} not found for user {user_id}")
                return None

            return Setup.model_validate(setup_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving setup {setup_id}: {str(e)}")
            raise RepositoryError(
                "Failed to retrieve setup", operation="get_owned", entity="setup"
            ) from e

    async def list_member_plants(self, setup_id: int) -> List[Plant]:
        try:
            stmt = (
                select(PlantModel)
                .join(SetupMembershipModel, SetupMembershipModel.plant_id == PlantModel.id)
                .where(SetupMembershipModel.setup_id == setup_id)
                .order_by(SetupMembershipModel.id)
            )
            result = await self._session.execute(stmt)
            plants = [Plant.model_validate(model) for model in result.scalars().all()]

            logger.debug(f"Setup {setup_id} has {len(plants)} member plant(s)")
            return plants

        except SQLAlchemyError as e:
            logger.error(f"Database error listing members of setup {setup_id}: {str(e)}")
            raise RepositoryError(
                "Failed to list setup members", operation="list_member_plants", entity="plant"
            ) from e

    async def start_flowering(self, plant_ids: Sequence[int], flowering_date: date) -> int:
        if not plant_ids:
            return 0

        try:
            stmt = (
                update(PlantModel)
                .where(
                    PlantModel.id.in_(list(plant_ids)),
                    PlantModel.flowering_start_date.is_(None),
                )
                .values(flowering_start_date=flowering_date)
                .execution_options(synchronize_session=False)
            )
            result = await self._session.execute(stmt)

            logger.info(f"Flowering started on {flowering_date} for {result.rowcount} plant(s)")
            return result.rowcount

        except SQLAlchemyError as e:
            logger.error(f"Database error starting flowering: {str(e)}")
            raise RepositoryError(
                "Failed to start flowering", operation="start_flowering", entity="plant"
            ) from e
