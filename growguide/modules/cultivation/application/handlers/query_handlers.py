# 📄 File: growguide/modules/cultivation/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers read-only questions: which days were logged for a setup, and how a day's water
# would be split between its plants.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers running on read-only sessions. The distribution preview wraps the pure
# allocator with live membership and the setup's informational water limit.
#
# 🔗 Dependencies:
# - growguide.shared.infrastructure.database.session (read-only sessions)
# - Cultivation repositories, water distribution allocator
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/setup_days.py

import logging
from typing import List

from growguide.modules.cultivation.application.dto.day_entry_dto import (
    SetupDayEntryDTO,
    WaterDistributionPreviewDTO,
)
from growguide.modules.cultivation.application.handlers.command_handlers import RepositoryFactory
from growguide.modules.cultivation.application.queries.list_setup_day_entries import ListSetupDayEntriesQuery
from growguide.modules.cultivation.application.queries.preview_water_distribution import (
    PreviewWaterDistributionQuery,
)
from growguide.modules.cultivation.domain.services.fertilizer_service import FertilizerAssociationManager
from growguide.modules.cultivation.domain.services.water_distribution import (
    apply_override,
    distribution_mismatch,
    distribution_total,
    equal_split,
)
from growguide.modules.cultivation.infrastructure.database import CultivationRepositories
from growguide.shared.core.exceptions import SetupNotFoundError, ValidationError
from growguide.shared.infrastructure.database.session import DatabaseSessionManager

logger = logging.getLogger(__name__)


class ListSetupDayEntriesQueryHandler:
    """Setup day entries of an owned setup, newest first, with fertilizers."""

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        repository_factory: RepositoryFactory = CultivationRepositories,
    ):
        self._session_manager = session_manager
        self._repository_factory = repository_factory

    async def handle(self, query: ListSetupDayEntriesQuery) -> List[SetupDayEntryDTO]:
        async with self._session_manager.read_only() as session:
            repositories = self._repository_factory(session)
            setup = await repositories.setups.get_owned(query.setup_id, query.user_id)
            if setup is None:
                raise SetupNotFoundError(query.setup_id, user_id=query.user_id)

            fertilizer_manager = FertilizerAssociationManager(repositories.fertilizers)
            entries = await repositories.day_entries.list_setup_days(setup.id)

            return [
                SetupDayEntryDTO.from_domain(
                    entry, await fertilizer_manager.list_for_setup_day(entry.id)
                )
                for entry in entries
            ]


class WaterDistributionPreviewQueryHandler:
    """
    Computes slider values for a setup without persisting anything.

    The result only reaches storage if the client sends it back as a
    custom distribution on the day entry.
    """

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        repository_factory: RepositoryFactory = CultivationRepositories,
    ):
        self._session_manager = session_manager
        self._repository_factory = repository_factory

    async def handle(self, query: PreviewWaterDistributionQuery) -> WaterDistributionPreviewDTO:
        async with self._session_manager.read_only() as session:
            repositories = self._repository_factory(session)
            setup = await repositories.setups.get_owned(query.setup_id, query.user_id)
            if setup is None:
                raise SetupNotFoundError(query.setup_id, user_id=query.user_id)

            if query.shares is None:
                members = await repositories.setups.list_member_plants(setup.id)
                shares = equal_split(query.total, [plant.id for plant in members])
            else:
                shares = list(query.shares)

        if query.override is not None:
            if not float(query.override.amount).is_integer():
                raise ValidationError(
                    "Override must be a whole amount",
                    field="override.amount",
                    value=query.override.amount,
                    constraint="integer",
                )
            shares = apply_override(
                shares,
                plant_id=query.override.plant_id,
                value=int(query.override.amount),
                total=query.total,
            )

        mismatch = distribution_mismatch(shares, query.total)
        warning = None
        if mismatch:
            warning = f"Distributed water differs from total by {mismatch:g}"
            logger.warning(f"Setup {setup.id} distribution preview: {warning}")

        return WaterDistributionPreviewDTO(
            setup_id=setup.id,
            total=query.total,
            shares=shares,
            distributed=distribution_total(shares),
            mismatch=mismatch,
            warning=warning,
            water_limit=setup.water_limit,
            exceeds_water_limit=setup.water_limit is not None and query.total > setup.water_limit,
        )
