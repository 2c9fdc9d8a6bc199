# 📄 File: growguide/modules/cultivation/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each cultivation endpoint a ready-to-use processor connected to this app's database
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers building command/query handlers around the lifespan-owned
# DatabaseSessionManager
# 🔗 Dependencies:
# FastAPI Depends, growguide.shared.core.dependencies, cultivation handlers
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/setup_days.py; overridden in tests

from fastapi import Depends

from growguide.modules.cultivation.application.handlers.command_handlers import (
    CreateBatchDayEntryCommandHandler,
    DeleteSetupDayEntryCommandHandler,
    StartFloweringCommandHandler,
)
from growguide.modules.cultivation.application.handlers.query_handlers import (
    ListSetupDayEntriesQueryHandler,
    WaterDistributionPreviewQueryHandler,
)
from growguide.shared.core.dependencies import get_session_manager
from growguide.shared.infrastructure.database.session import DatabaseSessionManager


def get_create_batch_day_entry_handler(
    session_manager: DatabaseSessionManager = Depends(get_session_manager),
) -> CreateBatchDayEntryCommandHandler:
    return CreateBatchDayEntryCommandHandler(session_manager)


def get_delete_setup_day_entry_handler(
    session_manager: DatabaseSessionManager = Depends(get_session_manager),
) -> DeleteSetupDayEntryCommandHandler:
    return DeleteSetupDayEntryCommandHandler(session_manager)


def get_start_flowering_handler(
    session_manager: DatabaseSessionManager = Depends(get_session_manager),
) -> StartFloweringCommandHandler:
    return StartFloweringCommandHandler(session_manager)


def get_list_setup_day_entries_handler(
    session_manager: DatabaseSessionManager = Depends(get_session_manager),
) -> ListSetupDayEntriesQueryHandler:
    return ListSetupDayEntriesQueryHandler(session_manager)


def get_water_distribution_handler(
    session_manager: DatabaseSessionManager = Depends(get_session_manager),
) -> WaterDistributionPreviewQueryHandler:
    return WaterDistributionPreviewQueryHandler(session_manager)
