# 📄 File: growguide/modules/cultivation/presentation/api/v1/setup_days.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for a setup's daily log: record a day for all plants
# at once, list or delete logged days, preview the water split and start flowering.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for setup day entries. Endpoints convert requests to commands/queries,
# delegate to handlers and map DTOs to camelCase responses. Domain exceptions propagate to
# the global exception handlers.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - slowapi (write endpoint limits)
# - Cultivation handlers, schemas and dependency providers
# - growguide.shared.core.dependencies (caller identity)
#
# 🔄 Connected Modules / Calls From:
# - growguide.api.v1.router (router inclusion)

"""
Setup Day API Endpoints

Endpoints:
- POST /setups/{setup_id}/days: Log a day for every plant in the setup
- GET /setups/{setup_id}/days: List the setup's logged days
- DELETE /setups/{setup_id}/days/{day_id}: Delete a logged day and its plant entries
- POST /setups/{setup_id}/water-distribution: Preview the per-plant water split
- POST /setups/{setup_id}/start-flowering: Mark member plants as flowering
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from growguide.modules.cultivation.application.commands.delete_setup_day_entry import DeleteSetupDayEntryCommand
from growguide.modules.cultivation.application.handlers.command_handlers import (
    CreateBatchDayEntryCommandHandler,
    DeleteSetupDayEntryCommandHandler,
    StartFloweringCommandHandler,
)
from growguide.modules.cultivation.application.handlers.query_handlers import (
    ListSetupDayEntriesQueryHandler,
    WaterDistributionPreviewQueryHandler,
)
from growguide.modules.cultivation.application.queries.list_setup_day_entries import ListSetupDayEntriesQuery
from growguide.modules.cultivation.presentation.api.schemas.day_entry_schemas import (
    BatchDayEntryResponse,
    CreateSetupDayEntryRequest,
    DeleteSetupDayEntryResponse,
    SetupDayEntryListResponse,
    SetupDayEntryResponse,
    StartFloweringRequest,
    StartFloweringResponse,
    WaterDistributionRequest,
    WaterDistributionResponse,
)
from growguide.modules.cultivation.presentation.dependencies import (
    get_create_batch_day_entry_handler,
    get_delete_setup_day_entry_handler,
    get_list_setup_day_entries_handler,
    get_start_flowering_handler,
    get_water_distribution_handler,
)
from growguide.shared.core.dependencies import CurrentUser, get_current_user
from growguide.shared.core.rate_limiting import WRITE_LIMIT, limiter

logger = logging.getLogger(__name__)

setup_days_router = APIRouter()

_ERROR_RESPONSES = {
    401: {"description": "Caller identity missing"},
    404: {"description": "Setup not found for this user"},
}


@setup_days_router.post(
    "/{setup_id}/days",
    response_model=BatchDayEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log a day for every plant in a setup",
    responses={
        **_ERROR_RESPONSES,
        409: {"description": "The setup already has an entry for this date"},
        422: {"description": "Missing date or invalid distribution"},
    },
)
@limiter.limit(WRITE_LIMIT)
async def create_setup_day_entry(
    request: Request,
    setup_id: int,
    payload: CreateSetupDayEntryRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: CreateBatchDayEntryCommandHandler = Depends(get_create_batch_day_entry_handler),
) -> BatchDayEntryResponse:
    """
    Create one setup day entry and fan it out to the member plants.

    Plants that already have an entry for the date are skipped and listed
    in ``skippedPlantIds``. A second entry for the same setup and date is
    rejected with 409 and the existing entry in ``details``.
    """
    result = await handler.handle(payload.to_command(setup_id, current_user.user_id))
    return BatchDayEntryResponse.from_dto(result)


@setup_days_router.get(
    "/{setup_id}/days",
    response_model=SetupDayEntryListResponse,
    summary="List a setup's day entries",
    responses=_ERROR_RESPONSES,
)
async def list_setup_day_entries(
    setup_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListSetupDayEntriesQueryHandler = Depends(get_list_setup_day_entries_handler),
) -> SetupDayEntryListResponse:
    entries = await handler.handle(
        ListSetupDayEntriesQuery(setup_id=setup_id, user_id=current_user.user_id)
    )
    return SetupDayEntryListResponse(
        day_entries=[SetupDayEntryResponse.from_dto(entry) for entry in entries],
        total=len(entries),
    )


@setup_days_router.delete(
    "/{setup_id}/days/{day_id}",
    response_model=DeleteSetupDayEntryResponse,
    summary="Delete a setup day entry and everything it produced",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(WRITE_LIMIT)
async def delete_setup_day_entry(
    request: Request,
    setup_id: int,
    day_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeleteSetupDayEntryCommandHandler = Depends(get_delete_setup_day_entry_handler),
) -> DeleteSetupDayEntryResponse:
    result = await handler.handle(
        DeleteSetupDayEntryCommand(
            setup_id=setup_id,
            day_entry_id=day_id,
            user_id=current_user.user_id,
        )
    )
    return DeleteSetupDayEntryResponse.from_dto(result)


@setup_days_router.post(
    "/{setup_id}/water-distribution",
    response_model=WaterDistributionResponse,
    summary="Preview how water is split across the setup's plants",
    responses={
        **_ERROR_RESPONSES,
        422: {"description": "Override outside 0..total"},
    },
)
async def preview_water_distribution(
    setup_id: int,
    payload: WaterDistributionRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: WaterDistributionPreviewQueryHandler = Depends(get_water_distribution_handler),
) -> WaterDistributionResponse:
    """Nothing is stored; send the shares back as ``customDistribution`` to use them."""
    result = await handler.handle(payload.to_query(setup_id, current_user.user_id))
    return WaterDistributionResponse.from_dto(result)


@setup_days_router.post(
    "/{setup_id}/start-flowering",
    response_model=StartFloweringResponse,
    summary="Start flowering for the setup's plants",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(WRITE_LIMIT)
async def start_flowering(
    request: Request,
    setup_id: int,
    payload: Optional[StartFloweringRequest] = None,
    current_user: CurrentUser = Depends(get_current_user),
    handler: StartFloweringCommandHandler = Depends(get_start_flowering_handler),
) -> StartFloweringResponse:
    request_body = payload or StartFloweringRequest()
    result = await handler.handle(request_body.to_command(setup_id, current_user.user_id))
    logger.info(f"Setup {setup_id} flowering started for {result.updated_plants} plant(s)")
    return StartFloweringResponse.from_dto(result)
