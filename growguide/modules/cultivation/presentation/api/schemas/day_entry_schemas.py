# 📄 File: growguide/modules/cultivation/presentation/api/schemas/day_entry_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats the app sends when logging a setup day, previewing
# the water split or starting flowering, and the formats the service answers with.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the setup day endpoints. Requests accept camelCase
# or snake_case keys; responses are serialized in camelCase.
#
# 🔗 Dependencies:
# - pydantic (alias generation, validation)
# - Cultivation commands, queries and DTOs (conversion)
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/setup_days.py
# - FastAPI automatic request validation and response serialization

"""
Setup Day API Schemas

Request Schemas:
- CreateSetupDayEntryRequest: one day of care for a whole setup
- StartFloweringRequest: optional flowering date
- WaterDistributionRequest: total, current shares and an optional override

Response Schemas:
- BatchDayEntryResponse: created setup entry and per-plant fanout summary
- SetupDayEntryListResponse: setup day history
- DeleteSetupDayEntryResponse: cascade deletion counts
- StartFloweringResponse, WaterDistributionResponse
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from growguide.modules.cultivation.application.commands.create_batch_day_entry import CreateBatchDayEntryCommand
from growguide.modules.cultivation.application.commands.start_flowering import StartFloweringCommand
from growguide.modules.cultivation.application.dto.day_entry_dto import (
    BatchDayEntryResultDTO,
    DeleteSetupDayEntryResultDTO,
    SetupDayEntryDTO,
    StartFloweringResultDTO,
    WaterDistributionPreviewDTO,
)
from growguide.modules.cultivation.application.queries.preview_water_distribution import (
    PreviewWaterDistributionQuery,
)
from growguide.modules.cultivation.domain.models.fertilizer import FertilizerLine
from growguide.modules.cultivation.domain.models.water_share import WaterShare


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class FertilizerLineRequest(CamelModel):
    name: str = Field(default="", max_length=100, description="Fertilizer name")
    amount: Optional[str] = Field(default=None, max_length=50, description="Amount label, e.g. '10ml'")


class WaterShareRequest(CamelModel):
    plant_id: int = Field(..., description="Member plant")
    amount: float = Field(..., ge=0, description="Water for this plant")


class WaterOverrideRequest(CamelModel):
    """Slider position the operator set by hand; whole units only."""

    plant_id: int = Field(..., description="Member plant")
    amount: int = Field(..., ge=0, description="Water pinned for this plant")


class CreateSetupDayEntryRequest(CamelModel):
    """
    One day of care for every plant in the setup.

    ``date`` is checked by the handler so a missing date is reported with
    the same error envelope as other validation failures.
    """

    date: Optional[datetime.date] = Field(default=None, description="Day being logged")
    watered: bool = False
    topped: bool = False
    flowering: bool = False
    ph_value: Optional[float] = Field(default=None, ge=0, le=14)
    watering_amount: Optional[float] = Field(default=None, ge=0, description="Total for the setup")
    temperature: Optional[float] = None
    humidity: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = Field(default=None, max_length=2000)
    fertilizers: List[FertilizerLineRequest] = Field(default_factory=list)
    custom_distribution: Optional[List[WaterShareRequest]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "2024-03-10",
                "watered": True,
                "phValue": 6.2,
                "wateringAmount": 300,
                "fertilizers": [{"name": "GrowA", "amount": "10ml"}],
                "customDistribution": [
                    {"plantId": 1, "amount": 100},
                    {"plantId": 2, "amount": 200},
                ],
            }
        }
    )

    def to_command(self, setup_id: int, user_id: int) -> CreateBatchDayEntryCommand:
        return CreateBatchDayEntryCommand(
            setup_id=setup_id,
            user_id=user_id,
            date=self.date,
            watered=self.watered,
            topped=self.topped,
            flowering=self.flowering,
            ph_value=self.ph_value,
            watering_amount=self.watering_amount or 0,
            temperature=self.temperature,
            humidity=self.humidity,
            notes=self.notes,
            fertilizers=[FertilizerLine(name=f.name, amount=f.amount) for f in self.fertilizers],
            custom_distribution=(
                [WaterShare(plant_id=s.plant_id, amount=s.amount) for s in self.custom_distribution]
                if self.custom_distribution is not None
                else None
            ),
        )


class StartFloweringRequest(CamelModel):
    date: Optional[datetime.date] = Field(default=None, description="Defaults to today")

    def to_command(self, setup_id: int, user_id: int) -> StartFloweringCommand:
        return StartFloweringCommand(setup_id=setup_id, user_id=user_id, flowering_date=self.date)


class WaterDistributionRequest(CamelModel):
    total: int = Field(..., ge=0)
    shares: Optional[List[WaterShareRequest]] = None
    override: Optional[WaterOverrideRequest] = None

    def to_query(self, setup_id: int, user_id: int) -> PreviewWaterDistributionQuery:
        return PreviewWaterDistributionQuery(
            setup_id=setup_id,
            user_id=user_id,
            total=self.total,
            shares=(
                [WaterShare(plant_id=s.plant_id, amount=s.amount) for s in self.shares]
                if self.shares is not None
                else None
            ),
            override=(
                WaterShare(plant_id=self.override.plant_id, amount=self.override.amount)
                if self.override is not None
                else None
            ),
        )


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class FertilizerResponse(CamelModel):
    id: int
    name: str
    amount: Optional[str] = None


class SetupDayEntryResponse(CamelModel):
    id: int
    setup_id: int
    date: datetime.date
    watered: bool
    topped: bool
    ph_value: Optional[float] = None
    watering_amount: Optional[float] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime.datetime] = None
    fertilizers: List[FertilizerResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: SetupDayEntryDTO) -> "SetupDayEntryResponse":
        return cls.model_validate(dto.model_dump())


class BatchDayEntryResponse(CamelModel):
    day_entry: SetupDayEntryResponse
    fertilizers: List[FertilizerResponse]
    affected_plants: int
    created_plant_days: int
    skipped_plant_ids: List[int]
    distribution_mismatch: Optional[float] = None
    flowering_started: int = 0

    @classmethod
    def from_dto(cls, dto: BatchDayEntryResultDTO) -> "BatchDayEntryResponse":
        day_entry = SetupDayEntryResponse.from_dto(dto.day_entry)
        return cls(
            day_entry=day_entry,
            fertilizers=day_entry.fertilizers,
            affected_plants=dto.affected_plants,
            created_plant_days=dto.created_plant_days,
            skipped_plant_ids=dto.skipped_plant_ids,
            distribution_mismatch=dto.distribution_mismatch,
            flowering_started=dto.flowering_started,
        )


class SetupDayEntryListResponse(CamelModel):
    day_entries: List[SetupDayEntryResponse]
    total: int


class DeleteSetupDayEntryResponse(CamelModel):
    day_entry_id: int
    deleted_plant_days: int
    deleted_fertilizers: int

    @classmethod
    def from_dto(cls, dto: DeleteSetupDayEntryResultDTO) -> "DeleteSetupDayEntryResponse":
        return cls.model_validate(dto.model_dump())


class StartFloweringResponse(CamelModel):
    setup_id: int
    flowering_date: datetime.date
    updated_plants: int

    @classmethod
    def from_dto(cls, dto: StartFloweringResultDTO) -> "StartFloweringResponse":
        return cls.model_validate(dto.model_dump())


class WaterShareResponse(CamelModel):
    plant_id: int
    amount: float


class WaterDistributionResponse(CamelModel):
    setup_id: int
    total: int
    shares: List[WaterShareResponse]
    distributed: float
    mismatch: float
    warning: Optional[str] = None
    water_limit: Optional[int] = None
    exceeds_water_limit: bool = False

    @classmethod
    def from_dto(cls, dto: WaterDistributionPreviewDTO) -> "WaterDistributionResponse":
        return cls.model_validate(dto.model_dump())
