# 📄 File: growguide/modules/cultivation/application/dto/day_entry_dto.py
# 🧭 Purpose (Layman Explanation):
# This file defines the result packages handed back after logging, listing or deleting
# setup days, so the web layer can show what happened to each plant.
#
# 🧪 Purpose (Technical Summary):
# Data transfer objects returned by cultivation handlers: setup day entries with their
# fertilizers, fanout summaries, cascade deletion counts, flowering and distribution results.
#
# 🔗 Dependencies:
# - pydantic for DTO validation and serialization
# - Cultivation domain models
#
# 🔄 Connected Modules / Calls From:
# - Cultivation command and query handlers (producers)
# - presentation/api/schemas/day_entry_schemas.py (response conversion)

"""
Day Entry Data Transfer Objects (DTOs)

DTO Classes:
- SetupDayEntryDTO: a setup day entry plus its setup-scoped fertilizers
- BatchDayEntryResultDTO: fanout outcome (created, skipped, mismatch)
- DeleteSetupDayEntryResultDTO: cascade deletion counts
- StartFloweringResultDTO: flowering date and plants updated
- WaterDistributionPreviewDTO: allocator output for the watering sliders
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from growguide.modules.cultivation.domain.models.day_entry import SetupDayEntry
from growguide.modules.cultivation.domain.models.fertilizer import FertilizerUsage
from growguide.modules.cultivation.domain.models.water_share import WaterShare


class FertilizerDTO(BaseModel):
    id: int
    name: str
    amount: Optional[str] = None

    @classmethod
    def from_domain(cls, usage: FertilizerUsage) -> "FertilizerDTO":
        return cls(id=usage.id, name=usage.name, amount=usage.amount)


class SetupDayEntryDTO(BaseModel):
    """Setup day entry with its setup-scoped fertilizer lines."""

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
    fertilizers: List[FertilizerDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(
        cls,
        entry: SetupDayEntry,
        fertilizers: Optional[List[FertilizerUsage]] = None,
    ) -> "SetupDayEntryDTO":
        return cls(
            **entry.model_dump(),
            fertilizers=[FertilizerDTO.from_domain(f) for f in fertilizers or []],
        )


class BatchDayEntryResultDTO(BaseModel):
    """
    Outcome of one setup day-entry fanout.

    ``affected_plants`` counts every member at the time of the fanout;
    ``created_plant_days`` counts only the rows written. Plants already
    logged for the date appear in ``skipped_plant_ids``.
    ``distribution_mismatch`` is the custom distribution's sum minus the
    setup total, or None when no custom distribution was given.
    """

    day_entry: SetupDayEntryDTO
    affected_plants: int
    created_plant_days: int
    skipped_plant_ids: List[int] = Field(default_factory=list)
    distribution_mismatch: Optional[float] = None
    flowering_started: int = 0

    @property
    def fertilizers(self) -> List[FertilizerDTO]:
        return self.day_entry.fertilizers


class DeleteSetupDayEntryResultDTO(BaseModel):
    day_entry_id: int
    deleted_plant_days: int
    deleted_fertilizers: int


class StartFloweringResultDTO(BaseModel):
    setup_id: int
    flowering_date: datetime.date
    updated_plants: int


class WaterDistributionPreviewDTO(BaseModel):
    """Allocator output; ``warning`` is set whenever the shares miss the total."""

    setup_id: int
    total: int
    shares: List[WaterShare]
    distributed: float
    mismatch: float
    warning: Optional[str] = None
    water_limit: Optional[int] = None
    exceeds_water_limit: bool = False
