# 📄 File: growguide/modules/cultivation/application/commands/create_batch_day_entry.py
# 🧭 Purpose (Layman Explanation):
# This file defines the "log a day for the whole setup" command: the date, the care done,
# the fertilizers given and, optionally, how the water was split between plants.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for the setup day-entry fanout with pydantic validation of the payload and
# a helper resolving each plant's watering amount from the optional custom distribution.
#
# 🔗 Dependencies:
# - pydantic for command validation
# - Cultivation domain models (FertilizerLine, WaterShare, CareFields)
#
# 🔄 Connected Modules / Calls From:
# - CreateBatchDayEntryCommandHandler
# - presentation/api/v1/setup_days.py (POST /setups/{setup_id}/days)

"""
Create Batch Day Entry Command

Command Fields:
- setup_id / user_id: target setup and the authenticated caller
- date: calendar day being logged (required; checked by the handler so a
  missing date is reported before anything is written)
- watered, topped, flowering: activity flags
- ph_value, watering_amount, temperature, humidity, notes: readings
- fertilizers: lines replicated verbatim to the setup and every plant
- custom_distribution: optional per-plant water volumes

Watering Semantics:
- Without custom_distribution every plant gets the setup total (flat copy)
- With custom_distribution each plant gets its own amount; member plants
  not listed get 0
"""

import datetime
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from growguide.modules.cultivation.domain.models.day_entry import CareFields
from growguide.modules.cultivation.domain.models.fertilizer import FertilizerLine
from growguide.modules.cultivation.domain.models.water_share import WaterShare


class CreateBatchDayEntryCommand(BaseModel):
    """
    Command for logging one day of care for every plant in a setup.
    """

    setup_id: int = Field(..., description="Setup receiving the entry")
    user_id: int = Field(..., description="Authenticated caller")
    date: Optional[datetime.date] = Field(default=None, description="Day being logged")

    watered: bool = False
    topped: bool = False
    flowering: bool = Field(default=False, description="Start flowering for plants not yet flowering")
    ph_value: Optional[float] = Field(default=None, ge=0, le=14)
    watering_amount: float = Field(default=0, ge=0, description="Total water for the setup")
    temperature: Optional[float] = None
    humidity: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None

    fertilizers: List[FertilizerLine] = Field(default_factory=list)
    custom_distribution: Optional[List[WaterShare]] = None

    def care_fields(self) -> CareFields:
        """Readings shared by the setup entry and every plant entry."""
        return CareFields(
            watered=self.watered,
            topped=self.topped,
            ph_value=self.ph_value,
            watering_amount=self.watering_amount,
            temperature=self.temperature,
            humidity=self.humidity,
            notes=self.notes,
        )

    def distribution_map(self) -> Optional[Dict[int, float]]:
        if self.custom_distribution is None:
            return None
        return {share.plant_id: share.amount for share in self.custom_distribution}

    def watering_amounts(self, plant_ids: Sequence[int]) -> Dict[int, float]:
        """Per-plant water: the flat total, or each plant's own share when a distribution is given."""
        distribution = self.distribution_map()
        if distribution is None:
            return {plant_id: self.watering_amount for plant_id in plant_ids}
        return {plant_id: distribution.get(plant_id, 0) for plant_id in plant_ids}
