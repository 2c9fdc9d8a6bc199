# 📄 File: growguide/modules/cultivation/domain/models/fertilizer.py
# 🧭 Purpose (Layman Explanation):
# Describes a fertilizer given on a day, either for a whole setup or for a single plant
# 🧪 Purpose (Technical Summary):
# FertilizerLine (submitted name/amount pair) and FertilizerUsage (stored line bound to
# exactly one scope: a setup day entry or a plant day entry)
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# fertilizer_service.py, fertilizer_repository.py, command DTOs

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FertilizerLine(BaseModel):
    """
    One submitted fertilizer line.

    ``amount`` is an opaque label such as ``"10ml"`` or ``"2 tsp"``; no unit
    conversion or scaling is ever applied to it.
    """

    name: str = Field(default="", max_length=100)
    amount: Optional[str] = Field(default=None, max_length=50)

    @property
    def is_blank(self) -> bool:
        return not self.name.strip()


class FertilizerUsage(BaseModel):
    """A stored fertilizer line belonging to exactly one day entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    amount: Optional[str] = None
    setup_day_id: Optional[int] = None
    plant_day_id: Optional[int] = None

    @model_validator(mode="after")
    def check_single_scope(self) -> "FertilizerUsage":
        if (self.setup_day_id is None) == (self.plant_day_id is None):
            raise ValueError("Fertilizer usage must belong to exactly one day entry")
        return self
