# 📄 File: growguide/modules/cultivation/domain/models/day_entry.py
# 🧭 Purpose (Layman Explanation):
# Describes one calendar day of care (watering, pH, climate, notes), logged either for a
# whole setup or for a single plant
# 🧪 Purpose (Technical Summary):
# Domain models for SetupDayEntry and PlantDayEntry sharing the care/environment fields;
# PlantDayEntry carries a weak back-reference to the setup entry that produced it
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# day_entry_repository.py, command_handlers.py, duplicate_guard.py, DTOs

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CareFields(BaseModel):
    """Care and environment readings shared by setup and plant day entries."""

    model_config = ConfigDict(from_attributes=True)

    watered: bool = False
    topped: bool = False
    ph_value: Optional[float] = None
    watering_amount: Optional[float] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    notes: Optional[str] = None


class SetupDayEntry(CareFields):
    """
    Setup-scoped day entry.

    ``watering_amount`` is the total volume for the whole setup that day.
    At most one exists per (setup_id, date).
    """

    id: Optional[int] = None
    setup_id: int
    date: date
    created_at: Optional[datetime] = None


class PlantDayEntry(CareFields):
    """
    Plant-scoped day entry.

    ``watering_amount`` is this plant's own share (or the flat setup total
    when no custom distribution was given). ``setup_entry_id`` is null for
    entries logged directly on the plant. At most one exists per
    (plant_id, date).
    """

    id: Optional[int] = None
    plant_id: int
    date: date
    day_number: Optional[int] = None
    setup_entry_id: Optional[int] = None
    created_at: Optional[datetime] = None
