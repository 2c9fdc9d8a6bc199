# 📄 File: growguide/modules/cultivation/domain/models/setup.py
# 🧭 Purpose (Layman Explanation):
# Describes a grow setup (a named group of plants cared for together) and the plants in it
# 🧪 Purpose (Technical Summary):
# Domain models for Setup and Plant entities; membership order is expressed by the
# order of the plant list returned from the setup repository
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# setup_repository.py, command_handlers.py, water_distribution.py

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Plant(BaseModel):
    """
    An individually tracked plant.

    ``start_date`` anchors the plant's day numbering; a plant can belong to
    any number of setups, or none.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    start_date: Optional[date] = None
    flowering_start_date: Optional[date] = None
    created_at: Optional[datetime] = None


class Setup(BaseModel):
    """A user-owned group of plants that can be cared for as a batch."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    water_limit: Optional[int] = Field(
        default=None,
        description="Soft ceiling for the watering slider; informational only",
    )
    created_at: Optional[datetime] = None

