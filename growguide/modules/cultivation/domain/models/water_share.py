# 📄 File: growguide/modules/cultivation/domain/models/water_share.py
# 🧭 Purpose (Layman Explanation):
# How much of the day's water one plant in a setup gets
# 🧪 Purpose (Technical Summary):
# Value object produced by the water distribution allocator and consumed by the fanout
# coordinator as a custom distribution
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# water_distribution.py, create_batch_day_entry.py, day_entry_schemas.py

from pydantic import BaseModel, Field


class WaterShare(BaseModel):
    plant_id: int
    amount: float = Field(ge=0)
