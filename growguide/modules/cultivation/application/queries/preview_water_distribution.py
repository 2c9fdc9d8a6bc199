# 📄 File: growguide/modules/cultivation/application/queries/preview_water_distribution.py
# 🧭 Purpose (Layman Explanation):
# Asks how a day's water would be split across a setup's plants, optionally after moving one
# plant's slider, without saving anything.
#
# 🧪 Purpose (Technical Summary):
# CQRS query feeding the water distribution allocator: starting shares (or an equal split
# over live membership) plus an optional single-plant override.
#
# 🔗 Dependencies:
# pydantic, WaterShare value object
#
# 🔄 Connected Modules / Calls From:
# WaterDistributionPreviewQueryHandler, POST /setups/{setup_id}/water-distribution

from typing import List, Optional

from pydantic import BaseModel, Field

from growguide.modules.cultivation.domain.models.water_share import WaterShare


class PreviewWaterDistributionQuery(BaseModel):
    setup_id: int
    user_id: int
    total: int = Field(..., ge=0, description="Total water for the day")
    shares: Optional[List[WaterShare]] = Field(
        default=None,
        description="Current slider values; equal split over members when omitted",
    )
    override: Optional[WaterShare] = Field(
        default=None,
        description="Plant whose share was changed and its new value",
    )
