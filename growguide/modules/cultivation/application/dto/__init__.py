# 📄 File: growguide/modules/cultivation/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# The result packages cultivation operations hand back
# 🧪 Purpose (Technical Summary):
# DTO exports
# 🔗 Dependencies:
# day_entry_dto.py
# 🔄 Connected Modules / Calls From:
# Handlers, API schemas

from .day_entry_dto import (
    BatchDayEntryResultDTO,
    DeleteSetupDayEntryResultDTO,
    FertilizerDTO,
    SetupDayEntryDTO,
    StartFloweringResultDTO,
    WaterDistributionPreviewDTO,
)

__all__ = [
    "BatchDayEntryResultDTO",
    "DeleteSetupDayEntryResultDTO",
    "FertilizerDTO",
    "SetupDayEntryDTO",
    "StartFloweringResultDTO",
    "WaterDistributionPreviewDTO",
]
