# 📄 File: growguide/modules/cultivation/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the cultivation building blocks (setups, plants, day entries, fertilizers, water shares)
# 🧪 Purpose (Technical Summary):
# Domain model exports for the cultivation module
# 🔗 Dependencies:
# setup.py, day_entry.py, fertilizer.py, water_share.py
# 🔄 Connected Modules / Calls From:
# Repositories, domain services, application layer

from .day_entry import CareFields, PlantDayEntry, SetupDayEntry
from .fertilizer import FertilizerLine, FertilizerUsage
from .setup import Plant, Setup
from .water_share import WaterShare

__all__ = [
    "CareFields",
    "FertilizerLine",
    "FertilizerUsage",
    "Plant",
    "PlantDayEntry",
    "Setup",
    "SetupDayEntry",
    "WaterShare",
]
