# 📄 File: growguide/modules/cultivation/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The cultivation rules: plant age, water splitting, fertilizer copying and duplicate checks
# 🧪 Purpose (Technical Summary):
# Domain service exports
# 🔗 Dependencies:
# age_calculator.py, water_distribution.py, fertilizer_service.py, duplicate_guard.py
# 🔄 Connected Modules / Calls From:
# Application handlers

from .age_calculator import day_number
from .duplicate_guard import DuplicateEntryGuard
from .fertilizer_service import FertilizerAssociationManager
from .water_distribution import (
    apply_override,
    distribution_mismatch,
    distribution_total,
    equal_split,
)

__all__ = [
    "DuplicateEntryGuard",
    "FertilizerAssociationManager",
    "apply_override",
    "day_number",
    "distribution_mismatch",
    "distribution_total",
    "equal_split",
]
