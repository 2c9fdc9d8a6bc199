# 📄 File: growguide/modules/cultivation/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of storage contracts the cultivation module depends on
# 🧪 Purpose (Technical Summary):
# Repository interface exports (dependency inversion boundary)
# 🔗 Dependencies:
# setup_repository.py, day_entry_repository.py, fertilizer_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, application handlers, infrastructure implementations

from .day_entry_repository import DayEntryRepository, DuplicateDayEntryError
from .fertilizer_repository import FertilizerRepository
from .setup_repository import SetupRepository

__all__ = [
    "DayEntryRepository",
    "DuplicateDayEntryError",
    "FertilizerRepository",
    "SetupRepository",
]
