# 📄 File: growguide/modules/cultivation/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of read-only questions the cultivation module answers
# 🧪 Purpose (Technical Summary):
# CQRS query exports
# 🔗 Dependencies:
# Query modules
# 🔄 Connected Modules / Calls From:
# Query handlers, API endpoints

from .list_setup_day_entries import ListSetupDayEntriesQuery
from .preview_water_distribution import PreviewWaterDistributionQuery

__all__ = [
    "ListSetupDayEntriesQuery",
    "PreviewWaterDistributionQuery",
]
