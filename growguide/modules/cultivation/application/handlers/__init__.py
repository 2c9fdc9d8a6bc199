# 📄 File: growguide/modules/cultivation/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The processors that carry out cultivation commands and answer cultivation questions
# 🧪 Purpose (Technical Summary):
# Command and query handler exports
# 🔗 Dependencies:
# command_handlers.py, query_handlers.py
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py, tests

from .command_handlers import (
    CreateBatchDayEntryCommandHandler,
    DeleteSetupDayEntryCommandHandler,
    StartFloweringCommandHandler,
)
from .query_handlers import ListSetupDayEntriesQueryHandler, WaterDistributionPreviewQueryHandler

__all__ = [
    "CreateBatchDayEntryCommandHandler",
    "DeleteSetupDayEntryCommandHandler",
    "ListSetupDayEntriesQueryHandler",
    "StartFloweringCommandHandler",
    "WaterDistributionPreviewQueryHandler",
]
