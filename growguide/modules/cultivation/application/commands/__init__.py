# 📄 File: growguide/modules/cultivation/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of things a grower can ask the service to change
# 🧪 Purpose (Technical Summary):
# CQRS command exports for the cultivation module
# 🔗 Dependencies:
# Command modules
# 🔄 Connected Modules / Calls From:
# Command handlers, API endpoints

from .create_batch_day_entry import CreateBatchDayEntryCommand
from .delete_setup_day_entry import DeleteSetupDayEntryCommand
from .start_flowering import StartFloweringCommand

__all__ = [
    "CreateBatchDayEntryCommand",
    "DeleteSetupDayEntryCommand",
    "StartFloweringCommand",
]
