# 📄 File: growguide/modules/cultivation/application/commands/delete_setup_day_entry.py
# 🧭 Purpose (Layman Explanation):
# The "undo a setup's day" command, which removes the day and everything it created for the plants
# 🧪 Purpose (Technical Summary):
# CQRS command for cascade deletion of a setup day entry
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# DeleteSetupDayEntryCommandHandler, DELETE /setups/{setup_id}/days/{day_id}

from pydantic import BaseModel, Field


class DeleteSetupDayEntryCommand(BaseModel):
    setup_id: int
    day_entry_id: int = Field(..., description="Setup day entry to delete")
    user_id: int
