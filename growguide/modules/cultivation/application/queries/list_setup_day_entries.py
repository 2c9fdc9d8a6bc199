# 📄 File: growguide/modules/cultivation/application/queries/list_setup_day_entries.py
# 🧭 Purpose (Layman Explanation):
# Asks for a setup's logged days, newest first
# 🧪 Purpose (Technical Summary):
# CQRS query for the setup day-entry history
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ListSetupDayEntriesQueryHandler, GET /setups/{setup_id}/days

from pydantic import BaseModel


class ListSetupDayEntriesQuery(BaseModel):
    setup_id: int
    user_id: int
