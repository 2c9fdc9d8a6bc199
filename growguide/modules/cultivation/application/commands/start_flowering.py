# 📄 File: growguide/modules/cultivation/application/commands/start_flowering.py
# 🧭 Purpose (Layman Explanation):
# The "these plants started flowering" command for a whole setup
# 🧪 Purpose (Technical Summary):
# CQRS command setting flowering_start_date on setup members that have none
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# StartFloweringCommandHandler, POST /setups/{setup_id}/start-flowering

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class StartFloweringCommand(BaseModel):
    """Flowering date defaults to today when omitted."""

    setup_id: int
    user_id: int
    flowering_date: Optional[date] = Field(default=None, alias="date")

    model_config = {"populate_by_name": True}
