# 📄 File: growguide/modules/cultivation/domain/services/age_calculator.py
# 🧭 Purpose (Layman Explanation):
# Works out which day of its life a plant is on for a given calendar date
# 🧪 Purpose (Technical Summary):
# Pure day-number computation anchored on the plant's start date (start date is day 1)
# 🔗 Dependencies:
# datetime
# 🔄 Connected Modules / Calls From:
# CreateBatchDayEntryCommandHandler (per-plant fanout)

from datetime import date
from typing import Optional


def day_number(entry_date: date, start_date: Optional[date]) -> Optional[int]:
    """
    Age of a plant on ``entry_date``, counting ``start_date`` as day 1.

    Dates before ``start_date`` yield 0 or negative numbers; they are
    returned unchanged. A plant without a start date has no day number.
    """
    if start_date is None:
        return None
    return (entry_date - start_date).days + 1


def is_before_start(entry_date: date, start_date: Optional[date]) -> bool:
    return start_date is not None and entry_date < start_date
