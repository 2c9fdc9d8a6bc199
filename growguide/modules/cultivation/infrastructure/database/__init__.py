# 📄 File: growguide/modules/cultivation/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Bundles the database helpers for the cultivation module so one unit of work gets a matching set
# 🧪 Purpose (Technical Summary):
# ORM model exports and the CultivationRepositories container binding every repository
# implementation to a single AsyncSession
# 🔗 Dependencies:
# models.py, *_repository_impl.py, SQLAlchemy AsyncSession
# 🔄 Connected Modules / Calls From:
# Cultivation handlers (default repository factory), migrations/env.py, tests

from sqlalchemy.ext.asyncio import AsyncSession

from .day_entry_repository_impl import DayEntryRepositoryImpl
from .fertilizer_repository_impl import FertilizerRepositoryImpl
from .models import (
    FertilizerUsageModel,
    PlantDayEntryModel,
    PlantModel,
    SetupDayEntryModel,
    SetupMembershipModel,
    SetupModel,
)
from .setup_repository_impl import SetupRepositoryImpl


class CultivationRepositories:
    """Repositories sharing one session, and therefore one transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.setups = SetupRepositoryImpl(session)
        self.day_entries = DayEntryRepositoryImpl(session)
        self.fertilizers = FertilizerRepositoryImpl(session)


__all__ = [
    "CultivationRepositories",
    "DayEntryRepositoryImpl",
    "FertilizerRepositoryImpl",
    "FertilizerUsageModel",
    "PlantDayEntryModel",
    "PlantModel",
    "SetupDayEntryModel",
    "SetupMembershipModel",
    "SetupModel",
    "SetupRepositoryImpl",
]
