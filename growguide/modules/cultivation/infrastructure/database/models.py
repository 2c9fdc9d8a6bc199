# 📄 File: growguide/modules/cultivation/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how setups, plants, daily care logs and fertilizer records are stored
# in the database, including the rules that stop the same day being logged twice.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the cultivation schema: setups, plants, setup memberships,
# setup/plant day entries (unique per owner and date) and single-scope fertilizer usage.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - growguide.shared.config.database (declarative base and naming convention)
#
# 🔄 Connected Modules / Calls From:
# - Cultivation repository implementations (CRUD operations)
# - migrations/env.py (autogenerate target metadata)
# - Test fixtures (schema creation and seeding)

"""
SQLAlchemy Models for Cultivation

Tables:
- plant_setups: user-owned groups of plants
- plants: individually tracked plants
- setup_plants: membership link, ordered by insertion (id)
- setup_day_entries: one per (setup_id, date)
- plant_days: one per (plant_id, date), optionally produced by a setup entry
- fertilizer_usage: lines bound to exactly one day entry

User ids are plain integers; users live in the upstream auth service.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from growguide.shared.config.database import DatabaseBase


# =============================================================================
# SETUPS & PLANTS
# =============================================================================

class SetupModel(DatabaseBase):
    """A named group of plants owned by one user."""
    __tablename__ = "plant_setups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True, comment="Owning user (external auth service)")
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    water_limit = Column(
        Integer,
        nullable=False,
        default=1000,
        server_default="1000",
        comment="Soft ceiling for the watering slider, never enforced",
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    memberships = relationship(
        "SetupMembershipModel",
        back_populates="setup",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SetupMembershipModel.id",
    )

    def __repr__(self):
        return f"<SetupModel(id={self.id}, name='{self.name}')>"


class PlantModel(DatabaseBase):
    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=True, comment="Day 1 of the plant's life")
    flowering_start_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<PlantModel(id={self.id}, name='{self.name}')>"


class SetupMembershipModel(DatabaseBase):
    """Plant membership in a setup; ascending id is membership order."""
    __tablename__ = "setup_plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    setup_id = Column(
        Integer,
        ForeignKey("plant_setups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    setup = relationship("SetupModel", back_populates="memberships")
    plant = relationship("PlantModel")

    __table_args__ = (
        UniqueConstraint("setup_id", "plant_id", name="uq_setup_plants_setup_plant"),
    )


# =============================================================================
# DAY ENTRIES
# =============================================================================

class SetupDayEntryModel(DatabaseBase):
    """
    Setup-scoped day entry.

    ``watering_amount`` is the setup total for the day.
    """
    __tablename__ = "setup_day_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    setup_id = Column(
        Integer,
        ForeignKey("plant_setups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(Date, nullable=False)
    watered = Column(Boolean, nullable=False, default=False)
    topped = Column(Boolean, nullable=False, default=False)
    ph_value = Column(Float, nullable=True)
    watering_amount = Column(Float, nullable=True)
    temperature = Column(Float, nullable=True)
    humidity = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("setup_id", "date", name="uq_setup_day_entries_setup_date"),
    )
    __mapper_args__ = {"eager_defaults": True}


class PlantDayEntryModel(DatabaseBase):
    """
    Plant-scoped day entry.

    ``setup_entry_id`` links back to the setup entry that produced the row,
    and is null for entries logged on the plant directly.
    """
    __tablename__ = "plant_days"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(Date, nullable=False)
    day_number = Column(Integer, nullable=True)
    watered = Column(Boolean, nullable=False, default=False)
    topped = Column(Boolean, nullable=False, default=False)
    ph_value = Column(Float, nullable=True)
    watering_amount = Column(Float, nullable=True)
    temperature = Column(Float, nullable=True)
    humidity = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    setup_entry_id = Column(
        Integer,
        ForeignKey("setup_day_entries.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("plant_id", "date", name="uq_plant_days_plant_date"),
    )
    __mapper_args__ = {"eager_defaults": True}


# =============================================================================
# FERTILIZERS
# =============================================================================

class FertilizerUsageModel(DatabaseBase):
    """A fertilizer line attached to exactly one setup day or plant day."""
    __tablename__ = "fertilizer_usage"

    id = Column(Integer, primary_key=True, autoincrement=True)
    fertilizer_name = Column(String(100), nullable=False)
    amount = Column(String(50), nullable=True, comment="Opaque label, e.g. '10ml'")
    setup_day_id = Column(
        Integer,
        ForeignKey("setup_day_entries.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    plant_day_id = Column(
        Integer,
        ForeignKey("plant_days.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "(setup_day_id IS NULL) <> (plant_day_id IS NULL)",
            name="single_scope",
        ),
    )
