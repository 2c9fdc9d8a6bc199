"""Create cultivation tables

Revision ID: 001
Revises: 
Create Date: 2024-03-01 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _care_columns():
    return [
        sa.Column('watered', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('topped', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('ph_value', sa.Float(), nullable=True),
        sa.Column('watering_amount', sa.Float(), nullable=True),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('humidity', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    ]


def upgrade() -> None:
    """Create cultivation tables"""

    # 1. Setups and plants
    op.create_table('plant_setups',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('water_limit', sa.Integer(), nullable=False, server_default='1000'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_plant_setups'),
    )
    op.create_index('ix_plant_setups_user_id', 'plant_setups', ['user_id'])

    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('flowering_start_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_plants'),
    )
    op.create_index('ix_plants_user_id', 'plants', ['user_id'])

    # 2. Memberships (ascending id is membership order)
    op.create_table('setup_plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('setup_id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_setup_plants'),
        sa.ForeignKeyConstraint(['setup_id'], ['plant_setups.id'], ondelete='CASCADE',
                                name='fk_setup_plants_setup_id_plant_setups'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE',
                                name='fk_setup_plants_plant_id_plants'),
        sa.UniqueConstraint('setup_id', 'plant_id', name='uq_setup_plants_setup_plant'),
    )
    op.create_index('ix_setup_plants_setup_id', 'setup_plants', ['setup_id'])
    op.create_index('ix_setup_plants_plant_id', 'setup_plants', ['plant_id'])

    # 3. Day entries
    op.create_table('setup_day_entries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('setup_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        *_care_columns(),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_setup_day_entries'),
        sa.ForeignKeyConstraint(['setup_id'], ['plant_setups.id'], ondelete='CASCADE',
                                name='fk_setup_day_entries_setup_id_plant_setups'),
        sa.UniqueConstraint('setup_id', 'date', name='uq_setup_day_entries_setup_date'),
    )
    op.create_index('ix_setup_day_entries_setup_id', 'setup_day_entries', ['setup_id'])

    op.create_table('plant_days',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=True),
        *_care_columns(),
        sa.Column('setup_entry_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_plant_days'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE',
                                name='fk_plant_days_plant_id_plants'),
        sa.ForeignKeyConstraint(['setup_entry_id'], ['setup_day_entries.id'], ondelete='SET NULL',
                                name='fk_plant_days_setup_entry_id_setup_day_entries'),
        sa.UniqueConstraint('plant_id', 'date', name='uq_plant_days_plant_date'),
    )
    op.create_index('ix_plant_days_plant_id', 'plant_days', ['plant_id'])
    op.create_index('ix_plant_days_setup_entry_id', 'plant_days', ['setup_entry_id'])

    # 4. Fertilizer usage, bound to exactly one day entry
    op.create_table('fertilizer_usage',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fertilizer_name', sa.String(100), nullable=False),
        sa.Column('amount', sa.String(50), nullable=True),
        sa.Column('setup_day_id', sa.Integer(), nullable=True),
        sa.Column('plant_day_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_fertilizer_usage'),
        sa.ForeignKeyConstraint(['setup_day_id'], ['setup_day_entries.id'], ondelete='CASCADE',
                                name='fk_fertilizer_usage_setup_day_id_setup_day_entries'),
        sa.ForeignKeyConstraint(['plant_day_id'], ['plant_days.id'], ondelete='CASCADE',
                                name='fk_fertilizer_usage_plant_day_id_plant_days'),
        sa.CheckConstraint('(setup_day_id IS NULL) <> (plant_day_id IS NULL)',
                           name='ck_fertilizer_usage_single_scope'),
    )
    op.create_index('ix_fertilizer_usage_setup_day_id', 'fertilizer_usage', ['setup_day_id'])
    op.create_index('ix_fertilizer_usage_plant_day_id', 'fertilizer_usage', ['plant_day_id'])


def downgrade() -> None:
    """Drop cultivation tables"""
    op.drop_table('fertilizer_usage')
    op.drop_table('plant_days')
    op.drop_table('setup_day_entries')
    op.drop_table('setup_plants')
    op.drop_table('plants')
    op.drop_table('plant_setups')
