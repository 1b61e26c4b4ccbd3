"""create users, family_members, medicines and schedules tables

Revision ID: 3f2a9c1d7e10
Revises:
Create Date: 2025-11-02 10:14:52.418306
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f2a9c1d7e10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'family_members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('relationship', sa.String(length=60), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('blood_type', sa.String(length=10), nullable=True),
        sa.Column('phone', sa.String(length=40), nullable=True),
        sa.Column('emergency', sa.String(length=120), nullable=True),
        sa.Column('history', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_family_members_user_id', 'family_members', ['user_id'])

    op.create_table(
        'medicines',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('dosage', sa.String(length=60), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=True),
        sa.Column('frequency', sa.String(length=30), server_default='ONCE_DAILY', nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('end_date >= start_date', name='ck_medicines_date_range'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['patient_id'], ['family_members.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_medicines_user_id', 'medicines', ['user_id'])
    op.create_index('ix_medicines_patient_id', 'medicines', ['patient_id'])
    op.create_index('ix_medicines_user_patient', 'medicines', ['user_id', 'patient_id'])

    op.create_table(
        'schedules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('medicine_id', sa.Integer(), nullable=False),
        sa.Column('schedule_date', sa.Date(), nullable=False),
        sa.Column('time_of_day', sa.Time(timezone=False), nullable=False),
        sa.Column('dosage', sa.String(length=90), nullable=True),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('taken_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint("status IN ('pending', 'taken')", name='ck_schedules_status'),
        sa.ForeignKeyConstraint(['medicine_id'], ['medicines.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        # generation relies on this for ON CONFLICT DO NOTHING
        sa.UniqueConstraint('medicine_id', 'schedule_date', 'time_of_day', name='uq_schedules_medicine_date_time')
    )
    op.create_index('ix_schedules_medicine_id', 'schedules', ['medicine_id'])
    op.create_index('ix_schedules_schedule_date', 'schedules', ['schedule_date'])


def downgrade():
    op.drop_table('schedules')
    op.drop_table('medicines')
    op.drop_table('family_members')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
