"""create gym schema

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'TRAINER', 'TRAINEE', name='userrole'), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'trainers',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('specialization', sa.String(), nullable=True),
        sa.Column('experience', sa.Integer(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_trainers_id', 'trainers', ['id'])

    op.create_table(
        'trainees',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_trainees_id', 'trainees', ['id'])

    op.create_table(
        'class_schedules',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('class_name', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('trainer_id', sa.Integer(), sa.ForeignKey('trainers.id'), nullable=False),
        sa.Column('admin_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('max_trainees', sa.Integer(), nullable=False, server_default='10'),
        sa.Column('active_bookings_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('active_bookings_count >= 0', name='check_schedule_bookings_non_negative'),
        sa.CheckConstraint('active_bookings_count <= max_trainees', name='check_schedule_bookings_capacity'),
    )
    op.create_index('ix_class_schedules_id', 'class_schedules', ['id'])
    op.create_index('ix_class_schedules_date', 'class_schedules', ['date'])
    op.create_index('ix_class_schedules_trainer_id', 'class_schedules', ['trainer_id'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('trainee_id', sa.Integer(), sa.ForeignKey('trainees.id'), nullable=False),
        sa.Column('schedule_id', sa.Integer(), sa.ForeignKey('class_schedules.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'CANCELLED', name='bookingstatus'), nullable=False, server_default='ACTIVE'),
        sa.Column('booked_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('cancelled_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_bookings_id', 'bookings', ['id'])
    op.create_index('ix_bookings_trainee_id', 'bookings', ['trainee_id'])
    op.create_index('ix_bookings_schedule_id', 'bookings', ['schedule_id'])
    # One active booking per trainee per schedule
    op.create_index(
        'uq_bookings_active_trainee_schedule',
        'bookings',
        ['trainee_id', 'schedule_id'],
        unique=True,
        postgresql_where=sa.text("status = 'ACTIVE'"),
        sqlite_where=sa.text("status = 'ACTIVE'"),
    )


def downgrade() -> None:
    op.drop_index('uq_bookings_active_trainee_schedule', table_name='bookings')
    op.drop_table('bookings')
    op.drop_table('class_schedules')
    op.drop_table('trainees')
    op.drop_table('trainers')
    op.drop_table('users')
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS bookingstatus")
        op.execute("DROP TYPE IF EXISTS userrole")
