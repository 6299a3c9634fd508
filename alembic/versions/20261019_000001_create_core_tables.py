"""Create core tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Creates users, plans, plan grants, the credit ledger and its lock rows,
buildings, doorman assignments, visitors and visits.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(name, *values):
    return sa.Enum(*values, name=name, create_constraint=True)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fullname', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('id_number', sa.String(length=100), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('role', _enum('user_role', 'user', 'doorman', 'admin'), nullable=False),
        sa.Column('status', _enum('user_status', 'active', 'inactive'), nullable=False),
        sa.Column('email_confirmed', sa.Boolean(), nullable=False),
        sa.Column('phone_confirmed', sa.Boolean(), nullable=False),
        sa.Column('registrar_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['registrar_id'], ['users.id'], name='fk_users_registrar_id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_phone', 'users', ['phone'], unique=True)
    op.create_index('ix_users_id_number', 'users', ['id_number'], unique=True)
    op.create_index('ix_users_registrar_id', 'users', ['registrar_id'])

    op.create_table(
        'email_confirmation_tokens',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(length=16), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_email_confirmation_tokens_user_id', 'email_confirmation_tokens', ['user_id'])
    op.create_index('ix_email_confirmation_tokens_token', 'email_confirmation_tokens', ['token'], unique=True)

    op.create_table(
        'plans',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plan_name', sa.String(length=150), nullable=False),
        sa.Column('building_credit', sa.Integer(), nullable=False),
        sa.Column('user_credit', sa.Integer(), nullable=False),
        sa.Column('monthly_visits', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('status', _enum('plan_status', 'active', 'inactive'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'active_plans',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('plan_id', sa.Integer(), nullable=False),
        sa.Column(
            'status',
            _enum('active_plan_status', 'pending', 'active', 'expired', 'cancelled'),
            nullable=False,
        ),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('building_credit', sa.Integer(), nullable=True),
        sa.Column('user_credit', sa.Integer(), nullable=True),
        sa.Column('monthly_visits', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plan_id'], ['plans.id']),
    )
    op.create_index('ix_active_plans_user_id', 'active_plans', ['user_id'])
    op.create_index('ix_active_plans_plan_id', 'active_plans', ['plan_id'])
    op.create_index('ix_active_plans_status', 'active_plans', ['status'])

    op.create_table(
        'buildings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('type', _enum('building_type', 'building', 'complex', 'tower'), nullable=False),
        sa.Column('status', _enum('building_status', 'active', 'inactive'), nullable=False),
        sa.Column('qr_identifier', sa.String(length=32), nullable=False),
        sa.Column('qr_image', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
    )
    op.create_index('ix_buildings_user_id', 'buildings', ['user_id'])
    op.create_index('ix_buildings_qr_identifier', 'buildings', ['qr_identifier'], unique=True)

    op.create_table(
        'credit_transactions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('building_id', sa.Integer(), nullable=True),
        sa.Column('purpose', sa.String(length=255), nullable=False),
        sa.Column('type', _enum('credit_type', 'building', 'user'), nullable=False),
        sa.Column('action', _enum('credit_action', 'add', 'delete'), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('deleted', sa.Boolean(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['building_id'], ['buildings.id'], ondelete='SET NULL'),
    )
    op.create_index('ix_credit_transactions_user_id', 'credit_transactions', ['user_id'])
    op.create_index('ix_credit_transactions_date', 'credit_transactions', ['date'])
    op.create_index(
        'ix_credit_transactions_consumption',
        'credit_transactions',
        ['user_id', 'type', 'action', 'deleted'],
    )

    op.create_table(
        'credit_locks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('type', _enum('credit_lock_type', 'building', 'user'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('locked_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id', 'type', name='uq_credit_locks_user_type'),
    )

    op.create_table(
        'doorman_buildings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('building_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('status', _enum('assignment_status', 'active', 'inactive'), nullable=False),
        sa.Column('assigned_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['building_id'], ['buildings.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('building_id', 'user_id', name='uq_doorman_buildings_building_user'),
    )
    op.create_index('ix_doorman_buildings_building_id', 'doorman_buildings', ['building_id'])
    op.create_index('ix_doorman_buildings_user_id', 'doorman_buildings', ['user_id'])

    op.create_table(
        'visitors',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fullname', sa.String(length=200), nullable=False),
        sa.Column('id_number', sa.String(length=100), nullable=False),
        sa.Column('birthday', sa.Date(), nullable=False),
        sa.Column('gender', _enum('visitor_gender', 'male', 'female', 'other'), nullable=False),
        sa.Column('region', sa.String(length=100), nullable=False),
        sa.Column('expire_date', sa.Date(), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('status', _enum('visitor_status', 'active', 'inactive'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_visitors_id_number', 'visitors', ['id_number'], unique=True)

    op.create_table(
        'visits',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('building_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('visitor_id', sa.Integer(), nullable=False),
        sa.Column('purpose', sa.String(length=255), nullable=False),
        sa.Column('unit', sa.String(length=50), nullable=False),
        sa.Column('check_in_date', sa.DateTime(), nullable=False),
        sa.Column('check_out_date', sa.DateTime(), nullable=True),
        sa.Column('status', _enum('visit_status', 'pending', 'completed', 'cancelled'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['building_id'], ['buildings.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['visitor_id'], ['visitors.id']),
        sa.UniqueConstraint(
            'building_id', 'visitor_id', 'check_in_date',
            name='uq_visits_building_visitor_checkin',
        ),
    )
    op.create_index('ix_visits_building_id', 'visits', ['building_id'])
    op.create_index('ix_visits_user_id', 'visits', ['user_id'])
    op.create_index('ix_visits_visitor_id', 'visits', ['visitor_id'])
    op.create_index('ix_visits_status', 'visits', ['status'])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('visits')
    op.drop_table('visitors')
    op.drop_table('doorman_buildings')
    op.drop_table('credit_locks')
    op.drop_table('credit_transactions')
    op.drop_table('buildings')
    op.drop_table('active_plans')
    op.drop_table('plans')
    op.drop_table('email_confirmation_tokens')
    op.drop_table('users')
