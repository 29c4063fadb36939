"""Create the LandlordOS schema

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Creates users, properties, units, tenants, payments, expenses,
maintenance and audit_logs.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id():
    return sa.Column('id', sa.String(length=32), nullable=False)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
    ]


def _deleted_at():
    return sa.Column('deleted_at', sa.DateTime(), nullable=True)


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        'users',
        _id(),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=200), nullable=False),
        sa.Column(
            'role',
            sa.Enum('LANDLORD', 'MANAGER', 'CARETAKER', name='user_role', create_constraint=True),
            server_default='LANDLORD',
            nullable=False,
        ),
        sa.Column('owner_id', sa.String(length=32), nullable=True),
        *_timestamps(),
        _deleted_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_owner_id', 'users', ['owner_id'])

    op.create_table(
        'properties',
        _id(),
        sa.Column('owner_id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('total_units', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(length=3), server_default='TZS', nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        _deleted_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_properties_owner_id', 'properties', ['owner_id'])

    op.create_table(
        'units',
        _id(),
        sa.Column('property_id', sa.String(length=32), nullable=False),
        sa.Column('unit_number', sa.String(length=50), nullable=False),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column(
            'status',
            sa.Enum('VACANT', 'OCCUPIED', 'MAINTENANCE', name='unit_status', create_constraint=True),
            server_default='VACANT',
            nullable=False,
        ),
        sa.Column('tenant_id', sa.String(length=32), nullable=True),
        *_timestamps(),
        _deleted_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_units_property_id'),
    )
    op.create_index('ix_units_property_id', 'units', ['property_id'])

    op.create_table(
        'tenants',
        _id(),
        sa.Column('property_id', sa.String(length=32), nullable=False),
        sa.Column('unit_id', sa.String(length=32), nullable=True),
        sa.Column('full_name', sa.String(length=200), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('national_id', sa.String(length=100), nullable=True),
        sa.Column('lease_start', sa.Date(), nullable=True),
        sa.Column('lease_end', sa.Date(), nullable=True),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('security_deposit', sa.Numeric(precision=12, scale=2), nullable=False),
        *_timestamps(),
        _deleted_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_tenants_property_id'),
    )
    op.create_index('ix_tenants_property_id', 'tenants', ['property_id'])

    op.create_table(
        'payments',
        _id(),
        sa.Column('tenant_id', sa.String(length=32), nullable=False),
        sa.Column('property_id', sa.String(length=32), nullable=False),
        sa.Column('unit_id', sa.String(length=32), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('amount_due_at_time', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('balance_after_transaction', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column(
            'method',
            sa.Enum('CASH', 'BANK_TRANSFER', 'MOBILE_MONEY', 'CHEQUE', name='payment_method', create_constraint=True),
            nullable=False,
        ),
        sa.Column('late_fee', sa.Numeric(precision=12, scale=2), server_default='0', nullable=False),
        sa.Column('reference_number', sa.String(length=100), nullable=True),
        sa.Column('created_by', sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], name='fk_payments_tenant_id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_payments_property_id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_payments_unit_id'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_payments_created_by'),
    )
    op.create_index('ix_payments_tenant_id', 'payments', ['tenant_id'])
    op.create_index('ix_payments_property_id', 'payments', ['property_id'])
    op.create_index('ix_payments_payment_date', 'payments', ['payment_date'])

    op.create_table(
        'expenses',
        _id(),
        sa.Column('property_id', sa.String(length=32), nullable=False),
        sa.Column(
            'category',
            sa.Enum('MAINTENANCE', 'UTILITY', 'REPAIR', 'VENDOR', 'OTHER', name='expense_category', create_constraint=True),
            nullable=False,
        ),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('receipt_url', sa.String(length=500), nullable=True),
        sa.Column('created_by', sa.String(length=32), nullable=False),
        *_timestamps(),
        _deleted_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_expenses_property_id'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_expenses_created_by'),
    )
    op.create_index('ix_expenses_property_id', 'expenses', ['property_id'])
    op.create_index('ix_expenses_date', 'expenses', ['date'])

    op.create_table(
        'maintenance',
        _id(),
        sa.Column('unit_id', sa.String(length=32), nullable=False),
        sa.Column('tenant_id', sa.String(length=32), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column(
            'status',
            sa.Enum('PENDING', 'IN_PROGRESS', 'COMPLETED', name='maintenance_status', create_constraint=True),
            server_default='PENDING',
            nullable=False,
        ),
        sa.Column('assigned_to', sa.String(length=200), nullable=True),
        *_timestamps(),
        _deleted_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_maintenance_unit_id'),
    )
    op.create_index('ix_maintenance_unit_id', 'maintenance', ['unit_id'])

    op.create_table(
        'audit_logs',
        _id(),
        sa.Column('user_id', sa.String(length=32), nullable=True),
        sa.Column('action', sa.String(length=50), nullable=False),
        sa.Column('entity_type', sa.String(length=50), nullable=False),
        sa.Column('entity_id', sa.String(length=32), nullable=True),
        sa.Column('old_value', sa.JSON(), nullable=True),
        sa.Column('new_value', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_audit_logs_user_id'),
    )
    op.create_index('ix_audit_logs_user_id', 'audit_logs', ['user_id'])
    op.create_index('ix_audit_logs_entity_type', 'audit_logs', ['entity_type'])
    op.create_index('ix_audit_logs_created_at', 'audit_logs', ['created_at'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table, indexes in (
        ('audit_logs', ['ix_audit_logs_created_at', 'ix_audit_logs_entity_type', 'ix_audit_logs_user_id']),
        ('maintenance', ['ix_maintenance_unit_id']),
        ('expenses', ['ix_expenses_date', 'ix_expenses_property_id']),
        ('payments', ['ix_payments_payment_date', 'ix_payments_property_id', 'ix_payments_tenant_id']),
        ('tenants', ['ix_tenants_property_id']),
        ('units', ['ix_units_property_id']),
        ('properties', ['ix_properties_owner_id']),
        ('users', ['ix_users_owner_id', 'ix_users_email']),
    ):
        for index in indexes:
            op.drop_index(index, table_name=table)
        op.drop_table(table)

    bind = op.get_bind()
    for enum_name in ('maintenance_status', 'expense_category', 'payment_method', 'unit_status', 'user_role'):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
