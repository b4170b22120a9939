"""initial_fitcoach_schema

Revision ID: 3f9c1e7a2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f9c1e7a2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')

promo_code_status_enum = sa.Enum('active', 'used', name='promo_code_status_enum')
order_status_enum = sa.Enum('pending', name='order_status_enum')
experience_level_enum = sa.Enum(
    'beginner', 'intermediate', 'advanced', name='experience_level_enum'
)
primary_goal_enum = sa.Enum(
    'fat_loss', 'muscle_gain', 'strength', 'other', name='primary_goal_enum'
)
client_status_enum = sa.Enum('active', 'paused', name='client_status_enum')
progress_category_enum = sa.Enum(
    'progress', 'setback', 'health', 'general', name='progress_category_enum'
)


def upgrade() -> None:
    """Upgrade schema - Create catalog, orders, clients and finance tables."""

    # Catalog
    op.create_table(
        'pricing_plans',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('duration_days', sa.Integer(), nullable=False),
        sa.Column('features', JSON_TYPE, nullable=False),
        sa.Column('most_popular', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'gallery_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image_url', sa.String(length=1024), nullable=False),
        sa.Column('caption', sa.String(length=255), nullable=False),
        sa.Column('visible', sa.Boolean(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'achievements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image_url', sa.String(length=1024), nullable=False),
        sa.Column('caption', sa.String(length=255), nullable=False),
        sa.Column('transformation_period', sa.Integer(), nullable=True),
        sa.Column('visible', sa.Boolean(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    # Orders
    op.create_table(
        'promo_codes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('discount_percentage', sa.Integer(), nullable=False),
        sa.Column('status', promo_code_status_enum, nullable=False),
        sa.Column('used_by_order_id', sa.Uuid(), nullable=True),
        sa.Column('used_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_promo_codes_code', 'promo_codes', ['code'], unique=True)

    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('full_name', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=32), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('height', sa.Float(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('experience_level', experience_level_enum, nullable=False),
        sa.Column('primary_goal', primary_goal_enum, nullable=False),
        sa.Column('other_goal', sa.String(length=255), nullable=True),
        sa.Column('injuries_or_notes', sa.Text(), nullable=True),
        sa.Column('preferred_plan', sa.String(length=100), nullable=False),
        sa.Column('subscription_duration', sa.Integer(), nullable=False),
        sa.Column('promo_code', sa.String(length=20), nullable=True),
        sa.Column('final_price', sa.Integer(), nullable=True),
        sa.Column('status', order_status_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_orders_email', 'orders', ['email'])

    # Clients
    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('membership_code', sa.String(length=8), nullable=False),
        sa.Column('full_name', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=32), nullable=False),
        sa.Column('plan', sa.String(length=100), nullable=False),
        sa.Column('primary_goal', sa.String(length=32), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', client_status_enum, nullable=False),
        sa.Column('days_left_on_pause', sa.Integer(), nullable=True),
        sa.Column('current_goal_title', sa.String(length=50), nullable=True),
        sa.Column('target_metric', sa.String(length=50), nullable=True),
        sa.Column('target_value', sa.String(length=20), nullable=True),
        sa.Column('target_date', sa.Date(), nullable=True),
        sa.Column('nutrition_plan_url', sa.String(length=1024), nullable=True),
        sa.Column('training_program_url', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_clients_membership_code', 'clients', ['membership_code'], unique=True
    )
    op.create_index('ix_clients_email', 'clients', ['email'])

    op.create_table(
        'progress_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('note', sa.Text(), nullable=False),
        sa.Column('category', progress_category_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['client_id'], ['clients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_progress_logs_client_id', 'progress_logs', ['client_id'])

    op.create_table(
        'app_data',
        sa.Column('key', sa.String(length=64), nullable=False),
        sa.Column('data', JSON_TYPE, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('key'),
    )

    # Finance
    op.create_table(
        'transactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('client_id', sa.Uuid(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_transactions_date', 'transactions', ['date'])
    op.create_index('ix_transactions_client_id', 'transactions', ['client_id'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_expenses_date', 'expenses', ['date'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_expenses_date', table_name='expenses')
    op.drop_table('expenses')
    op.drop_index('ix_transactions_client_id', table_name='transactions')
    op.drop_index('ix_transactions_date', table_name='transactions')
    op.drop_table('transactions')
    op.drop_table('app_data')
    op.drop_index('ix_progress_logs_client_id', table_name='progress_logs')
    op.drop_table('progress_logs')
    op.drop_index('ix_clients_email', table_name='clients')
    op.drop_index('ix_clients_membership_code', table_name='clients')
    op.drop_table('clients')
    op.drop_index('ix_orders_email', table_name='orders')
    op.drop_table('orders')
    op.drop_index('ix_promo_codes_code', table_name='promo_codes')
    op.drop_table('promo_codes')
    op.drop_table('achievements')
    op.drop_table('gallery_items')
    op.drop_table('pricing_plans')

    bind = op.get_bind()
    for enum_type in (
        progress_category_enum,
        client_status_enum,
        primary_goal_enum,
        experience_level_enum,
        order_status_enum,
        promo_code_status_enum,
    ):
        enum_type.drop(bind, checkfirst=True)
