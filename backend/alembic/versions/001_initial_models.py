"""initial_models

Revision ID: 001
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


game_type = sa.Enum("gostop", "poker", name="game_type")
oauth_provider = sa.Enum("google", "apple", name="oauth_provider")
purchase_status = sa.Enum("pending", "completed", "failed", "refunded", name="purchase_status")


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('avatar_url', sa.String(), nullable=True),
        sa.Column('oauth_provider', oauth_provider, nullable=False),
        sa.Column('oauth_id', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_index('idx_user_oauth', 'users', ['oauth_provider', 'oauth_id'])

    # Create game_items table
    op.create_table(
        'game_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('detailed_description', sa.String(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('game_type', game_type, nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_game_items'),
        sa.CheckConstraint('price > 0', name='ck_game_items_price_positive'),
    )
    op.create_index('idx_game_item_type_available', 'game_items', ['game_type', 'is_available'])

    # Create purchases table
    op.create_table(
        'purchases',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('price_paid', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', purchase_status, nullable=False, server_default='pending'),
        sa.Column('purchase_date', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_purchases'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_purchases_user_id_users'),
        sa.ForeignKeyConstraint(['item_id'], ['game_items.id'], name='fk_purchases_item_id_game_items'),
        sa.CheckConstraint('price_paid > 0', name='ck_purchases_price_paid_positive'),
    )
    op.create_index('idx_purchase_user_date', 'purchases', ['user_id', 'purchase_date'])
    op.create_index('idx_purchase_item_id', 'purchases', ['item_id'])


def downgrade() -> None:
    op.drop_index('idx_purchase_item_id', table_name='purchases')
    op.drop_index('idx_purchase_user_date', table_name='purchases')
    op.drop_table('purchases')

    op.drop_index('idx_game_item_type_available', table_name='game_items')
    op.drop_table('game_items')

    op.drop_index('idx_user_oauth', table_name='users')
    op.drop_table('users')

    purchase_status.drop(op.get_bind(), checkfirst=True)
    game_type.drop(op.get_bind(), checkfirst=True)
    oauth_provider.drop(op.get_bind(), checkfirst=True)
