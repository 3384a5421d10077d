"""create favorites, admin users and mood assessments

Revision ID: 20261019_1010_create_user_tables
Revises: 20261019_1000_create_content_tables
Create Date: 2026-10-19 10:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1010_create_user_tables'
down_revision = '20261019_1000_create_content_tables'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'user_favorites',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(64), nullable=False, index=True),
        sa.Column('item_type', sa.String(16), nullable=False),
        sa.Column('item_id', sa.String(64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'item_type', 'item_id', name='uq_user_favorites_user_item'),
    )
    op.create_table(
        'admin_users',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('role', sa.String(32), nullable=False, server_default='admin'),
    )
    op.create_table(
        'mood_assessments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(64), nullable=True, index=True),
        sa.Column('user_session', sa.String(128), nullable=True),
        sa.Column('test_type', sa.String(16), nullable=False),
        sa.Column('responses', sa.JSON(), nullable=False),
        sa.Column('mood_result', sa.String(64), nullable=False),
        sa.Column('mood_score', sa.Integer(), nullable=False),
        sa.Column('recommendations', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, index=True),
    )

def downgrade() -> None:
    op.drop_table('mood_assessments')
    op.drop_table('admin_users')
    op.drop_table('user_favorites')
