"""create content tables

Revision ID: 20261019_1000_create_content_tables
Revises:
Create Date: 2026-10-19 10:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1000_create_content_tables'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('author', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cover_color', sa.String(32), nullable=False, server_default='#9b87f5'),
        sa.Column('genre', sa.String(64), nullable=False, server_default='Self-Help'),
        sa.Column('cover_image_url', sa.Text(), nullable=True),
        sa.Column('affiliate_link', sa.Text(), nullable=True),
        sa.Column('amazon_affiliate_link', sa.Text(), nullable=True),
        sa.Column('flipkart_affiliate_link', sa.Text(), nullable=True),
        sa.Column('recommended_by', sa.String(255), nullable=True),
        sa.Column('recommendation_reason', sa.Text(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('mood_tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'games',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(64), nullable=False, server_default='Breathing'),
        sa.Column('icon', sa.String(64), nullable=False, server_default='heart'),
        sa.Column('colors', sa.String(32), nullable=True),
        sa.Column('cover_image_url', sa.Text(), nullable=True),
        sa.Column('is_popular', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'testimonials',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_name', sa.String(255), nullable=False),
        sa.Column('user_title', sa.String(255), nullable=True),
        sa.Column('feedback', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'consultants',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('picture_url', sa.Text(), nullable=True),
        sa.Column('booking_url', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'faqs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('page', sa.String(128), nullable=False, index=True),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_table(
        'seo_metadata',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('page_url', sa.String(512), nullable=False, unique=True),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('keywords', sa.Text(), nullable=True),
        sa.Column('og_image', sa.Text(), nullable=True),
        sa.Column('og_title', sa.String(255), nullable=True),
        sa.Column('og_description', sa.Text(), nullable=True),
        sa.Column('twitter_card', sa.String(64), nullable=True),
        sa.Column('canonical_url', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('seo_metadata')
    op.drop_table('faqs')
    op.drop_table('consultants')
    op.drop_table('testimonials')
    op.drop_table('games')
    op.drop_table('books')
