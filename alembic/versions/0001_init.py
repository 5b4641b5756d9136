"""initial

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table('outfit',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('photo_references', sa.JSON(), nullable=True),
        sa.Column('occasion_tags', sa.JSON(), nullable=True),
        sa.Column('style_tags', sa.JSON(), nullable=True),
        sa.Column('season_tags', sa.JSON(), nullable=True),
        sa.Column('colors', sa.JSON(), nullable=True),
        sa.Column('garments', sa.JSON(), nullable=True),
        sa.Column('mood', sa.Text(), nullable=True),
        sa.Column('formality_level', sa.Integer(), nullable=True),
        sa.Column('effort_level', sa.String(length=16), nullable=True),
        sa.Column('weather', sa.JSON(), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('duration', sa.Text(), nullable=True),
        sa.Column('event_type', sa.Text(), nullable=True),
        sa.Column('confidence_rating', sa.Integer(), nullable=True),
        sa.Column('comfort_rating', sa.Integer(), nullable=True),
        sa.Column('success_rating', sa.Integer(), nullable=True),
        sa.Column('repeat_likelihood', sa.Integer(), nullable=True),
        sa.Column('ratings_feedback', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('ai_analysis', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
    )
    op.create_index('ix_outfit_timestamp', 'outfit', ['timestamp'])
    op.create_table('wardrobe_item',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=32), nullable=False),
        sa.Column('colors', sa.JSON(), nullable=True),
        sa.Column('style_tags', sa.JSON(), nullable=True),
        sa.Column('purchase_date', sa.Date(), nullable=True),
        sa.Column('cost', sa.Float(), nullable=True),
        sa.Column('brand', sa.String(length=200), nullable=True),
        sa.Column('care_instructions', sa.Text(), nullable=True),
        sa.Column('worn_count', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('last_worn', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
    )
    op.create_index('ix_wardrobe_item_category', 'wardrobe_item', ['category'])

def downgrade() -> None:
    op.drop_index('ix_wardrobe_item_category', table_name='wardrobe_item')
    op.drop_table('wardrobe_item')
    op.drop_index('ix_outfit_timestamp', table_name='outfit')
    op.drop_table('outfit')
