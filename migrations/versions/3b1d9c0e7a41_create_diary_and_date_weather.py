"""Create diary and date_weather tables

Revision ID: 3b1d9c0e7a41
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b1d9c0e7a41'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'date_weather',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weather', sa.String(length=64), nullable=False),
        sa.Column('icon', sa.String(length=16), nullable=True),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('date_weather', schema=None) as batch_op:
        batch_op.create_index('ix_date_weather_date', ['date'], unique=False)

    op.create_table(
        'diary',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('weather_date', sa.Date(), nullable=False),
        sa.Column('weather', sa.String(length=64), nullable=False),
        sa.Column('icon', sa.String(length=16), nullable=True),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('diary', schema=None) as batch_op:
        batch_op.create_index('ix_diary_date', ['date'], unique=False)


def downgrade():
    with op.batch_alter_table('diary', schema=None) as batch_op:
        batch_op.drop_index('ix_diary_date')
    op.drop_table('diary')

    with op.batch_alter_table('date_weather', schema=None) as batch_op:
        batch_op.drop_index('ix_date_weather_date')
    op.drop_table('date_weather')
