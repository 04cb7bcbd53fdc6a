"""create catalog and engagement tables

Revision ID: 4c1e7a9b2d10
Revises:
Create Date: 2026-10-18 10:12:31.208114

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '4c1e7a9b2d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'videos',
        sa.Column('id', sa.BIGINT(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('director', sa.Text(), nullable=True),
        sa.Column('cast', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('file_url', sa.Text(), nullable=True),
        sa.Column('file_size', sa.BIGINT(), nullable=True),
        sa.Column('format', sa.Text(), nullable=True),
        sa.Column('resolution', sa.Integer(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False,
                  server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )
    # Case-insensitive title uniqueness
    op.create_index('uq_videos_title_lower', 'videos', [sa.text('lower(title)')], unique=True)

    op.create_table(
        'video_metadata',
        sa.Column('id', sa.BIGINT(), autoincrement=True, nullable=False),
        sa.Column('video_id', sa.BIGINT(), nullable=False),
        sa.Column('genre', sa.Text(), nullable=True),
        sa.Column('synopsis', sa.Text(), nullable=True),
        sa.Column('release_year', sa.Integer(), nullable=True),
        sa.Column('running_time', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['video_id'], ['videos.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('video_id'),
    )

    op.create_table(
        'video_engagements',
        sa.Column('id', sa.BIGINT(), autoincrement=True, nullable=False),
        sa.Column('video_id', sa.BIGINT(), nullable=False),
        sa.Column('impressions', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('views', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('impressions >= 0', name='ck_video_engagements_impressions'),
        sa.CheckConstraint('views >= 0', name='ck_video_engagements_views'),
        sa.ForeignKeyConstraint(['video_id'], ['videos.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('video_id'),
    )


def downgrade() -> None:
    op.drop_table('video_engagements')
    op.drop_table('video_metadata')
    op.drop_index('uq_videos_title_lower', table_name='videos')
    op.drop_table('videos')
