"""Initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('role', sa.Enum('PLUMBER', 'DISPATCHER', 'HOMEOWNER', 'ADMIN', name='user_role_enum', native_enum=False, length=20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'plumber_profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('xp', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('level', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('forge_score', sa.Float(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint('xp >= 0', name='ck_plumber_profiles_xp'),
        sa.CheckConstraint('forge_score >= 0 AND forge_score <= 5', name='ck_plumber_profiles_score'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    hour_columns = [
        sa.Column(f'{day}_{edge}', sa.String(length=5), nullable=True)
        for day in ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')
        for edge in ('start', 'end')
    ]
    op.create_table(
        'job_preferences',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('plumber_profile_id', sa.Uuid(), nullable=False),
        sa.Column('preferred_job_types', sa.JSON(), nullable=False),
        sa.Column('max_distance_km', sa.Integer(), nullable=False, server_default='50'),
        *hour_columns,
        *_timestamps(),
        sa.ForeignKeyConstraint(['plumber_profile_id'], ['plumber_profiles.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plumber_profile_id')
    )

    op.create_table(
        'badges',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon', sa.String(length=50), nullable=False),
        sa.Column('xp_required', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('criteria', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )

    op.create_table(
        'plumber_badges',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('plumber_profile_id', sa.Uuid(), nullable=False),
        sa.Column('badge_id', sa.Uuid(), nullable=False),
        sa.Column('unlocked_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        *_timestamps(),
        sa.ForeignKeyConstraint(['badge_id'], ['badges.id']),
        sa.ForeignKeyConstraint(['plumber_profile_id'], ['plumber_profiles.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plumber_profile_id', 'badge_id', name='uq_plumber_badges_profile_badge')
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('job_type', sa.String(length=100), nullable=False),
        sa.Column('urgency', sa.Enum('LOW', 'MEDIUM', 'HIGH', 'EMERGENCY', name='job_urgency_enum', native_enum=False, length=20), nullable=False),
        sa.Column('status', sa.Enum('REQUESTED', 'QUOTED', 'SCHEDULED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED', name='job_status_enum', native_enum=False, length=20), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('created_by_id', sa.Uuid(), nullable=False),
        sa.Column('assigned_to_id', sa.Uuid(), nullable=True),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['assigned_to_id'], ['users.id']),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_jobs_job_type', 'jobs', ['job_type'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_created_by_id', 'jobs', ['created_by_id'])
    op.create_index('ix_jobs_assigned_to_id', 'jobs', ['assigned_to_id'])

    op.create_table(
        'quotes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('plumber_id', sa.Uuid(), nullable=False),
        sa.Column('good_title', sa.String(length=255), nullable=False),
        sa.Column('good_description', sa.Text(), nullable=False),
        sa.Column('good_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('better_title', sa.String(length=255), nullable=False),
        sa.Column('better_description', sa.Text(), nullable=False),
        sa.Column('better_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('best_title', sa.String(length=255), nullable=False),
        sa.Column('best_description', sa.Text(), nullable=False),
        sa.Column('best_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('selected_tier', sa.Enum('GOOD', 'BETTER', 'BEST', name='quote_tier_enum', native_enum=False, length=20), nullable=True),
        sa.Column('status', sa.Enum('PENDING', 'ACCEPTED', 'REJECTED', name='quote_status_enum', native_enum=False, length=20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
        sa.ForeignKeyConstraint(['plumber_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_quotes_job_id', 'quotes', ['job_id'])
    op.create_index('ix_quotes_plumber_id', 'quotes', ['plumber_id'])

    op.create_table(
        'photos',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('uploaded_by_id', sa.Uuid(), nullable=False),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=False),
        sa.Column('caption', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
        sa.ForeignKeyConstraint(['uploaded_by_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_photos_job_id', 'photos', ['job_id'])

    op.create_table(
        'reviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('target_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_reviews_rating'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id']),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
        sa.ForeignKeyConstraint(['target_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('job_id', 'author_id', name='uq_reviews_job_author')
    )
    op.create_index('ix_reviews_job_id', 'reviews', ['job_id'])
    op.create_index('ix_reviews_target_id', 'reviews', ['target_id'])

    op.create_table(
        'earnings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('plumber_id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('xp_awarded', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
        sa.ForeignKeyConstraint(['plumber_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plumber_id', 'job_id', name='uq_earnings_plumber_job')
    )
    op.create_index('ix_earnings_plumber_created_at', 'earnings', ['plumber_id', 'created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_earnings_plumber_created_at', table_name='earnings')
    op.drop_table('earnings')
    op.drop_index('ix_reviews_target_id', table_name='reviews')
    op.drop_index('ix_reviews_job_id', table_name='reviews')
    op.drop_table('reviews')
    op.drop_index('ix_photos_job_id', table_name='photos')
    op.drop_table('photos')
    op.drop_index('ix_quotes_plumber_id', table_name='quotes')
    op.drop_index('ix_quotes_job_id', table_name='quotes')
    op.drop_table('quotes')
    op.drop_index('ix_jobs_assigned_to_id', table_name='jobs')
    op.drop_index('ix_jobs_created_by_id', table_name='jobs')
    op.drop_index('ix_jobs_status', table_name='jobs')
    op.drop_index('ix_jobs_job_type', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('plumber_badges')
    op.drop_table('badges')
    op.drop_table('job_preferences')
    op.drop_table('plumber_profiles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
