"""create_profiles_table

Revision ID: 4c1d2e7a9b10
Revises:
Create Date: 2026-10-19 09:12:44.512301

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4c1d2e7a9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the profiles table keyed by owner identity."""
    op.create_table('profiles',
        sa.Column('owner', sa.Text(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('skills', postgresql.JSONB(astext_type=sa.Text()), server_default='[]', nullable=False),
        sa.Column('location', sa.String(length=100), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('char_length(username) BETWEEN 2 AND 50', name='ck_profiles_username_length'),
        sa.CheckConstraint(
            "jsonb_typeof(skills) = 'array' AND jsonb_array_length(skills) BETWEEN 1 AND 10",
            name='ck_profiles_skills_count',
        ),
        sa.PrimaryKeyConstraint('owner'),
    )


def downgrade() -> None:
    """Drop the profiles table."""
    op.drop_table('profiles')
