"""create cluster table

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create cluster table."""
    op.create_table(
        'cluster',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('cluster_name', sa.String(250), unique=True, nullable=False),
        sa.Column('server_url', sa.String(512), nullable=False),
        sa.Column('config', sa.JSON, nullable=False),
        sa.Column('insecure_skip_tls_verify', sa.Boolean, default=False, nullable=False),
        sa.Column('active', sa.Boolean, default=True, nullable=False),
        sa.Column('created_on', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_on', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )

    op.create_index('ix_cluster_active', 'cluster', ['active'])


def downgrade() -> None:
    """Drop cluster table."""
    op.drop_index('ix_cluster_active')
    op.drop_table('cluster')
