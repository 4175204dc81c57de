"""create ephemeral_container and ephemeral_container_actions tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create ephemeral container tables."""
    op.create_table(
        'ephemeral_container',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(253), nullable=False),
        sa.Column('cluster_id', sa.Integer, nullable=False),
        sa.Column('namespace', sa.String(250), nullable=False),
        sa.Column('pod_name', sa.String(253), nullable=False),
        sa.Column('target_container', sa.String(253), nullable=False),
        sa.Column('config', sa.Text, nullable=False),
        sa.Column('is_externally_created', sa.Boolean, default=False, nullable=False),
        sa.ForeignKeyConstraint(['cluster_id'], ['cluster.id']),
        sa.UniqueConstraint('cluster_id', 'namespace', 'pod_name', 'name', name='uq_ephemeral_container_pod_name'),
    )

    op.create_table(
        'ephemeral_container_actions',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('ephemeral_container_id', sa.Integer, nullable=False),
        sa.Column('action_type', sa.Enum('CREATE', 'ACCESS', 'TERMINATE', name='containeraction'), nullable=False),
        sa.Column('performed_by', sa.Integer, nullable=False),
        sa.Column('performed_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['ephemeral_container_id'], ['ephemeral_container.id']),
    )

    op.create_index('ix_ephemeral_container_actions_container_id', 'ephemeral_container_actions', ['ephemeral_container_id'])


def downgrade() -> None:
    """Drop ephemeral container tables."""
    op.drop_index('ix_ephemeral_container_actions_container_id')
    op.drop_table('ephemeral_container_actions')
    op.drop_table('ephemeral_container')
    op.execute('DROP TYPE containeraction')
