"""create chart_ref, charts and deployment_config tables

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '003'
down_revision: Union[str, None] = '002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create chart tables."""
    op.create_table(
        'chart_ref',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(250), nullable=False),
        sa.Column('version', sa.String(250), nullable=False),
        sa.Column('location', sa.String(250), nullable=False),
        sa.Column('chart_data', sa.LargeBinary, nullable=True),
        sa.Column('is_default', sa.Boolean, default=False, nullable=False),
        sa.Column('user_uploaded', sa.Boolean, default=False, nullable=False),
        sa.Column('active', sa.Boolean, default=True, nullable=False),
    )

    op.create_table(
        'charts',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('app_id', sa.Integer, nullable=False),
        sa.Column('chart_name', sa.String(250), nullable=False),
        sa.Column('chart_version', sa.String(250), nullable=False),
        sa.Column('chart_location', sa.String(250), nullable=False),
        sa.Column('chart_ref_id', sa.Integer, nullable=False),
        sa.Column('reference_template', sa.String(250), nullable=False),
        sa.Column('active', sa.Boolean, default=True, nullable=False),
        sa.Column('updated_on', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['chart_ref_id'], ['chart_ref.id']),
    )
    op.create_index('ix_charts_app_id', 'charts', ['app_id'])

    op.create_table(
        'deployment_config',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('app_id', sa.Integer, nullable=False),
        sa.Column('environment_id', sa.Integer, nullable=False),
        sa.Column('chart_location', sa.String(250), nullable=False),
        sa.Column('release_mode', sa.Enum('CREATE', 'LINK', name='releasemode'), nullable=False),
        sa.Column('active', sa.Boolean, default=True, nullable=False),
        sa.Column('updated_by', sa.Integer, nullable=False),
        sa.Column('updated_on', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.UniqueConstraint('app_id', 'environment_id', name='uq_deployment_config_app_env'),
    )


def downgrade() -> None:
    """Drop chart tables."""
    op.drop_table('deployment_config')
    op.drop_index('ix_charts_app_id')
    op.drop_table('charts')
    op.drop_table('chart_ref')
    op.execute('DROP TYPE releasemode')
