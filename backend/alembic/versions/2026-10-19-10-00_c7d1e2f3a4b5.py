"""create startup_ideas, pitch_decks and executive_summaries

Revision ID: c7d1e2f3a4b5
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union
import sqlmodel
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c7d1e2f3a4b5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _document_columns() -> list[sa.Column]:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=128), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def _document_indexes(table: str) -> None:
    op.create_index(op.f(f'ix_{table}_id'), table, ['id'], unique=False)
    op.create_index(op.f(f'ix_{table}_user_id'), table, ['user_id'], unique=False)
    op.create_index(op.f(f'ix_{table}_created_at'), table, ['created_at'], unique=False)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'startup_ideas',
        *_document_columns(),
        sa.Column('startup_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('problem_statement', sa.Text(), nullable=False),
        sa.Column('target_audience', sa.Text(), nullable=False),
        sa.Column('solution', sa.Text(), nullable=False),
        sa.Column('monetization_plan', sa.Text(), nullable=False),
        sa.Column('competitors', sa.Text(), nullable=False),
        sa.Column('market_size', sa.Text(), nullable=True),
        sa.Column('team_overview', sa.Text(), nullable=True),
        sa.Column('industry', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _document_indexes('startup_ideas')

    op.create_table(
        'pitch_decks',
        *_document_columns(),
        sa.Column('idea_id', sa.Uuid(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('slides', sa.JSON(), nullable=True),
        sa.Column('investor_persona', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    _document_indexes('pitch_decks')
    op.create_index(op.f('ix_pitch_decks_idea_id'), 'pitch_decks', ['idea_id'], unique=False)

    op.create_table(
        'executive_summaries',
        *_document_columns(),
        sa.Column('idea_id', sa.Uuid(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('format', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _document_indexes('executive_summaries')
    op.create_index(op.f('ix_executive_summaries_idea_id'), 'executive_summaries', ['idea_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('executive_summaries')
    op.drop_table('pitch_decks')
    op.drop_table('startup_ideas')
