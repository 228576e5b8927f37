"""create users, surveys, questions, responses

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:12:44.201733

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'surveys',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('created_at', sa.String(length=32), nullable=False),
    )
    op.create_index('ix_surveys_created_at', 'surveys', ['created_at'])

    op.create_table(
        'questions',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('survey_id', sa.String(length=32),
                  sa.ForeignKey('surveys.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_index('ix_questions_survey_id', 'questions', ['survey_id'])

    op.create_table(
        'responses',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('user_id', sa.String(length=64), nullable=True),
        sa.Column('survey_id', sa.String(length=32),
                  sa.ForeignKey('surveys.id', ondelete='CASCADE'), nullable=False),
        sa.Column('submitted_at', sa.String(length=32), nullable=False),
        sa.Column('answers_json', sa.Text(), nullable=False),
    )
    op.create_index('ix_responses_survey_id', 'responses', ['survey_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_responses_survey_id', table_name='responses')
    op.drop_table('responses')
    op.drop_index('ix_questions_survey_id', table_name='questions')
    op.drop_table('questions')
    op.drop_index('ix_surveys_created_at', table_name='surveys')
    op.drop_table('surveys')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
