"""create teams, users, pull requests and reviewer tables

Revision ID: 0001
Revises:
Create Date: 2025-11-14 14:16:49

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('external_id', sa.String(length=255), nullable=False, unique=True),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_users_is_active', 'users', ['is_active'])

    op.create_table(
        'teams',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'team_users',
        sa.Column('team_id', sa.BigInteger(), sa.ForeignKey('teams.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True,
                  unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    pr_status_enum = sa.Enum('OPEN', 'MERGED', name='pr_status_enum')

    op.create_table(
        'pull_requests',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('status', pr_status_enum, nullable=False, server_default='OPEN'),
        sa.Column('author_id', sa.BigInteger(), sa.ForeignKey('users.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('merged_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('external_id', name='uq_pull_requests_external_id'),
    )
    op.create_index('ix_pull_requests_status', 'pull_requests', ['status'])
    op.create_index('ix_pull_requests_author_id', 'pull_requests', ['author_id'])

    op.create_table(
        'pr_reviewers',
        sa.Column('pr_id', sa.BigInteger(), sa.ForeignKey('pull_requests.id', ondelete='CASCADE'),
                  primary_key=True),
        sa.Column('reviewer_id', sa.BigInteger(), sa.ForeignKey('users.id', ondelete='CASCADE'),
                  primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_pr_reviewers_reviewer_id', 'pr_reviewers', ['reviewer_id'])


def downgrade() -> None:
    op.drop_index('ix_pr_reviewers_reviewer_id', table_name='pr_reviewers')
    op.drop_table('pr_reviewers')
    op.drop_index('ix_pull_requests_author_id', table_name='pull_requests')
    op.drop_index('ix_pull_requests_status', table_name='pull_requests')
    op.drop_table('pull_requests')
    sa.Enum(name='pr_status_enum').drop(op.get_bind(), checkfirst=True)
    op.drop_table('team_users')
    op.drop_table('teams')
    op.drop_index('ix_users_is_active', table_name='users')
    op.drop_table('users')
