import enum
from typing import Optional
from sqlalchemy import String, Boolean, ForeignKey, Enum, DateTime, BigInteger, Integer, Index, UniqueConstraint
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column
from sqlalchemy.sql import func
from datetime import datetime


# SQLite only autoincrements an INTEGER PRIMARY KEY
Id = BigInteger().with_variant(Integer, 'sqlite')

EXTERNAL_ID_LENGTH = 255
TITLE_LENGTH = 500

PR_EXTERNAL_ID_CONSTRAINT = 'uq_pull_requests_external_id'


class Base(AsyncAttrs, DeclarativeBase):
    __mapper_args__ = {'eager_defaults': True}


class PRStatus(enum.Enum):
    OPEN = 'OPEN'
    MERGED = 'MERGED'


class Team(Base):
    __tablename__ = 'teams'

    id: Mapped[int] = mapped_column(Id, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(EXTERNAL_ID_LENGTH),
        unique=True,
        nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )


class User(Base):
    __tablename__ = 'users'

    id: Mapped[int] = mapped_column(Id, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(
        String(EXTERNAL_ID_LENGTH),
        unique=True,
        nullable=False
    )
    username: Mapped[str] = mapped_column(String(EXTERNAL_ID_LENGTH), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )


class TeamUser(Base):
    __tablename__ = 'team_users'

    team_id: Mapped[int] = mapped_column(
        Id,
        ForeignKey('teams.id', ondelete='CASCADE'),
        primary_key=True
    )
    # one team per user
    user_id: Mapped[int] = mapped_column(
        Id,
        ForeignKey('users.id', ondelete='CASCADE'),
        primary_key=True,
        unique=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )


class PullRequest(Base):
    __tablename__ = 'pull_requests'

    id: Mapped[int] = mapped_column(Id, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(
        String(EXTERNAL_ID_LENGTH),
        nullable=False
    )
    title: Mapped[str] = mapped_column(String(TITLE_LENGTH), nullable=False)

    status: Mapped[PRStatus] = mapped_column(
        Enum(PRStatus, name='pr_status_enum'),
        nullable=False,
        default=PRStatus.OPEN,
        index=True
    )

    author_id: Mapped[int] = mapped_column(
        Id,
        ForeignKey('users.id', ondelete='RESTRICT'),
        nullable=False,
        index=True
    )

    author: Mapped['User'] = relationship(
        'User',
        foreign_keys=[author_id],
        lazy='selectin'
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    merged_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    __table_args__ = (
        UniqueConstraint('external_id', name=PR_EXTERNAL_ID_CONSTRAINT),
    )


class PullRequestReviewer(Base):
    __tablename__ = 'pr_reviewers'

    pr_id: Mapped[int] = mapped_column(
        Id,
        ForeignKey('pull_requests.id', ondelete='CASCADE'),
        primary_key=True
    )
    reviewer_id: Mapped[int] = mapped_column(
        Id,
        ForeignKey('users.id', ondelete='CASCADE'),
        primary_key=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    __table_args__ = (
        Index('ix_pr_reviewers_reviewer_id', 'reviewer_id'),
    )
