from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from database.models import User, PullRequest, PRStatus


@dataclass
class TeamMemberView:
    user_id: str
    username: str
    is_active: bool

    @classmethod
    def from_user(cls, user: User) -> 'TeamMemberView':
        return cls(user_id=user.external_id, username=user.username, is_active=user.is_active)


@dataclass
class TeamView:
    team_name: str
    members: List[TeamMemberView] = field(default_factory=list)


@dataclass
class UserView:
    user_id: str
    username: str
    team_name: str
    is_active: bool


@dataclass
class PullRequestShortView:
    pull_request_id: str
    pull_request_name: str
    author_id: str
    status: PRStatus

    @classmethod
    def from_pull_request(cls, pr: PullRequest) -> 'PullRequestShortView':
        return cls(
            pull_request_id=pr.external_id,
            pull_request_name=pr.title,
            author_id=pr.author.external_id,
            status=pr.status
        )


@dataclass
class UserReviewsView:
    user_id: str
    pull_requests: List[PullRequestShortView] = field(default_factory=list)


@dataclass
class PullRequestView:
    pull_request_id: str
    pull_request_name: str
    author_id: str
    status: PRStatus
    assigned_reviewers: List[str]
    created_at: datetime
    merged_at: Optional[datetime] = None

    @classmethod
    def from_pull_request(cls, pr: PullRequest, reviewers: List[User]) -> 'PullRequestView':
        return cls(
            pull_request_id=pr.external_id,
            pull_request_name=pr.title,
            author_id=pr.author.external_id,
            status=pr.status,
            assigned_reviewers=[reviewer.external_id for reviewer in reviewers],
            created_at=pr.created_at,
            merged_at=pr.merged_at
        )


@dataclass
class ReassignView:
    pr: PullRequestView
    replaced_by: str
