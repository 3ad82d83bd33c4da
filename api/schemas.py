from datetime import datetime

from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from database.models import PRStatus


# === Errors ===


class ErrorDetailSchema(BaseModel):
    code: str
    message: str


class ErrorBodySchema(BaseModel):
    error: ErrorDetailSchema


# HTTPException puts the body under "detail"
class ErrorResponseSchema(BaseModel):
    detail: ErrorBodySchema


# === team.py ===


class TeamMemberCreateSchema(BaseModel):
    user_id: str
    username: str
    is_active: bool = True


class TeamCreateSchema(BaseModel):
    team_name: str
    members: List[TeamMemberCreateSchema]


class TeamMemberResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    is_active: bool


class TeamResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team_name: str
    members: List[TeamMemberResponseSchema]


# === user.py ===


class UserSetIsActiveSchema(BaseModel):
    user_id: str
    is_active: bool


class UserResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    team_name: str
    is_active: bool


class PullRequestShortSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pull_request_id: str
    pull_request_name: str
    author_id: str
    status: PRStatus


class UserReviewListSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    pull_requests: List[PullRequestShortSchema]


# === pull_request.py ===


class PullRequestCreateSchema(BaseModel):
    pull_request_id: str
    pull_request_name: str
    author_id: str


class PullRequestResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pull_request_id: str
    pull_request_name: str
    author_id: str
    status: PRStatus
    assigned_reviewers: List[str]
    created_at: datetime
    merged_at: Optional[datetime] = None


class PullRequestMergeSchema(BaseModel):
    pull_request_id: str


class PullRequestReassignSchema(BaseModel):
    pull_request_id: str
    old_user_id: str


class PullRequestReassignResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pr: PullRequestResponseSchema
    replaced_by: str
