from .models import (
    Base,
    PRStatus,
    Team,
    User,
    TeamUser,
    PullRequest,
    PullRequestReviewer,
    EXTERNAL_ID_LENGTH,
    TITLE_LENGTH,
    PR_EXTERNAL_ID_CONSTRAINT,
)


__all__ = [
    'Base',
    'PRStatus',
    'Team',
    'User',
    'TeamUser',
    'PullRequest',
    'PullRequestReviewer',
    'EXTERNAL_ID_LENGTH',
    'TITLE_LENGTH',
    'PR_EXTERNAL_ID_CONSTRAINT',
]
