import logging

from sqlalchemy.ext.asyncio import AsyncSession

from database.crud.pull_request_crud import PullRequestCrud
from database.crud.user_crud import UserCrud
from database.models import User
from database.transaction import atomic
from services.errors import NotFound
from services.validation import require_external_id
from services.views import UserView, UserReviewsView, PullRequestShortView


logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def set_is_active(self, user_id: str, is_active: bool) -> UserView:
        require_external_id(user_id, 'user_id')

        async with atomic(self.session):
            user = await UserCrud.set_active(self.session, user_id, is_active)

            if user is None:
                logger.warning('User %s not found', user_id)
                raise NotFound(f'User {user_id} not found')

            view = await self._build_view(user)

        logger.info('User %s is_active set to %s', user_id, is_active)

        return view

    async def get_user(self, user_id: str) -> UserView:
        require_external_id(user_id, 'user_id')

        async with atomic(self.session):
            user = await self._require_user(user_id)
            return await self._build_view(user)

    async def get_reviews(self, user_id: str) -> UserReviewsView:
        """Every pull request the user currently reviews, newest first."""
        require_external_id(user_id, 'user_id')

        async with atomic(self.session):
            user = await self._require_user(user_id)
            pull_requests = await PullRequestCrud.list_by_reviewer(self.session, user.id)

            return UserReviewsView(
                user_id=user.external_id,
                pull_requests=[PullRequestShortView.from_pull_request(pr) for pr in pull_requests]
            )

    async def _require_user(self, user_id: str) -> User:
        user = await UserCrud.get_by_external_id(self.session, user_id)

        if user is None:
            logger.warning('User %s not found', user_id)
            raise NotFound(f'User {user_id} not found')

        return user

    async def _build_view(self, user: User) -> UserView:
        team = await UserCrud.get_team(self.session, user.id)

        return UserView(
            user_id=user.external_id,
            username=user.username,
            team_name=team.name if team else '',
            is_active=user.is_active
        )
