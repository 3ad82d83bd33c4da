"""
Reviewer assignment for pull requests.

Every mutation runs inside one ``atomic`` transaction. Reassignment and merge
lock the pull request row first, so concurrent calls on the same PR are
applied one after another and each sees the other's committed result.
"""
import logging
import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from database.crud.pull_request_crud import PullRequestCrud
from database.crud.reviewer_crud import ReviewerCrud
from database.crud.user_crud import UserCrud
from database.models import PRStatus, PullRequest
from database.transaction import atomic
from services.errors import NotFound, AlreadyExists, AlreadyMerged, NotAssigned, NoCandidate
from services.selection import select_reviewers, select_replacement
from services.validation import require_external_id, require_title
from services.views import PullRequestView, ReassignView


logger = logging.getLogger(__name__)


class PullRequestService:
    def __init__(self, session: AsyncSession, rng: Optional[random.Random] = None):
        self.session = session
        self.rng = rng

    async def create(self, pull_request_id: str, pull_request_name: str, author_id: str) -> PullRequestView:
        require_external_id(pull_request_id, 'pull_request_id')
        require_title(pull_request_name)
        require_external_id(author_id, 'author_id')

        async with atomic(self.session):
            if await PullRequestCrud.exists(self.session, pull_request_id):
                logger.warning('PR %s already exists', pull_request_id)
                raise AlreadyExists(f'PR {pull_request_id} already exists')

            author = await UserCrud.get_by_external_id(self.session, author_id)
            if author is None:
                logger.warning('Author %s not found', author_id)
                raise NotFound(f'Author {author_id} not found')

            team = await UserCrud.get_team(self.session, author.id)
            if team is None:
                logger.warning('Author %s has no team', author_id)
                raise NotFound(f'Author {author_id} has no team')

            candidates = await UserCrud.get_active_candidates(
                self.session,
                team_id=team.id,
                exclude_ids=[author.id]
            )
            reviewers = select_reviewers(candidates, rng=self.rng)

            new_pr = await PullRequestCrud.create(
                self.session,
                external_id=pull_request_id,
                title=pull_request_name,
                author=author
            )
            for reviewer in reviewers:
                await ReviewerCrud.assign(self.session, new_pr.id, reviewer.id)

            view = await self._build_view(new_pr)

        logger.info(
            'PR %s created by %s, reviewers: %s',
            pull_request_id, author_id, view.assigned_reviewers
        )

        return view

    async def get(self, pull_request_id: str) -> PullRequestView:
        require_external_id(pull_request_id, 'pull_request_id')

        async with atomic(self.session):
            pr = await self._require_pull_request(pull_request_id)
            return await self._build_view(pr)

    async def merge(self, pull_request_id: str) -> PullRequestView:
        """Mark the PR as merged. Merging an already merged PR is a no-op."""
        require_external_id(pull_request_id, 'pull_request_id')

        async with atomic(self.session):
            pr = await self._require_pull_request(pull_request_id, for_update=True)
            was_open = pr.status == PRStatus.OPEN

            pr = await PullRequestCrud.merge(self.session, pr)
            view = await self._build_view(pr)

        if was_open:
            logger.info('PR %s merged', pull_request_id)

        return view

    async def reassign(self, pull_request_id: str, old_user_id: str) -> ReassignView:
        """Replace ``old_user_id`` on the PR with a random eligible teammate.

        The candidate pool is the active members of the author's team minus
        the author and minus everyone currently reviewing the PR.
        """
        require_external_id(pull_request_id, 'pull_request_id')
        require_external_id(old_user_id, 'old_user_id')

        async with atomic(self.session):
            pr = await self._require_pull_request(pull_request_id, for_update=True)

            if pr.status == PRStatus.MERGED:
                logger.warning('Reassign rejected, PR %s is merged', pull_request_id)
                raise AlreadyMerged(f'PR {pull_request_id} is merged')

            current_reviewers = await ReviewerCrud.list_for_pr(self.session, pr.id)
            old_reviewer = next(
                (reviewer for reviewer in current_reviewers if reviewer.external_id == old_user_id),
                None
            )
            if old_reviewer is None:
                logger.warning('User %s is not a reviewer of PR %s', old_user_id, pull_request_id)
                raise NotAssigned(f'User {old_user_id} is not assigned to PR {pull_request_id}')

            team = await UserCrud.get_team(self.session, pr.author_id)
            candidates = []
            if team is not None:
                exclude_ids = [pr.author_id]
                exclude_ids.extend(reviewer.id for reviewer in current_reviewers)

                candidates = await UserCrud.get_active_candidates(
                    self.session,
                    team_id=team.id,
                    exclude_ids=exclude_ids
                )

            new_reviewer = select_replacement(candidates, rng=self.rng)
            if new_reviewer is None:
                logger.warning('No replacement candidate for PR %s', pull_request_id)
                raise NoCandidate(f'No active replacement candidate for PR {pull_request_id}')

            if not await ReviewerCrud.unassign(self.session, pr.id, old_reviewer.id):
                raise NotAssigned(f'User {old_user_id} is not assigned to PR {pull_request_id}')
            await ReviewerCrud.assign(self.session, pr.id, new_reviewer.id)

            view = ReassignView(
                pr=await self._build_view(pr),
                replaced_by=new_reviewer.external_id
            )

        logger.info(
            'PR %s reviewer %s replaced by %s',
            pull_request_id, old_user_id, view.replaced_by
        )

        return view

    async def _require_pull_request(self, pull_request_id: str, for_update: bool = False) -> PullRequest:
        pr = await PullRequestCrud.get_by_external_id(self.session, pull_request_id, for_update=for_update)

        if pr is None:
            logger.warning('PR %s not found', pull_request_id)
            raise NotFound(f'PR {pull_request_id} not found')

        return pr

    async def _build_view(self, pr: PullRequest) -> PullRequestView:
        reviewers = await ReviewerCrud.list_for_pr(self.session, pr.id)
        return PullRequestView.from_pull_request(pr, reviewers)
