from datetime import datetime, timezone
from typing import Optional, List

from sqlalchemy import select, exists as sql_exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import PullRequest, PullRequestReviewer, PRStatus, User, PR_EXTERNAL_ID_CONSTRAINT
from services.errors import AlreadyExists


# PostgreSQL reports the constraint name, SQLite the column
_DUPLICATE_ID_MARKERS = (PR_EXTERNAL_ID_CONSTRAINT, 'pull_requests.external_id')


def _is_duplicate_id(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in _DUPLICATE_ID_MARKERS)


class PullRequestCrud:
    @staticmethod
    async def get_by_external_id(
            session: AsyncSession,
            external_id: str,
            for_update: bool = False
    ) -> Optional[PullRequest]:
        query = select(PullRequest).where(PullRequest.external_id == external_id)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        result = await session.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    async def exists(session: AsyncSession, external_id: str) -> bool:
        result = await session.execute(
            select(sql_exists().where(PullRequest.external_id == external_id))
        )
        return bool(result.scalar())

    @staticmethod
    async def create(
            session: AsyncSession,
            external_id: str,
            title: str,
            author: User
    ) -> PullRequest:
        new_pr = PullRequest(
            external_id=external_id,
            title=title,
            author=author,
            status=PRStatus.OPEN,
            merged_at=None
        )
        session.add(new_pr)

        try:
            await session.flush()
        except IntegrityError as _ie:
            if not _is_duplicate_id(_ie):
                raise
            # a concurrent create of the same id committed first
            raise AlreadyExists(f'PR {external_id} already exists') from _ie

        return new_pr

    @staticmethod
    async def merge(session: AsyncSession, pr: PullRequest) -> PullRequest:
        if pr.status == PRStatus.OPEN:
            pr.status = PRStatus.MERGED
            pr.merged_at = datetime.now(timezone.utc)
            await session.flush()

        return pr

    @staticmethod
    async def list_by_reviewer(session: AsyncSession, reviewer_id: int) -> List[PullRequest]:
        result = await session.execute(
            select(PullRequest)
            .join(PullRequestReviewer, PullRequestReviewer.pr_id == PullRequest.id)
            .where(PullRequestReviewer.reviewer_id == reviewer_id)
            .order_by(PullRequest.created_at.desc(), PullRequest.id.desc())
        )

        return list(result.scalars().all())
