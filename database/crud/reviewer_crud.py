from typing import List

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User, PullRequestReviewer


class ReviewerCrud:
    @staticmethod
    async def assign(session: AsyncSession, pr_id: int, user_id: int) -> bool:
        existing = await session.get(PullRequestReviewer, (pr_id, user_id))
        if existing is not None:
            return False

        session.add(PullRequestReviewer(pr_id=pr_id, reviewer_id=user_id))
        await session.flush()

        return True

    @staticmethod
    async def unassign(session: AsyncSession, pr_id: int, user_id: int) -> bool:
        result = await session.execute(
            delete(PullRequestReviewer)
            .where(
                PullRequestReviewer.pr_id == pr_id,
                PullRequestReviewer.reviewer_id == user_id
            )
        )

        return result.rowcount > 0

    @staticmethod
    async def list_for_pr(session: AsyncSession, pr_id: int) -> List[User]:
        result = await session.execute(
            select(User)
            .join(PullRequestReviewer, PullRequestReviewer.reviewer_id == User.id)
            .where(PullRequestReviewer.pr_id == pr_id)
            .order_by(PullRequestReviewer.created_at, User.external_id)
        )

        return list(result.scalars().all())
