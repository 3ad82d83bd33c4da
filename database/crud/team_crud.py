from typing import Optional, List

from sqlalchemy import select, delete, insert, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.crud.dialect import upsert_insert
from database.models import Team, User, TeamUser


class TeamCrud:
    @staticmethod
    async def get_by_name(session: AsyncSession, team_name: str) -> Optional[Team]:
        result = await session.execute(
            select(Team).where(Team.name == team_name)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def upsert(session: AsyncSession, team_name: str) -> Team:
        """Insert the team or touch the existing row.

        On PostgreSQL the conflicting row stays locked until the transaction
        ends, so concurrent upserts of one team are applied one after another.
        """
        stmt = upsert_insert(session, Team).values(name=team_name)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Team.name],
            set_={'updated_at': func.now()}
        )

        return await session.scalar(
            stmt.returning(Team),
            execution_options={'populate_existing': True}
        )

    @staticmethod
    async def replace_members(session: AsyncSession, team: Team, user_ids: List[int]):
        # drops the old roster and pulls listed users out of any other team
        await session.execute(
            delete(TeamUser).where(
                or_(TeamUser.team_id == team.id, TeamUser.user_id.in_(user_ids))
            )
        )

        if user_ids:
            await session.execute(
                insert(TeamUser),
                [{'team_id': team.id, 'user_id': user_id} for user_id in user_ids]
            )

    @staticmethod
    async def get_members(session: AsyncSession, team_id: int) -> List[User]:
        result = await session.execute(
            select(User)
            .join(TeamUser, TeamUser.user_id == User.id)
            .where(TeamUser.team_id == team_id)
            .order_by(User.username, User.external_id)
        )

        return list(result.scalars().all())
