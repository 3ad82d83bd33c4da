from typing import Optional, List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.crud.dialect import upsert_insert
from database.models import User, Team, TeamUser


class UserCrud:
    @staticmethod
    async def get_by_external_id(session: AsyncSession, external_id: str) -> Optional[User]:
        result = await session.execute(
            select(User).where(User.external_id == external_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def create_or_update(
            session: AsyncSession,
            external_id: str,
            username: str,
            is_active: bool
    ) -> User:
        stmt = upsert_insert(session, User).values(
            external_id=external_id,
            username=username,
            is_active=is_active
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.external_id],
            set_={
                'username': stmt.excluded.username,
                'is_active': stmt.excluded.is_active,
                'updated_at': func.now()
            }
        )

        return await session.scalar(
            stmt.returning(User),
            execution_options={'populate_existing': True}
        )

    @staticmethod
    async def set_active(session: AsyncSession, external_id: str, is_active: bool) -> Optional[User]:
        user = await UserCrud.get_by_external_id(session, external_id)

        if user is None:
            return None

        if user.is_active != is_active:
            user.is_active = is_active
            await session.flush()

        return user

    @staticmethod
    async def get_team(session: AsyncSession, user_id: int) -> Optional[Team]:
        result = await session.execute(
            select(Team)
            .join(TeamUser, TeamUser.team_id == Team.id)
            .where(TeamUser.user_id == user_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_active_candidates(
            session: AsyncSession,
            team_id: int,
            exclude_ids: List[int]
    ) -> List[User]:
        result = await session.execute(
            select(User)
            .join(TeamUser, TeamUser.user_id == User.id)
            .where(
                TeamUser.team_id == team_id,
                User.is_active.is_(True),
                User.id.notin_(exclude_ids)
            )
        )

        return list(result.scalars().all())
