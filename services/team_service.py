import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from database.crud.team_crud import TeamCrud
from database.crud.user_crud import UserCrud
from database.models import Team
from database.transaction import atomic
from services.errors import NotFound
from services.validation import require_external_id
from services.views import TeamView, TeamMemberView


logger = logging.getLogger(__name__)


class TeamService:
    """Team roster management.

    ``upsert_team`` is a full replace: after it commits the team's roster is
    exactly the submitted member list.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert_team(self, team_name: str, members: List) -> TeamView:
        require_external_id(team_name, 'team_name')

        # last entry wins for repeated user ids
        unique_members = {}
        for member in members:
            require_external_id(member.user_id, 'user_id')
            unique_members[member.user_id] = member

        async with atomic(self.session):
            team = await TeamCrud.upsert(self.session, team_name)

            user_ids = []
            for member in unique_members.values():
                user = await UserCrud.create_or_update(
                    self.session,
                    external_id=member.user_id,
                    username=member.username,
                    is_active=member.is_active
                )
                user_ids.append(user.id)

            await TeamCrud.replace_members(self.session, team, user_ids)

            view = await self._build_view(team)

        logger.info('Team %s upserted with %d members', team_name, len(view.members))

        return view

    async def get_team(self, team_name: str) -> TeamView:
        require_external_id(team_name, 'team_name')

        async with atomic(self.session):
            team = await TeamCrud.get_by_name(self.session, team_name)

            if team is None:
                logger.warning('Team %s not found', team_name)
                raise NotFound(f'Team {team_name} not found')

            return await self._build_view(team)

    async def _build_view(self, team: Team) -> TeamView:
        members = await TeamCrud.get_members(self.session, team.id)

        return TeamView(
            team_name=team.name,
            members=[TeamMemberView.from_user(user) for user in members]
        )
