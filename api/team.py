from fastapi import APIRouter
from fastapi.params import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_200_OK, HTTP_404_NOT_FOUND

from api.errors import to_http_exception, error_responses
from api.schemas import TeamResponseSchema, TeamCreateSchema
from database.gen_session import get_session
from services.errors import ServiceError
from services.team_service import TeamService


t_router = APIRouter(prefix='/team')


@t_router.post(
    '/add',
    response_model=TeamResponseSchema,
    status_code=HTTP_201_CREATED,
    responses=error_responses()
)
async def team_add(
        team_data: TeamCreateSchema,
        session: AsyncSession = Depends(get_session)
):
    try:
        return await TeamService(session).upsert_team(team_data.team_name, team_data.members)
    except ServiceError as _se:
        raise to_http_exception(_se)


@t_router.get(
    '/get',
    response_model=TeamResponseSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND)
)
async def team_get(
    team_name: str = Query(...),
    session: AsyncSession = Depends(get_session)
):
    try:
        return await TeamService(session).get_team(team_name)
    except ServiceError as _se:
        raise to_http_exception(_se)
