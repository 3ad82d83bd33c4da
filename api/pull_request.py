from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_200_OK, HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from api.errors import to_http_exception, error_responses
from api.schemas import PullRequestResponseSchema, PullRequestCreateSchema, PullRequestMergeSchema, \
    PullRequestReassignResponseSchema, PullRequestReassignSchema
from database.gen_session import get_session
from services.errors import ServiceError
from services.pull_request_service import PullRequestService

pr_router = APIRouter(prefix='/pullRequest')


@pr_router.post(
    '/create',
    response_model=PullRequestResponseSchema,
    status_code=HTTP_201_CREATED,
    responses=error_responses(HTTP_404_NOT_FOUND, HTTP_409_CONFLICT)
)
async def pull_request_create(
    pr_data: PullRequestCreateSchema,
    session: AsyncSession = Depends(get_session)
):
    try:
        return await PullRequestService(session).create(
            pr_data.pull_request_id,
            pr_data.pull_request_name,
            pr_data.author_id
        )
    except ServiceError as _se:
        raise to_http_exception(_se)


@pr_router.get(
    '/get',
    response_model=PullRequestResponseSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND)
)
async def pull_request_get(
    pull_request_id: str = Query(...),
    session: AsyncSession = Depends(get_session)
):
    try:
        return await PullRequestService(session).get(pull_request_id)
    except ServiceError as _se:
        raise to_http_exception(_se)


@pr_router.post(
    '/merge',
    response_model=PullRequestResponseSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND)
)
async def pull_request_merge(
    pr_data: PullRequestMergeSchema,
    session: AsyncSession = Depends(get_session)
):
    try:
        return await PullRequestService(session).merge(pr_data.pull_request_id)
    except ServiceError as _se:
        raise to_http_exception(_se)


@pr_router.post(
    '/reassign',
    response_model=PullRequestReassignResponseSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND, HTTP_409_CONFLICT)
)
async def pull_request_reassign(
        reassign_data: PullRequestReassignSchema,
        session: AsyncSession = Depends(get_session)
):
    try:
        return await PullRequestService(session).reassign(
            reassign_data.pull_request_id,
            reassign_data.old_user_id
        )
    except ServiceError as _se:
        raise to_http_exception(_se)
