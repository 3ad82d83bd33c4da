from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_200_OK, HTTP_404_NOT_FOUND

from api.errors import to_http_exception, error_responses
from api.schemas import UserResponseSchema, UserSetIsActiveSchema, UserReviewListSchema
from database.gen_session import get_session
from services.errors import ServiceError
from services.user_service import UserService

u_router = APIRouter(prefix='/users')


@u_router.post(
    '/setIsActive',
    response_model=UserResponseSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND)
)
async def user_set_is_active(
        user_data: UserSetIsActiveSchema,
        session: AsyncSession = Depends(get_session)
):
    try:
        return await UserService(session).set_is_active(user_data.user_id, user_data.is_active)
    except ServiceError as _se:
        raise to_http_exception(_se)


@u_router.get(
    '/get',
    response_model=UserResponseSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND)
)
async def user_get(
    user_id: str = Query(...),
    session: AsyncSession = Depends(get_session)
):
    try:
        return await UserService(session).get_user(user_id)
    except ServiceError as _se:
        raise to_http_exception(_se)


@u_router.get(
    '/getReview',
    response_model=UserReviewListSchema,
    status_code=HTTP_200_OK,
    responses=error_responses(HTTP_404_NOT_FOUND)
)
async def user_get_review(
    user_id: str = Query(...),
    session: AsyncSession = Depends(get_session)
):
    try:
        return await UserService(session).get_reviews(user_id)
    except ServiceError as _se:
        raise to_http_exception(_se)
