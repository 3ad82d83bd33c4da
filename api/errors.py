from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_409_CONFLICT, \
    HTTP_503_SERVICE_UNAVAILABLE

from api.schemas import ErrorResponseSchema
from services.errors import ServiceError, NotFound, AlreadyExists, AlreadyMerged, NotAssigned, NoCandidate, \
    InvalidInput, StorageError


STATUS_BY_ERROR = {
    NotFound: HTTP_404_NOT_FOUND,
    AlreadyExists: HTTP_409_CONFLICT,
    AlreadyMerged: HTTP_409_CONFLICT,
    NotAssigned: HTTP_409_CONFLICT,
    NoCandidate: HTTP_409_CONFLICT,
    InvalidInput: HTTP_400_BAD_REQUEST,
    StorageError: HTTP_503_SERVICE_UNAVAILABLE,
}

RETRY_AFTER_SECONDS = '1'


def error_detail(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


def error_responses(*status_codes: int) -> dict:
    """OpenAPI ``responses`` entries for the error envelope.

    Every route can fail validation (400) and storage (503).
    """
    codes = (HTTP_400_BAD_REQUEST, *status_codes, HTTP_503_SERVICE_UNAVAILABLE)
    return {code: {'model': ErrorResponseSchema} for code in codes}


def to_http_exception(error: ServiceError) -> HTTPException:
    status_code = STATUS_BY_ERROR.get(type(error), HTTP_503_SERVICE_UNAVAILABLE)
    headers = {"Retry-After": RETRY_AFTER_SECONDS} if error.retryable else None

    return HTTPException(
        status_code=status_code,
        detail=error_detail(error.code, error.message),
        headers=headers
    )
