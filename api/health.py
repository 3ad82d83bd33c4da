from fastapi import APIRouter
from starlette.status import HTTP_200_OK


h_router = APIRouter()


@h_router.get('/health', status_code=HTTP_200_OK)
async def health():
    return {"status": "ok"}
