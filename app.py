import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from config import API_HOST, API_PORT, configure_logging
from api import routers
from api.errors import error_detail
from database.gen_session import init_db, close_db


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await init_db()
    yield
    await close_db()


app = FastAPI(title='PR Reviewer Assignment Service', lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=[
        "GET",
        "POST",
        "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Access-Control-Allow-Headers",
        "Access-Control-Allow-Origin"],
    expose_headers=["Content-Type"]
)


@app.middleware('http')
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        '%s %s -> %d (%.1f ms)',
        request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning('Invalid request to %s: %s', request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": error_detail("INVALID_INPUT", "invalid request body or parameters")}
    )


for rt in routers:
    app.include_router(rt)


if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT)
