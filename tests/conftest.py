"""Pytest fixtures: in-memory SQLite database, service runners and HTTP client."""
import random

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.schemas import TeamMemberCreateSchema
from database.gen_session import build_engine, build_session_factory, get_session
from database.models import Base
from services.pull_request_service import PullRequestService
from services.team_service import TeamService
from services.user_service import UserService


def member(user_id, is_active=True, username=None):
    return TeamMemberCreateSchema(
        user_id=user_id,
        username=username or user_id.capitalize(),
        is_active=is_active
    )


@pytest_asyncio.fixture
async def engine():
    engine = build_engine('sqlite+aiosqlite:///:memory:')
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def rng():
    return random.Random(20251114)


@pytest.fixture
def team_call(session_factory):
    async def _call(method, *args):
        async with session_factory() as session:
            return await getattr(TeamService(session), method)(*args)
    return _call


@pytest.fixture
def user_call(session_factory):
    async def _call(method, *args):
        async with session_factory() as session:
            return await getattr(UserService(session), method)(*args)
    return _call


@pytest.fixture
def pr_call(session_factory, rng):
    async def _call(method, *args):
        async with session_factory() as session:
            return await getattr(PullRequestService(session, rng=rng), method)(*args)
    return _call


@pytest.fixture
def upsert_team(team_call):
    async def _upsert(team_name, *members):
        return await team_call('upsert_team', team_name, list(members))
    return _upsert


@pytest_asyncio.fixture
async def client(session_factory):
    from app import app

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac
    app.dependency_overrides.clear()
