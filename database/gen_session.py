"""
Async engine and session factory.

The engine (and its bounded connection pool) is created once at startup by
``init_db`` and disposed by ``close_db``. Request handlers only borrow
sessions through ``get_session``.
"""
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import config


logger = logging.getLogger(__name__)


_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def build_engine(database_url: str = config.DATABASE_URL) -> AsyncEngine:
    if database_url.startswith('sqlite'):
        kwargs = {'connect_args': {'check_same_thread': False}}
        if ':memory:' in database_url:
            kwargs['poolclass'] = StaticPool
        engine = create_async_engine(database_url, echo=config.DB_ECHO, **kwargs)
        event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        database_url,
        echo=config.DB_ECHO,
        isolation_level=config.DB_ISOLATION_LEVEL,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        connect_args={'command_timeout': config.DB_COMMAND_TIMEOUT},
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession)


async def init_db(database_url: str = config.DATABASE_URL):
    global _engine, _session_factory

    _engine = build_engine(database_url)
    _session_factory = build_session_factory(_engine)

    logger.info('Database engine initialized: %s', database_url.split('@')[-1])


async def close_db():
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info('Database engine disposed')


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    if _session_factory is None:
        raise RuntimeError('Database not initialized, call init_db() first')

    async with _session_factory() as session:
        yield session
