import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from services.errors import ServiceError, StorageError


logger = logging.getLogger(__name__)


@asynccontextmanager
async def atomic(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run the enclosed block as one database transaction.

    Commits when the block exits normally and rolls back on any exception.
    Domain errors raised inside propagate unchanged; any other database
    failure is reported as ``StorageError``.
    """
    try:
        async with session.begin():
            yield session
    except ServiceError:
        raise
    except (SQLAlchemyError, asyncio.TimeoutError, OSError) as _e:
        logger.exception('Transaction rolled back on storage failure')
        raise StorageError(f'Storage failure: {_e.__class__.__name__}') from _e
