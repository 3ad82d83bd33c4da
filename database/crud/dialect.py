from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


# insert() constructs that support ON CONFLICT
_UPSERT_INSERTS = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


def upsert_insert(session: AsyncSession, model):
    dialect_name = session.bind.dialect.name

    try:
        return _UPSERT_INSERTS[dialect_name](model)
    except KeyError:
        raise NotImplementedError(f'Upsert is not supported for dialect {dialect_name}') from None
