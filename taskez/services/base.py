from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskez.errors import StoreFailure


class Store:
    """
    Holds the process-wide session factory. Each call borrows a session for
    one transaction and hands it back on every exit path.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        self._sessionmaker = sessionmaker

    @asynccontextmanager
    async def _transaction(self):
        try:
            async with self._sessionmaker() as db:
                async with db.begin():
                    yield db
        except SQLAlchemyError as e:
            print(f"[STORE ERROR] {type(e).__name__}: {e}")
            raise StoreFailure() from e
