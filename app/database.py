import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from app.config import Settings
from app.exceptions import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)


async def _round_trip(awaitable, timeout: float):
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise StoreUnavailableError() from e
    except SQLAlchemyError as e:
        raise StoreError() from e


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def gather_reads(*reads):
    """
    Await independent reads concurrently. Every read is allowed to finish
    so no failure goes uncollected, then the first failure is raised.
    """
    results = await asyncio.gather(*reads, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


class StoreTransaction:
    """Statements executed in order on a single session."""

    def __init__(self, session: AsyncSession, timeout: float):
        self.session = session
        self.timeout = timeout

    async def execute(self, statement):
        return await _round_trip(self.session.execute(statement), self.timeout)

    async def commit(self) -> None:
        await _round_trip(self.session.commit(), self.timeout)

    async def rollback(self) -> None:
        await _round_trip(self.session.rollback(), self.timeout)


class Store:
    """Handle on the relational store, passed to every service call."""

    def __init__(self, engine: AsyncEngine, timeout: float = 5.0):
        self.engine = engine
        self.timeout = timeout
        self.session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        engine = create_async_engine(
            settings.database_url,
            echo=settings.db_echo,
            pool_pre_ping=True,
        )
        if engine.dialect.name == "sqlite":
            # SQLite ignores REFERENCES unless asked, Postgres always enforces them
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return cls(engine, timeout=settings.db_timeout_seconds)

    async def scalars(self, statement) -> List[Any]:
        async with self.session_factory() as session:
            result = await _round_trip(session.execute(statement), self.timeout)
            return list(result.scalars().all())

    async def rows(self, statement) -> List[dict]:
        async with self.session_factory() as session:
            result = await _round_trip(session.execute(statement), self.timeout)
            return [dict(row) for row in result.mappings().all()]

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[StoreTransaction]:
        async with self.session_factory() as session:
            txn = StoreTransaction(session, self.timeout)
            try:
                yield txn
                await txn.commit()
            except BaseException:
                try:
                    await txn.rollback()
                except StoreError:
                    # keep the original error, the rollback failure is only logged
                    logger.exception("Rollback failed")
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()


async def create_db_and_tables(store: Store) -> None:
    import app.models  # noqa: F401  registers the tables on SQLModel.metadata

    async with store.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def get_store(request: Request) -> Store:
    return request.app.state.store
