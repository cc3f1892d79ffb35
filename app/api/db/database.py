from typing import Iterable, List

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from app.api.db.utils import ensure_sqlite_db_file, is_sqlite_url

Base = declarative_base()


class Database:
    def __init__(self, db_url: str) -> None:
        self.db_url = db_url
        self.initialized = False

    async def initialize(self) -> None:
        if self.initialized:
            raise RuntimeError(f"Database {self.db_url} already initialized.")

        engine_args = {"echo": False}
        if is_sqlite_url(self.db_url):
            ensure_sqlite_db_file(self.db_url)
            # aiosqlite connections are bound to the event loop that opened them
            engine_args["poolclass"] = NullPool
            engine_args["connect_args"] = {"check_same_thread": False}

        self.engine = create_async_engine(self.db_url, **engine_args)
        self.async_session_builder = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

        # schemas must be imported before create_all sees the table
        import app.api.db.schemas  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.initialized = True

    def session(self) -> AsyncSession:
        if not self.initialized:
            raise RuntimeError("Database not initialized.")

        return self.async_session_builder()

    async def count(self) -> int:
        from app.api.db.schemas import Transaction

        async with self.session() as session:
            res = await session.execute(
                sa.select(sa.func.count()).select_from(Transaction)
            )
            return res.scalar_one()

    async def insert_many(self, rows: Iterable) -> List:
        rows = list(rows)
        async with self.session() as session:
            session.add_all(rows)
            await session.commit()

        return rows

    async def dispose(self) -> None:
        if not self.initialized:
            return

        await self.engine.dispose()
        self.initialized = False
