# app/core/database.py
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from core.config import settings
from models.base import Base


def build_engine(database_url: str = None) -> AsyncEngine:
    url = database_url or settings.DATABASE_URL
    engine = create_async_engine(
        url,
        echo=settings.DEBUG,  # dev only
        future=True,
    )

    if engine.dialect.name == "sqlite":
        # SQLite ignores foreign keys unless asked per connection
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
