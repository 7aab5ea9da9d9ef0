"""Database connection and storage utilities."""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from jobboard.core.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine for the given URL.

    SQLite connections are not pooled so that a connection is never shared
    between event loops. SQLite has no row locks, so every transaction takes
    the database write lock up front with ``BEGIN IMMEDIATE``; concurrent
    writers then run one after another, as ``SELECT ... FOR UPDATE`` makes
    them do on PostgreSQL.
    """
    if not database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=False, pool_pre_ping=True)

    sqlite_engine = create_async_engine(database_url, echo=False, poolclass=NullPool)

    @event.listens_for(sqlite_engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return sqlite_engine


engine: AsyncEngine = build_engine(settings.database_url)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Storage:
    """Schema lifecycle helpers."""

    @staticmethod
    async def init_models() -> None:
        """Create all tables that do not exist yet."""
        import jobboard.models  # noqa: F401

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @staticmethod
    async def reset_models() -> None:
        """Drop and recreate every table."""
        import jobboard.models  # noqa: F401

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
