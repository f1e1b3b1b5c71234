"""
Async session manager following kkb_fastapi pattern.

Usage:
    Database.init(async_db_url)

    async with Database() as session:
        ...
"""
import logging

from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from carbon_cue.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """
    Process-wide session factory exposed as an async context manager.

    The session is committed when the block exits cleanly and rolled back
    when it raises.
    """

    _engine: AsyncEngine | None = None
    _async_session_maker: sessionmaker | None = None

    def __init__(self):
        self._session: AsyncSession | None = None

    @classmethod
    def init(cls, async_db_url: URL | str, engine_kw: dict | None = None):
        """
        Create the engine and session maker.

        Args:
            async_db_url: Async database URL
            engine_kw: Extra keyword arguments for create_async_engine
        """
        cls._engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = sessionmaker(
            bind=cls._engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.debug(f"Database initialized for {cls._engine.url.drivername}")

    @classmethod
    async def close(cls):
        """Dispose of the engine and forget the session maker."""
        if cls._engine is not None:
            await cls._engine.dispose()
        cls._engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if self._async_session_maker is None:
            raise DatabaseNotInitialized(
                "Database not initialized. Call Database.init() first."
            )
        self._session = self._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                await self._session.rollback()
            else:
                await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Transaction failed: {e}")
            raise DatabaseTransactionError(str(e)) from e
        finally:
            await self._session.close()
