"""
factory_boy base for async SQLAlchemy models following kkb_fastapi pattern.

Usage:
    row = await KeyValueFactory(key="alpha")
"""
import asyncio
import inspect
from typing import Any

import factory
from factory.alchemy import SESSION_PERSISTENCE_COMMIT, SQLAlchemyOptions


async def _resolve(kwargs: dict) -> dict:
    """Await any SubFactory tasks among the declared values."""
    return {
        key: (await value if inspect.isawaitable(value) else value)
        for key, value in kwargs.items()
    }


class AsyncSQLAlchemyFactory(factory.Factory):
    """
    Factory whose instances are written through a fresh AsyncSession.

    Calling the factory returns a Task; awaiting it yields the stored row.
    ``Meta.sqlalchemy_session_persistence`` picks commit or flush.
    """

    _options_class = SQLAlchemyOptions

    class Meta:
        abstract = True

    @classmethod
    async def create(cls, **kwargs) -> Any:
        return await super().create(**kwargs)

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        # Tasks, unlike coroutines, may be awaited by several SubFactory users
        return asyncio.create_task(cls._persist(model_class, *args, **kwargs))

    @classmethod
    async def _persist(cls, model_class, *args, **kwargs) -> Any:
        values = await _resolve(kwargs)
        async with cls._meta.sqlalchemy_session() as session:
            instance = model_class(*args, **values)
            session.add(instance)
            if cls._meta.sqlalchemy_session_persistence == SESSION_PERSISTENCE_COMMIT:
                await session.commit()
            else:
                await session.flush()
            return instance

    @classmethod
    async def create_batch(cls, size: int, **kwargs) -> list[Any]:
        """Create ``size`` rows one after another."""
        return [await cls.create(**kwargs) for _ in range(size)]
