"""
Generic repository over a single-column primary key.

Subclasses bind the model; callers own the transaction.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    CRUD helpers shared by all repositories.

    Writes are flushed, never committed.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    @property
    def primary_key(self):
        return self.model.__mapper__.primary_key[0]

    async def create(self, **data: Any) -> ModelType:
        """
        Insert a row and load server-side defaults.

        Args:
            **data: Column values

        Returns:
            The persisted instance
        """
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get(self, pk: Any) -> Optional[ModelType]:
        """Row for a primary key, or None (uses the identity map first)."""
        return await self.session.get(self.model, pk)

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """
        Rows ordered by primary key.

        Args:
            skip: Rows to skip
            limit: Maximum rows to return
        """
        stmt = select(self.model).order_by(self.primary_key).offset(skip).limit(limit)
        rows = await self.session.execute(stmt)
        return list(rows.scalars().all())

    async def delete(self, pk: Any) -> bool:
        """
        Hard-delete a row.

        Returns:
            True if a row was removed
        """
        stmt = delete(self.model).where(self.primary_key == pk)
        outcome = await self.session.execute(stmt)
        await self.session.flush()
        return outcome.rowcount > 0

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return (await self.session.execute(stmt)).scalar_one()
