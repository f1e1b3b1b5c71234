"""
KeyValue Repository.

Repository for string-keyed blob storage.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from carbon_cue.database.repositories.base import BaseRepository
from carbon_cue.database.schemas.key_value import KeyValueDBModel


class KeyValueRepository(BaseRepository[KeyValueDBModel]):
    """Repository for key-value operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(KeyValueDBModel, session)

    async def get_value(self, key: str) -> Optional[str]:
        """
        Get the stored value for a key.

        Args:
            key: Storage key

        Returns:
            Stored text, or None if the key does not exist
        """
        instance = await self.get(key)
        return instance.value if instance else None

    async def set_value(self, key: str, value: str) -> KeyValueDBModel:
        """
        Replace the value stored under a key, creating it if needed.

        Args:
            key: Storage key
            value: Serialized value

        Returns:
            The stored row
        """
        instance = await self.get(key)
        if instance is None:
            return await self.create(key=key, value=value)

        instance.value = value
        await self.session.flush()
        return instance
