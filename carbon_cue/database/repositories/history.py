"""
History Repository.

Calculation history persisted as one JSON list under a single key.
"""

import json
import logging

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_cue.database.repositories.key_value import KeyValueRepository
from carbon_cue.pydantic_models.calculation import CalculationEntryPydModel
from carbon_cue.utils.constants import DEFAULT_HISTORY_STORAGE_KEY

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[CalculationEntryPydModel])


class HistoryRepository:
    """
    Append-only list of saved calculations.

    Every write replaces the whole stored list. A stored value that cannot
    be read is treated as an empty history.
    """

    def __init__(self, session: AsyncSession, storage_key: str = DEFAULT_HISTORY_STORAGE_KEY):
        self.storage_key = storage_key
        self.store = KeyValueRepository(session)

    async def load_all(self) -> list[CalculationEntryPydModel]:
        """
        Load saved calculations in insertion order.

        Returns:
            List of entries (empty if nothing is stored or the blob is corrupt)
        """
        raw = await self.store.get_value(self.storage_key)
        if raw is None:
            return []

        try:
            return _entries_adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(
                f"Stored history under '{self.storage_key}' is unreadable, "
                f"treating it as empty: {e}"
            )
            return []

    async def append(self, entry: CalculationEntryPydModel) -> list[CalculationEntryPydModel]:
        """
        Add an entry to the end of the history.

        Args:
            entry: Calculation to save

        Returns:
            The full history after the append
        """
        entries = await self.load_all()
        entries.append(entry)
        await self._write(entries)
        logger.info(f"Saved calculation to history ({len(entries)} entries)")
        return entries

    async def clear_all(self) -> None:
        """Remove every saved calculation."""
        await self.store.delete(self.storage_key)
        logger.info("Cleared calculation history")

    async def _write(self, entries: list[CalculationEntryPydModel]) -> None:
        blob = json.dumps([entry.to_storage() for entry in entries])
        await self.store.set_value(self.storage_key, blob)
