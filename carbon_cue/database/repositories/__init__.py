"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from carbon_cue.database.repositories.base import BaseRepository
from carbon_cue.database.repositories.history import HistoryRepository
from carbon_cue.database.repositories.key_value import KeyValueRepository

__all__ = [
    "BaseRepository",
    "HistoryRepository",
    "KeyValueRepository",
]
