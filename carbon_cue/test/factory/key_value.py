"""
Factory for KeyValue models following kkb_fastapi pattern.
"""
import json
from datetime import datetime

import factory

from carbon_cue.database.schemas import KeyValueDBModel
from carbon_cue.test.factory.base_factory import AsyncSQLAlchemyFactory
from carbon_cue.test.factory.create_async_session import async_session
from carbon_cue.utils.constants import DEFAULT_HISTORY_STORAGE_KEY


class KeyValueFactory(AsyncSQLAlchemyFactory):
    """Factory for creating KeyValue test rows."""

    class Meta:
        model = KeyValueDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    key = factory.Sequence(lambda n: f"test_key_{n}")
    value = factory.LazyFunction(lambda: json.dumps([]))
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)


class HistoryBlobFactory(KeyValueFactory):
    """Row holding the calculation history blob."""

    key = DEFAULT_HISTORY_STORAGE_KEY
