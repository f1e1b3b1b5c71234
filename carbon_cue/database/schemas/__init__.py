"""
SQLAlchemy database models (schemas).
"""
from carbon_cue.database.schemas.key_value import KeyValueDBModel

__all__ = [
    "KeyValueDBModel",
]
