"""
KeyValue SQLAlchemy model.

String-keyed blob storage; the calculation history lives in one row.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from carbon_cue.database import Base


class KeyValueDBModel(Base):
    """
    Key-value store table.

    Each row holds one serialized value. Writers replace the whole value,
    there is no partial update.
    """

    __tablename__ = "key_value_store"

    __table_args__ = (
        {
            "comment": "String-keyed serialized blobs (e.g. calculation history)"
        },
    )

    key = Column(
        String(255),
        primary_key=True,
        comment="Storage key, e.g. 'carbon_history'",
    )

    value = Column(
        Text,
        nullable=False,
        comment="Serialized value (JSON text)",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self):
        return f"<KeyValueDBModel: {self.key} ({len(self.value or '')} chars)>"
