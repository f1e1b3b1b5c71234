"""
Database package following kkb_fastapi pattern.

Models register on ``Base``; import ``carbon_cue.database.schemas`` before
creating tables.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

__all__ = ["Base"]
