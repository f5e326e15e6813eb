"""
SQLAlchemy database models.

The local store is a single key-value table: one row per collection,
holding the whole collection as a JSON array.
"""
from sqlalchemy import Column, String, JSON, DateTime
from sqlalchemy.sql import func
from .db import Base


class StoreEntry(Base):
    """
    One persisted collection.

    Mirrors a browser localStorage slot: the key is a collection name
    (e.g. ``fishing_companion_trips``) and the value is the serialized list.
    """
    __tablename__ = "store_entries"

    key = Column(String, primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
