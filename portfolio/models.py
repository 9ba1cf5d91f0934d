"""
Database models for the SQL cache store
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CacheRecord(Base):
    """
    One key-value pair of the cache store.
    The value is an opaque caller-serialized string; expiry lives inside it.
    """
    __tablename__ = "cache_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<CacheRecord(key='{self.key}', updated_at={self.updated_at})>"
