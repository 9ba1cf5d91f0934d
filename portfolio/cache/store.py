"""
Cache store backends.

A store is a plain string key-value map with no expiry of its own.
Callers serialize values and embed timestamps (see CacheEntry).
"""
import threading
import logging
from datetime import datetime
from typing import Dict, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from portfolio.errors import CacheError
from portfolio.models import CacheRecord

logger = logging.getLogger("cache.store")


class CacheStore(Protocol):
    """Interface every cache backend implements."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored string or None when absent."""
        ...

    def put(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryCacheStore:
    """In-process store for development and tests."""

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class SqlCacheStore:
    """
    SQLAlchemy-backed store using the cache_entries table.

    Every operation runs in its own short session; SQLAlchemy errors are
    re-raised as CacheError so the orchestrator can treat them as non-fatal.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        session = self._session_factory()
        try:
            record = session.get(CacheRecord, key)
            return record.value if record is not None else None
        except SQLAlchemyError as e:
            raise CacheError(f"read failed for {key}: {e}") from e
        finally:
            session.close()

    def put(self, key: str, value: str) -> None:
        session = self._session_factory()
        try:
            record = session.get(CacheRecord, key)
            if record is None:
                session.add(CacheRecord(key=key, value=value, updated_at=datetime.utcnow()))
            else:
                record.value = value
                record.updated_at = datetime.utcnow()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise CacheError(f"write failed for {key}: {e}") from e
        finally:
            session.close()

    def delete(self, key: str) -> None:
        session = self._session_factory()
        try:
            session.query(CacheRecord).filter(CacheRecord.key == key).delete()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise CacheError(f"delete failed for {key}: {e}") from e
        finally:
            session.close()


def build_cache_store(backend: str, database_url: Optional[str] = None) -> CacheStore:
    """
    Create a store for the configured backend.

    Args:
        backend: "memory" or "sql"
        database_url: SQLAlchemy URL, required for the sql backend
    """
    if backend == "memory":
        logger.info("Using in-memory cache store")
        return MemoryCacheStore()
    if backend == "sql":
        from portfolio.db import create_db_engine, create_session_factory, init_db

        engine = create_db_engine(database_url)
        init_db(engine)
        session_factory = create_session_factory(engine)
        logger.info(f"Using SQL cache store at {database_url}")
        return SqlCacheStore(session_factory)
    raise ValueError(f"Unknown cache backend: {backend}")
