"""
Database connection and setup for the SQL cache store
"""
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from portfolio.models import Base

logger = logging.getLogger("db")

DEFAULT_DATABASE_URL = "sqlite:///./portfolio_cache.db"


def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create an engine for the cache database.

    SQLite needs check_same_thread=False because FastAPI runs sync
    endpoints in a thread pool.
    """
    url = database_url or DEFAULT_DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        connect_args=connect_args,
        echo=False,  # Set to True to see SQL queries
    )


def init_db(engine: Engine) -> None:
    """
    Create all tables.
    Safe to call multiple times (won't recreate existing tables)
    """
    Base.metadata.create_all(bind=engine)
    logger.info(f"Cache database initialized at: {engine.url}")


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to the given engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
