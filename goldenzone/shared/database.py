"""
Database - SQLAlchemy engine and session factory for the price cache
"""
import os

from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from goldenzone.shared.config import DATABASE_URL
from goldenzone.shared.logger import setup_logger

logger = setup_logger(__name__)

Base = declarative_base()


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or not parsed.database or parsed.database == ":memory:":
        return
    directory = os.path.dirname(os.path.abspath(parsed.database))
    os.makedirs(directory, exist_ok=True)


def _connect_args(url: str) -> dict:
    if make_url(url).get_backend_name() == "sqlite":
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(bind=None) -> bool:
    """
    Create the cache tables.

    Args:
        bind: Engine to create the tables on; defaults to the configured engine

    Returns:
        True on success, False if the database could not be initialized
    """
    # Register the ORM models on Base.metadata
    from goldenzone.shared import models  # noqa: F401

    target = bind if bind is not None else engine
    try:
        _ensure_sqlite_directory(str(target.url))
        Base.metadata.create_all(bind=target)
        logger.info(f"Database initialized at {target.url}")
        return True
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return False
