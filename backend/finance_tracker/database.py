import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine

from .models import Base

logger = logging.getLogger(__name__)

# Global state for the active database
_current_engine: Engine | None = None
_current_session_factory: sessionmaker | None = None


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign keys for SQLite."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_database(db_url: str, **engine_kwargs) -> Engine:
    """
    Connect to the ledger database.

    Creates the tables if they don't exist. Replaces any engine opened earlier.
    """
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        close_database()

    if db_url.startswith("sqlite"):
        engine_kwargs.setdefault("connect_args", {"check_same_thread": False})

    _current_engine = create_engine(db_url, echo=False, **engine_kwargs)
    _current_session_factory = sessionmaker(bind=_current_engine)

    # Create tables if they don't exist
    Base.metadata.create_all(_current_engine)
    logger.info("Opened ledger database %s", _current_engine.url.render_as_string(hide_password=True))
    return _current_engine


def close_database() -> None:
    """Dispose of the current engine."""
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        _current_engine.dispose()
        _current_engine = None
        _current_session_factory = None


def get_session() -> Session:
    """Get a database session for the active database."""
    if _current_session_factory is None:
        raise RuntimeError("Database is not initialised")
    return _current_session_factory()


def get_db():
    """FastAPI dependency for database sessions."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def is_database_open() -> bool:
    """Check if a database is currently connected."""
    return _current_engine is not None
