"""
Database Session Management
============================

Handles database connections and session lifecycle.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from food_donation.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(
    database_url: Optional[str] = None,
    echo: Optional[bool] = None,
    foreign_keys: Optional[bool] = None,
    wal: Optional[bool] = None,
) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: SQLAlchemy URL. Defaults to ``settings.database_url``.
        echo: Log emitted SQL. Defaults to ``settings.app_debug``.
        foreign_keys: Enforce SQLite foreign keys. Defaults to settings.
        wal: Put SQLite in WAL journal mode. Defaults to settings.

    Returns:
        Engine holding a single shared connection for SQLite URLs.
    """
    database_url = database_url or settings.database_url
    echo = settings.app_debug if echo is None else echo
    foreign_keys = settings.sqlite_foreign_keys if foreign_keys is None else foreign_keys
    wal = settings.sqlite_wal if wal is None else wal

    # SQLite-specific configuration
    if database_url.startswith("sqlite"):
        # Ensure data directory exists
        if ":///" in database_url:
            db_path = database_url.split(":///")[1]
            if db_path and not db_path.startswith(":memory:"):
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)

        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute(f"PRAGMA foreign_keys={'ON' if foreign_keys else 'OFF'}")
            if wal:
                cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    else:
        engine = create_engine(database_url, echo=echo)

    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build a session factory bound to ``engine``."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine
    )


@contextmanager
def get_db_context(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Commits on success, rolls back on any exception and always closes
    the session.

    Usage:
        with get_db_context(session_factory) as db:
            db.add(donor)
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
