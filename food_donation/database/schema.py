"""
Schema management.

Creates the ``donor`` and ``available_food`` tables when they are
missing. Safe to run on every start against an existing database.
"""

import logging
from typing import Dict, List

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from food_donation.core.constants import (
    AVAILABLE_FOOD_TABLE,
    DONOR_TABLE,
    StorageErrorKind,
)
from food_donation.core.exceptions import StorageError
from food_donation.models import create_all_tables

logger = logging.getLogger(__name__)

MANAGED_TABLES = (DONOR_TABLE, AVAILABLE_FOOD_TABLE)


def check_connection(engine: Engine) -> None:
    """
    Open a connection and run a trivial query.

    For SQLite this also creates the database file.

    Raises:
        StorageError: CONNECTION_FAILED if the database cannot be opened
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Database connection failed: %s", exc)
        raise StorageError.wrap(StorageErrorKind.CONNECTION_FAILED, exc) from exc


def ensure_schema(engine: Engine) -> None:
    """
    Ensure both donation tables exist.

    Existing tables are left untouched; calling this repeatedly is a no-op.

    Args:
        engine: Engine for the target database

    Raises:
        StorageError: CONNECTION_FAILED or SCHEMA_CREATION_FAILED
    """
    check_connection(engine)

    try:
        create_all_tables(engine)
    except SQLAlchemyError as exc:
        logger.error("Error creating tables: %s", exc)
        raise StorageError.wrap(StorageErrorKind.SCHEMA_CREATION_FAILED, exc) from exc

    logger.info("Tables %s ready", ", ".join(MANAGED_TABLES))


def describe_schema(engine: Engine) -> Dict[str, List[str]]:
    """
    List the columns of each managed table that currently exists.

    Returns:
        Mapping of table name to column names, in table order

    Example:
        describe_schema(engine)
        # {"donor": ["donor_id", "name", "location"], ...}
    """
    try:
        inspector = inspect(engine)
        existing = set(inspector.get_table_names())
        return {
            table: [column["name"] for column in inspector.get_columns(table)]
            for table in MANAGED_TABLES
            if table in existing
        }
    except SQLAlchemyError as exc:
        raise StorageError.wrap(StorageErrorKind.QUERY_FAILED, exc) from exc
