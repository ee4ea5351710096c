"""Database package."""

from food_donation.database.session import (
    create_db_engine,
    create_session_factory,
    get_db_context,
)
from food_donation.database.schema import (
    check_connection,
    ensure_schema,
    describe_schema,
)

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "get_db_context",
    "check_connection",
    "ensure_schema",
    "describe_schema",
]
