"""
Application-wide constants.

Centralize magic strings and configuration values here.
"""

from enum import Enum


# ========================================
# Error Kinds
# ========================================

class ValidationErrorKind(str, Enum):
    """
    Reasons a donation form is rejected before touching storage.

    Usage:
        kind = ValidationErrorKind.NOT_A_NUMBER
        print(kind == "NOT_A_NUMBER")  # True
    """

    EMPTY_FIELD = "EMPTY_FIELD"
    """A required field is empty after trimming whitespace."""

    NOT_A_NUMBER = "NOT_A_NUMBER"
    """The quantity does not parse as an integer."""


class StorageErrorKind(str, Enum):
    """Failures reported by the storage layer."""

    CONNECTION_FAILED = "CONNECTION_FAILED"
    """The database file could not be opened."""

    SCHEMA_CREATION_FAILED = "SCHEMA_CREATION_FAILED"
    """The donor / available_food tables could not be created."""

    QUERY_FAILED = "QUERY_FAILED"
    """The available food listing query failed."""

    INSERT_FAILED = "INSERT_FAILED"
    """A donor or food insert failed."""


# ========================================
# Table Names
# ========================================

DONOR_TABLE = "donor"
AVAILABLE_FOOD_TABLE = "available_food"


# ========================================
# Donation Form
# ========================================

# Required form fields, in display order
REQUIRED_FIELDS = ("name", "food_type", "quantity", "pickup_time")

# Stored as SQLite INTEGER, bounded like a 32-bit signed int
QUANTITY_MIN = -(2 ** 31)
QUANTITY_MAX = 2 ** 31 - 1

# Used as the donor id when the engine reports no generated key
MISSING_DONOR_ID = -1


# ========================================
# Listing Table
# ========================================

TABLE_COLUMNS = (
    "Food ID",
    "Donor",
    "Location",
    "Food Type",
    "Quantity",
    "Pickup Time",
)


# ========================================
# User Messages
# ========================================

MSG_DONATION_ADDED = "Food entry added successfully!"
MSG_EMPTY_FIELDS = "Please fill all required fields!"
MSG_NOT_A_NUMBER = "Quantity must be a number!"
MSG_INSERT_FAILED = "Error adding data: {error}"
MSG_LOAD_FAILED = "Error loading data: {error}"
