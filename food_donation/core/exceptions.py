"""
Exception hierarchy for the donation core.

Validation errors are raised before any storage access; storage errors
wrap the SQLAlchemy exception that caused them and keep its message.
"""

from typing import Iterable, Optional, Tuple

from food_donation.core.constants import ValidationErrorKind, StorageErrorKind


class DonationError(Exception):
    """Base class for all errors raised by the donation core."""

    def __init__(self, kind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(kind='{self.kind.value}', message='{self.message}')>"


class DonationValidationError(DonationError):
    """
    A donation form failed validation.

    Attributes:
        kind: EMPTY_FIELD or NOT_A_NUMBER
        fields: Names of the offending fields
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        fields: Iterable[str] = ()
    ):
        super().__init__(kind, message)
        self.fields: Tuple[str, ...] = tuple(fields)


class StorageError(DonationError):
    """
    The storage layer failed.

    ``engine_message`` is the database's own error text, suitable for
    showing to the end user verbatim.
    """

    def __init__(
        self,
        kind: StorageErrorKind,
        message: str,
        engine_message: Optional[str] = None
    ):
        super().__init__(kind, message)
        self.engine_message = engine_message or message

    @classmethod
    def wrap(cls, kind: StorageErrorKind, exc: Exception) -> "StorageError":
        """Build a StorageError from a driver / SQLAlchemy exception."""
        engine_message = str(getattr(exc, "orig", None) or exc)
        return cls(kind, f"{kind.value}: {engine_message}", engine_message)
