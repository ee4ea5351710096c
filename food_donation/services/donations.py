"""
Donation Service
================

Facade used by the presentation layer (a form plus a table).

The repository raises typed errors; this service turns them into
results carrying a human-readable message, and shapes the listing into
rows for a table that is fully replaced on every refresh.
"""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from food_donation.core.constants import (
    TABLE_COLUMNS,
    MSG_DONATION_ADDED,
    MSG_INSERT_FAILED,
    MSG_LOAD_FAILED,
)
from food_donation.core.exceptions import DonationValidationError, StorageError
from food_donation.models import FoodEntry
from food_donation.repositories.donations import DonationRepository

logger = logging.getLogger(__name__)


class DonationResult(BaseModel):
    """Outcome of a form submission."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    ok: bool
    message: str
    entry: Optional[FoodEntry] = None
    error_kind: Optional[str] = None
    fields: Tuple[str, ...] = ()


class ListingResult(BaseModel):
    """Outcome of a table refresh."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    columns: Tuple[str, ...] = TABLE_COLUMNS
    rows: List[Tuple] = []
    message: Optional[str] = None
    error_kind: Optional[str] = None


class DonationService:
    """
    Submit donations and load the available food table.

    Example:
        service = DonationService(repository)
        result = service.submit("Alice", "Downtown", "Rice", "10", "01-01-2025 10:00")
        print(result.message)  # "Food entry added successfully!"
    """

    def __init__(self, repository: DonationRepository):
        self.repository = repository

    def submit(
        self,
        name: str,
        location: str,
        food_type: str,
        quantity_text: str,
        pickup_time: str
    ) -> DonationResult:
        """
        Record a donation and report the outcome.

        Validation failures keep the original input untouched so the form
        can be shown again; storage failures carry the database message.
        """
        try:
            entry = self.repository.record_donation(
                name, location, food_type, quantity_text, pickup_time
            )
        except DonationValidationError as exc:
            logger.info("Donation rejected (%s): %s", exc.kind.value, ", ".join(exc.fields))
            return DonationResult(
                ok=False,
                message=exc.message,
                error_kind=exc.kind.value,
                fields=exc.fields,
            )
        except StorageError as exc:
            return DonationResult(
                ok=False,
                message=MSG_INSERT_FAILED.format(error=exc.engine_message),
                error_kind=exc.kind.value,
            )

        return DonationResult(ok=True, message=MSG_DONATION_ADDED, entry=entry)

    def table_rows(self) -> List[Tuple]:
        """
        Current available food as display rows, in TABLE_COLUMNS order.

        Raises:
            StorageError: QUERY_FAILED
        """
        return [listing.as_row() for listing in self.repository.list_available_food()]

    def refresh(self) -> ListingResult:
        """Reload the whole table, reporting failures as a message."""
        try:
            rows = self.table_rows()
        except StorageError as exc:
            return ListingResult(
                ok=False,
                message=MSG_LOAD_FAILED.format(error=exc.engine_message),
                error_kind=exc.kind.value,
            )
        return ListingResult(ok=True, rows=rows)
