"""
Donation repository.

Owns the database engine for its whole lifetime and provides the two
operations the rest of the application needs:

- record_donation(): insert a donor, then a food entry pointing at it
- list_available_food(): join every food entry with its donor

Sessions are opened per call and always closed, whether the call
succeeds or fails.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from food_donation.config import settings
from food_donation.core.constants import MISSING_DONOR_ID, StorageErrorKind
from food_donation.core.exceptions import StorageError
from food_donation.core.validation import DonationForm, validate_donation
from food_donation.database.schema import ensure_schema
from food_donation.database.session import (
    create_db_engine,
    create_session_factory,
    get_db_context,
)
from food_donation.models import Donor, FoodEntry, FoodListing

logger = logging.getLogger(__name__)


class DonationRepository:
    """
    Persistence for donors and the food they offer.

    Args:
        engine: Engine to use. Defaults to one built from settings.
        atomic: Insert donor and food in one transaction. Defaults to
            ``settings.atomic_donations``.
        strict_generated_keys: Fail when the donor insert yields no id
            instead of falling back to ``MISSING_DONOR_ID``. Defaults to
            ``settings.strict_generated_keys``.

    Example:
        with DonationRepository.from_url("sqlite:///./food_donation.db") as repo:
            repo.ensure_schema()
            repo.record_donation("Alice", "Downtown", "Rice", "10", "01-01-2025 10:00")
            for listing in repo.list_available_food():
                print(listing.as_row())
    """

    def __init__(
        self,
        engine: Optional[Engine] = None,
        atomic: Optional[bool] = None,
        strict_generated_keys: Optional[bool] = None
    ):
        if engine is None:
            try:
                engine = create_db_engine()
            except OSError as exc:
                raise StorageError.wrap(StorageErrorKind.CONNECTION_FAILED, exc) from exc

        self.engine = engine
        self.atomic = settings.atomic_donations if atomic is None else atomic
        self.strict_generated_keys = (
            settings.strict_generated_keys
            if strict_generated_keys is None
            else strict_generated_keys
        )
        self._session_factory = create_session_factory(engine)
        self._write_lock = threading.Lock()

    @classmethod
    def from_url(cls, database_url: str, **kwargs) -> "DonationRepository":
        """Build a repository with its own engine for ``database_url``."""
        try:
            engine = create_db_engine(database_url)
        except OSError as exc:
            raise StorageError.wrap(StorageErrorKind.CONNECTION_FAILED, exc) from exc
        return cls(engine, **kwargs)

    # ========================================
    # Lifecycle
    # ========================================

    def ensure_schema(self) -> None:
        """Create the donor / available_food tables if missing."""
        ensure_schema(self.engine)

    def close(self) -> None:
        """Release the underlying connection pool."""
        self.engine.dispose()

    def __enter__(self) -> "DonationRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def _session(self, kind: StorageErrorKind) -> Generator[Session, None, None]:
        """Scoped session whose SQLAlchemy errors surface as StorageError(kind)."""
        try:
            with get_db_context(self._session_factory) as db:
                yield db
        except SQLAlchemyError as exc:
            logger.error("%s: %s", kind.value, exc)
            raise StorageError.wrap(kind, exc) from exc

    # ========================================
    # Write Path
    # ========================================

    def record_donation(
        self,
        name: str,
        location: str,
        food_type: str,
        quantity_text: str,
        pickup_time: str
    ) -> FoodEntry:
        """
        Record one donation: a new donor row and one food row for it.

        Inputs are validated before the database is touched. A new donor
        is inserted on every call, even when an identical donor exists.

        Returns:
            The inserted FoodEntry, with food_id and donor_id populated

        Raises:
            DonationValidationError: EMPTY_FIELD or NOT_A_NUMBER
            StorageError: INSERT_FAILED
        """
        form = validate_donation(name, location, food_type, quantity_text, pickup_time)

        with self._write_lock:
            if self.atomic:
                with self._session(StorageErrorKind.INSERT_FAILED) as db:
                    donor = self._insert_donor(db, form)
                    entry = self._insert_food(db, self._resolve_donor_id(donor), form)
            else:
                # Donor is committed on its own; a failed food insert leaves it behind
                with self._session(StorageErrorKind.INSERT_FAILED) as db:
                    donor = self._insert_donor(db, form)
                donor_id = self._resolve_donor_id(donor)
                with self._session(StorageErrorKind.INSERT_FAILED) as db:
                    entry = self._insert_food(db, donor_id, form)

        logger.info(
            "Recorded donation food_id=%s donor_id=%s (%s x %s)",
            entry.food_id, entry.donor_id, entry.quantity, entry.food_type
        )
        return entry

    def _insert_donor(self, db: Session, form: DonationForm) -> Donor:
        donor = Donor(name=form.name, location=form.location)
        db.add(donor)
        db.flush()
        return donor

    def _insert_food(self, db: Session, donor_id: int, form: DonationForm) -> FoodEntry:
        entry = FoodEntry(
            donor_id=donor_id,
            food_type=form.food_type,
            quantity=form.quantity,
            pickup_time=form.pickup_time
        )
        db.add(entry)
        db.flush()
        return entry

    def _resolve_donor_id(self, donor: Donor) -> int:
        """
        Return the generated donor id.

        Without an id the food row is written with MISSING_DONOR_ID. That
        row is only stored when SQLite foreign keys are off; with
        sqlite_foreign_keys enabled the food insert fails on the
        constraint and the donor is left without food.

        Raises:
            StorageError: INSERT_FAILED when no id was generated and
                strict_generated_keys is set
        """
        if donor.donor_id is not None:
            return donor.donor_id

        if self.strict_generated_keys:
            raise StorageError(
                StorageErrorKind.INSERT_FAILED,
                "Donor insert did not return a generated key"
            )

        logger.warning(
            "Donor insert returned no generated key, using %s", MISSING_DONOR_ID
        )
        return MISSING_DONOR_ID

    # ========================================
    # Read Path
    # ========================================

    def list_available_food(self) -> List[FoodListing]:
        """
        List every food entry joined with its donor.

        Donors without food entries never appear. Rows come back in
        insertion (food_id) order, and the whole table is read each call.

        Raises:
            StorageError: QUERY_FAILED
        """
        stmt = (
            select(
                FoodEntry.food_id,
                Donor.name,
                Donor.location,
                FoodEntry.food_type,
                FoodEntry.quantity,
                FoodEntry.pickup_time,
            )
            .join(Donor, FoodEntry.donor_id == Donor.donor_id)
            .order_by(FoodEntry.food_id)
        )

        with self._session(StorageErrorKind.QUERY_FAILED) as db:
            rows = db.execute(stmt).all()

        return [
            FoodListing(
                food_id=row.food_id,
                donor_name=row.name,
                donor_location=row.location,
                food_type=row.food_type,
                quantity=row.quantity,
                pickup_time=row.pickup_time,
            )
            for row in rows
        ]

    def count_donors(self) -> int:
        """Number of rows in the donor table."""
        with self._session(StorageErrorKind.QUERY_FAILED) as db:
            return db.scalar(select(func.count()).select_from(Donor))

    def count_food_entries(self) -> int:
        """Number of rows in the available_food table."""
        with self._session(StorageErrorKind.QUERY_FAILED) as db:
            return db.scalar(select(func.count()).select_from(FoodEntry))
