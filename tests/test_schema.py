"""Tests for schema creation."""

import os

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from food_donation.core.constants import StorageErrorKind
from food_donation.core.exceptions import StorageError
from food_donation.database import create_db_engine, describe_schema, ensure_schema
from food_donation.repositories import DonationRepository

EXPECTED_SCHEMA = {
    "donor": ["donor_id", "name", "location"],
    "available_food": ["food_id", "donor_id", "food_type", "quantity", "pickup_time"],
}


def test_describe_schema_before_creation(engine):
    assert describe_schema(engine) == {}


def test_ensure_schema_is_idempotent(engine):
    for _ in range(3):
        ensure_schema(engine)

    assert describe_schema(engine) == EXPECTED_SCHEMA

    with engine.connect() as conn:
        names = conn.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table' AND name IN ('donor', 'available_food')")
        ).scalars().all()
    assert sorted(names) == ["available_food", "donor"]


def test_ensure_schema_creates_database_file(tmp_path, db_url):
    engine = create_db_engine(db_url)
    try:
        ensure_schema(engine)
    finally:
        engine.dispose()

    assert os.path.exists(tmp_path / "data" / "food_donation.db")


def test_existing_store_is_reused(db_url):
    engine = create_db_engine(db_url)
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE donor (donor_id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "name TEXT NOT NULL, location TEXT)"
        )
        conn.exec_driver_sql(
            "CREATE TABLE available_food (food_id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "donor_id INTEGER, food_type TEXT, quantity INTEGER, pickup_time TEXT, "
            "FOREIGN KEY (donor_id) REFERENCES donor(donor_id))"
        )
        conn.exec_driver_sql("INSERT INTO donor (name, location) VALUES ('Bob', 'Harbour')")
        conn.exec_driver_sql(
            "INSERT INTO available_food (donor_id, food_type, quantity, pickup_time) "
            "VALUES (1, 'Bread', 4, '02-02-2025 09:00')"
        )

    with DonationRepository(engine) as repo:
        repo.ensure_schema()
        repo.record_donation("Alice", "Downtown", "Rice", "10", "01-01-2025 10:00")
        rows = [listing.as_row() for listing in repo.list_available_food()]

    assert rows == [
        (1, "Bob", "Harbour", "Bread", 4, "02-02-2025 09:00"),
        (2, "Alice", "Downtown", "Rice", 10, "01-01-2025 10:00"),
    ]


def test_schema_creation_failure(engine, monkeypatch):
    def broken(_engine):
        raise OperationalError("CREATE TABLE donor", {}, Exception("disk I/O error"))

    monkeypatch.setattr("food_donation.database.schema.create_all_tables", broken)

    with pytest.raises(StorageError) as excinfo:
        ensure_schema(engine)

    assert excinfo.value.kind == StorageErrorKind.SCHEMA_CREATION_FAILED
    assert excinfo.value.engine_message == "disk I/O error"


def test_connection_failure(tmp_path):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("")

    repo = DonationRepository.from_url(f"sqlite:///{blocker / 'food_donation.db'}")
    try:
        with pytest.raises(StorageError) as excinfo:
            repo.ensure_schema()
    finally:
        repo.close()

    assert excinfo.value.kind == StorageErrorKind.CONNECTION_FAILED
