"""Shared fixtures: repositories backed by in-memory or temporary SQLite."""

import pytest

from food_donation.database import create_db_engine
from food_donation.repositories import DonationRepository


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite:///:memory:")
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    repo = DonationRepository(engine, atomic=False, strict_generated_keys=False)
    repo.ensure_schema()
    yield repo
    repo.close()


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'data' / 'food_donation.db'}"
