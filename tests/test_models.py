"""Tests for the donor / food models and the listing projection."""

import pytest
from pydantic import ValidationError

from food_donation.database import create_session_factory, get_db_context
from food_donation.models import Donor, FoodEntry, FoodListing


def test_donor_requires_name():
    with pytest.raises(ValueError):
        Donor(name="   ", location="Downtown")


def test_models_together(repository):
    factory = create_session_factory(repository.engine)

    with get_db_context(factory) as db:
        donor = Donor(name="Alice", location="Downtown")
        db.add(donor)
        db.flush()
        db.add(FoodEntry(donor_id=donor.donor_id, food_type="Rice", quantity=10, pickup_time="noon"))
        db.add(FoodEntry(donor_id=donor.donor_id, food_type="Soup", quantity=2, pickup_time="noon"))

    with get_db_context(factory) as db:
        donor = db.query(Donor).one()
        assert donor.to_dict() == {"donor_id": donor.donor_id, "name": "Alice", "location": "Downtown"}
        assert [entry.food_type for entry in donor.food_entries] == ["Rice", "Soup"]
        assert donor.food_entries[0].donor is donor
        assert str(donor) == "Alice (Downtown)"


def test_food_entry_to_dict_excludes():
    entry = FoodEntry(donor_id=1, food_type="Rice", quantity=10, pickup_time="noon")

    assert entry.to_dict(exclude={"food_id"}) == {
        "donor_id": 1,
        "food_type": "Rice",
        "quantity": 10,
        "pickup_time": "noon",
    }


def test_listing_is_frozen():
    listing = FoodListing(
        food_id=1,
        donor_name="Alice",
        donor_location="Downtown",
        food_type="Rice",
        quantity=10,
        pickup_time="noon",
    )

    assert listing.as_row() == (1, "Alice", "Downtown", "Rice", 10, "noon")
    with pytest.raises(ValidationError):
        listing.quantity = 5
