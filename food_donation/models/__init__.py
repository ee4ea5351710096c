"""
Database models package.

Contains the SQLAlchemy ORM models and the read-side listing model.
"""

from food_donation.models.base import Base, SerializationMixin, create_all_tables
from food_donation.models.donor import Donor
from food_donation.models.food import FoodEntry
from food_donation.models.listing import FoodListing

__all__ = [
    "Base",
    "SerializationMixin",
    "Donor",
    "FoodEntry",
    "FoodListing",
    "create_all_tables",
]
