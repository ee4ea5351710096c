"""
Donor model.

A Donor is the person or organisation offering food. A fresh row is
inserted for every donation submission; donors are never looked up or
merged by name, and never updated after creation.
"""

from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from food_donation.models.base import Base, SerializationMixin
from food_donation.core.constants import DONOR_TABLE

if TYPE_CHECKING:
    from food_donation.models.food import FoodEntry


class Donor(SerializationMixin, Base):
    """
    Someone offering food.

    Attributes:
        donor_id: Generated integer identity
        name: Donor name or organisation (required)
        location: Free-text location (optional, may be empty)
        food_entries: Food offered by this donor

    Example:
        donor = Donor(name="Alice", location="Downtown")
        db.add(donor)
        db.flush()
        print(donor.donor_id)
    """

    __tablename__ = DONOR_TABLE

    donor_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )

    location: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )

    food_entries: Mapped[List["FoodEntry"]] = relationship(
        back_populates="donor",
        order_by="FoodEntry.food_id"
    )

    # SQLite AUTOINCREMENT keeps ids from being reused
    __table_args__ = {"sqlite_autoincrement": True}

    def __init__(self, **kwargs):
        """
        Initialize a Donor with validation.

        Raises:
            ValueError: If name is empty
        """
        super().__init__(**kwargs)

        if not self.name or not self.name.strip():
            raise ValueError("Donor name cannot be empty")

    def __repr__(self) -> str:
        return (
            f"<Donor(donor_id={self.donor_id}, name='{self.name}', "
            f"location='{self.location}')>"
        )

    def __str__(self) -> str:
        if self.location:
            return f"{self.name} ({self.location})"
        return self.name
