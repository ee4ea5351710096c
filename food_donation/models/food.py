"""
FoodEntry model.

One concrete food offer, stored in the ``available_food`` table and
linked to exactly one Donor through ``donor_id``.
"""

from typing import TYPE_CHECKING, Optional
from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from food_donation.models.base import Base, SerializationMixin
from food_donation.core.constants import AVAILABLE_FOOD_TABLE, DONOR_TABLE

if TYPE_CHECKING:
    from food_donation.models.donor import Donor


class FoodEntry(SerializationMixin, Base):
    """
    Food made available by a donor.

    Attributes:
        food_id: Generated integer identity
        donor_id: Owning donor (foreign key to donor.donor_id)
        food_type: What is offered (e.g. "Rice")
        quantity: Number of servings
        pickup_time: Free-text pickup time, format chosen by the caller

    Example:
        entry = FoodEntry(
            donor_id=donor.donor_id,
            food_type="Rice",
            quantity=10,
            pickup_time="01-01-2025 10:00"
        )
    """

    __tablename__ = AVAILABLE_FOOD_TABLE

    food_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    # Nullable, matching the existing food_donation.db layout
    donor_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey(f"{DONOR_TABLE}.donor_id")
    )

    food_type: Mapped[Optional[str]] = mapped_column(Text)

    quantity: Mapped[Optional[int]] = mapped_column(Integer)

    pickup_time: Mapped[Optional[str]] = mapped_column(Text)

    donor: Mapped[Optional["Donor"]] = relationship(back_populates="food_entries")

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return (
            f"<FoodEntry(food_id={self.food_id}, donor_id={self.donor_id}, "
            f"food_type='{self.food_type}', quantity={self.quantity}, "
            f"pickup_time='{self.pickup_time}')>"
        )

    def __str__(self) -> str:
        return f"{self.quantity} x {self.food_type} (pickup {self.pickup_time})"
