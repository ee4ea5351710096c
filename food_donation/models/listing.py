"""
Read-side projection of available food.

A FoodListing is never persisted; it is built from the join of
available_food and donor each time the listing is requested.
"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class FoodListing(BaseModel):
    """One row of the available food table, joined with its donor."""

    model_config = ConfigDict(frozen=True)

    food_id: int = Field(..., description="Generated id of the food entry")
    donor_name: str = Field(..., description="Name of the donor")
    donor_location: Optional[str] = Field(None, description="Donor location, may be empty")
    food_type: Optional[str] = Field(None, description="Kind of food offered")
    quantity: Optional[int] = Field(None, description="Number of servings")
    pickup_time: Optional[str] = Field(None, description="Pickup time as entered")

    def as_row(self) -> Tuple:
        """Return the six display columns in table order."""
        return (
            self.food_id,
            self.donor_name,
            self.donor_location,
            self.food_type,
            self.quantity,
            self.pickup_time,
        )
