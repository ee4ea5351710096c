"""
Donation form validation.

Runs before any storage access. Every field arrives as the raw text the
user typed; the validated form carries trimmed strings and an int quantity.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

from food_donation.core.constants import (
    QUANTITY_MAX,
    QUANTITY_MIN,
    REQUIRED_FIELDS,
    ValidationErrorKind,
    MSG_EMPTY_FIELDS,
    MSG_NOT_A_NUMBER,
)
from food_donation.core.exceptions import DonationValidationError

# Optional sign followed by ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class DonationForm(BaseModel):
    """A validated donation submission."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str
    food_type: str
    quantity: int
    pickup_time: str


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def parse_quantity(quantity_text: str) -> int:
    """
    Parse a quantity typed by the user.

    Accepts a decimal integer with an optional sign that fits in a 32-bit
    signed int. Underscores, non-ASCII digits and decimals are rejected.
    Zero and negative quantities are accepted; only the integer form is
    checked here.

    Raises:
        DonationValidationError: NOT_A_NUMBER
    """
    text = _clean(quantity_text)
    if not _INTEGER_RE.fullmatch(text):
        raise DonationValidationError(
            ValidationErrorKind.NOT_A_NUMBER, MSG_NOT_A_NUMBER, ("quantity",)
        )

    value = int(text)
    if not QUANTITY_MIN <= value <= QUANTITY_MAX:
        raise DonationValidationError(
            ValidationErrorKind.NOT_A_NUMBER, MSG_NOT_A_NUMBER, ("quantity",)
        )
    return value


def validate_donation(
    name: str,
    location: str,
    food_type: str,
    quantity_text: str,
    pickup_time: str
) -> DonationForm:
    """
    Validate the five donation fields.

    Args:
        name: Donor name or organisation (required)
        location: Donor location (optional)
        food_type: Food offered (required)
        quantity_text: Number of servings as typed (required, integer)
        pickup_time: Pickup time as typed (required, not parsed)

    Returns:
        DonationForm with trimmed values

    Raises:
        DonationValidationError: EMPTY_FIELD if a required field is blank,
            NOT_A_NUMBER if the quantity is not an integer
    """
    values = {
        "name": _clean(name),
        "food_type": _clean(food_type),
        "quantity": _clean(quantity_text),
        "pickup_time": _clean(pickup_time),
    }
    missing = [field for field in REQUIRED_FIELDS if not values[field]]
    if missing:
        raise DonationValidationError(
            ValidationErrorKind.EMPTY_FIELD, MSG_EMPTY_FIELDS, missing
        )

    return DonationForm(
        name=values["name"],
        location=_clean(location),
        food_type=values["food_type"],
        quantity=parse_quantity(values["quantity"]),
        pickup_time=values["pickup_time"],
    )
