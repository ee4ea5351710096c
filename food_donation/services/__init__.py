"""
Services Package
================

Business logic layer for the food donation console.

Available services:
- DonationService: form submission and available food table
"""

from food_donation.services.donations import (
    DonationService,
    DonationResult,
    ListingResult,
)

__all__ = [
    "DonationService",
    "DonationResult",
    "ListingResult",
]
