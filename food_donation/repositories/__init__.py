"""
Data access layer (Repository pattern).

Repositories handle all database queries,
isolating business logic from SQL.
"""

from food_donation.repositories.donations import DonationRepository

__all__ = [
    "DonationRepository",
]
