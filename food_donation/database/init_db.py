"""
Database initialization and seeding.

This script:
- Creates the donor and available_food tables (if missing)
- Optionally adds sample donations for development/testing
- Prints the table layout and row counts

Usage:
    # Create tables
    python -m food_donation.database.init_db

    # Use another database file
    python -m food_donation.database.init_db --database-url sqlite:///./data/test.db

    # Add sample donations
    python -m food_donation.database.init_db --sample-data
"""

import argparse
import sys
from typing import List, Optional

from food_donation.config import configure_logging, print_settings
from food_donation.core.exceptions import DonationError
from food_donation.database.schema import describe_schema
from food_donation.repositories import DonationRepository


SAMPLE_DONATIONS = [
    ("Alice", "Downtown", "Rice", "10", "01-01-2025 10:00"),
    ("Green Grocers", "Market Street", "Vegetables", "25", "01-01-2025 12:30"),
    ("St. Mark's Kitchen", "", "Soup", "40", "02-01-2025 18:00"),
]


def create_tables(repository: DonationRepository) -> None:
    """Create the donation tables."""
    print("📊 Creating database tables...")
    repository.ensure_schema()
    print("✅ Tables ready")


def seed_sample_data(repository: DonationRepository) -> None:
    """
    Seed sample donations for development and testing.

    Each call adds new rows; donors are never deduplicated.
    """
    print("\n🌱 Seeding sample donations...")

    for donation in SAMPLE_DONATIONS:
        entry = repository.record_donation(*donation)
        print(f"    ✅ {entry}")

    print("✅ Sample data seeded")


def print_database_status(repository: DonationRepository) -> None:
    """Print current table layout and counts."""
    print("\n" + "=" * 60)
    print("📊 Database Status")
    print("=" * 60)

    for table, columns in describe_schema(repository.engine).items():
        print(f"  {table}: {', '.join(columns)}")

    print(f"\n  Donors:         {repository.count_donors()}")
    print(f"  Food entries:   {repository.count_food_entries()}")

    listings = repository.list_available_food()
    if listings:
        print("\n  Available Food:")
        for listing in listings:
            location = f" ({listing.donor_location})" if listing.donor_location else ""
            print(
                f"    • #{listing.food_id} {listing.quantity} x {listing.food_type} "
                f"from {listing.donor_name}{location}, pickup {listing.pickup_time}"
            )

    print("=" * 60)


def initialize_database(
    database_url: Optional[str] = None,
    sample_data: bool = False
) -> None:
    """
    Initialize the database.

    Args:
        database_url: Database to initialize. Defaults to settings.
        sample_data: Add sample donations
    """
    print("=" * 60)
    print("🗄️  Database Initialization")
    print("=" * 60)

    if database_url:
        repository = DonationRepository.from_url(database_url)
    else:
        repository = DonationRepository()

    with repository:
        create_tables(repository)

        if sample_data:
            seed_sample_data(repository)

        print_database_status(repository)

    print("\n✅ Database initialization complete!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize the food donation database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create tables
  python -m food_donation.database.init_db

  # Add sample donations for testing
  python -m food_donation.database.init_db --sample-data
        """
    )

    parser.add_argument(
        "--database-url",
        help="SQLAlchemy database URL (default: FOOD_DONATION_DATABASE_URL or settings)"
    )

    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample donations for development/testing"
    )

    parser.add_argument(
        "--show-settings",
        action="store_true",
        help="Print the active settings before initializing"
    )

    args = parser.parse_args(argv)

    configure_logging()

    if args.show_settings:
        print_settings()

    try:
        initialize_database(database_url=args.database_url, sample_data=args.sample_data)
    except DonationError as exc:
        print(f"❌ {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
