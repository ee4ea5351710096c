"""Core constants, exceptions and validation."""
