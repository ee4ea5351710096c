"""
Food donation console.

Records food donation offers (a donor and the food they make available)
in a local SQLite database and lists the food currently available.
"""

__version__ = "0.1.0"
