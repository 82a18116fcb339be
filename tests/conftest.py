"""
Shared pytest configuration.

Points the API at an in-memory SQLite database before any test module
imports api.database, so tests never touch a database file.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.pop("DEMO_RANDOM_SEED", None)
