"""Persistence layer for NeuroNotes.

This package provides:
- Database: SQLite connection management; runs migrations on connect
- Migration registry and runner: versioned, forward-only schema changes
- Schema helpers: expected layout and live introspection

Example:
    from neuronotes.store import Database

    db = Database(Path("neuronotes.db"))
    db.connect()
"""

from .database import Database
from .migrations import Migration, MigrationRunner, list_migrations
from .schema import EXPECTED_SCHEMA, inspect_schema

__all__ = [
    "Database",
    "Migration",
    "MigrationRunner",
    "list_migrations",
    "EXPECTED_SCHEMA",
    "inspect_schema",
]
