"""Database migrations for NeuroNotes.

This module provides versioned, forward-only schema migrations using
SQLite's PRAGMA user_version for tracking.

Example:
    from neuronotes.store.migrations import MigrationRunner

    runner = MigrationRunner(connection)
    applied = runner.run()
"""

from .registry import Migration, list_migrations, validate_migrations
from .runner import MigrationRunner

__all__ = [
    "Migration",
    "MigrationRunner",
    "list_migrations",
    "validate_migrations",
]
