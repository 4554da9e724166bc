"""SQLite database connection manager for NeuroNotes."""

import sqlite3
from pathlib import Path
from typing import Sequence

from loguru import logger

from ..core.exceptions import DatabaseError, MigrationError
from .migrations import Migration, MigrationRunner


class Database:
    """SQLite database connection manager.

    Pending schema migrations are applied during connect(), before the
    connection is handed to any other component.
    """

    def __init__(self, path: Path, migrations: Sequence[Migration] | None = None):
        """Initialize database with path.

        Args:
            path: Path to the SQLite database file.
            migrations: Migrations to apply on connect. Defaults to the
                registered migrations.
        """
        self.path = path
        self._migrations = migrations
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the open connection.

        Raises:
            DatabaseError: If the database is not connected.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")
        return self._connection

    @property
    def is_connected(self) -> bool:
        """Check whether a connection is open."""
        return self._connection is not None

    def connect(self, migrate: bool = True) -> None:
        """Open the database file and apply pending migrations.

        Args:
            migrate: Whether to apply pending migrations. Pass False only
                to inspect the database as it is on disk.

        Raises:
            MigrationError: If a migration fails.
            DatabaseError: If the file cannot be opened.
        """
        if self._connection:
            self.close()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(str(self.path))
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA foreign_keys = ON")
        except Exception as e:
            self._connection = None
            raise DatabaseError(f"Failed to connect to database: {e}") from e

        if migrate:
            try:
                self.migrate()
            except Exception:
                self.close()
                raise

        logger.debug(f"Connected to {self.path}")

    def migrate(self) -> int:
        """Apply pending migrations to the open connection.

        Returns:
            Number of migrations applied.
        """
        runner = self.runner()
        try:
            return runner.run()
        except MigrationError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to migrate database: {e}") from e

    def runner(self) -> MigrationRunner:
        """Get a migration runner bound to the open connection."""
        return MigrationRunner(self.connection, self._migrations)

    def close(self) -> None:
        """Close database connection."""
        if self._connection:
            try:
                self._connection.close()
            except Exception as e:
                raise DatabaseError(f"Failed to close database: {e}") from e
            finally:
                self._connection = None
