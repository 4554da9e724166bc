"""Database migration runner for NeuroNotes.

Uses SQLite PRAGMA user_version for tracking schema version.
Each migration and its version bump are committed together.
"""

from __future__ import annotations

import sqlite3
from typing import Sequence

from loguru import logger

from ...core.exceptions import MigrationError
from .registry import Migration, list_migrations, validate_migrations


class MigrationRunner:
    """Applies versioned migrations to a SQLite database.

    Uses PRAGMA user_version as the applied-version marker. Pending
    migrations are applied in ascending version order; a migration that
    fails is rolled back and leaves the marker at the last version that
    succeeded.

    Example:
        runner = MigrationRunner(connection)
        applied = runner.run()
        print(f"Applied {applied} migrations, now at version {runner.get_version()}")
    """

    def __init__(
        self,
        connection: sqlite3.Connection,
        migrations: Sequence[Migration] | None = None,
    ):
        """Initialize with database connection.

        Args:
            connection: SQLite connection to migrate.
            migrations: Migrations to apply. Defaults to the registered ones.
        """
        self.conn = connection
        self._migrations: tuple[Migration, ...] | None = (
            validate_migrations(migrations) if migrations is not None else None
        )

    def get_version(self) -> int:
        """Get current schema version from user_version pragma."""
        cursor = self.conn.execute("PRAGMA user_version")
        return cursor.fetchone()[0]

    def set_version(self, version: int) -> None:
        """Set schema version.

        Args:
            version: New version number to set.
        """
        # PRAGMA doesn't support parameters; int() keeps this safe
        self.conn.execute(f"PRAGMA user_version = {int(version)}")

    def get_migrations(self) -> tuple[Migration, ...]:
        """Get all available migrations, sorted by version."""
        if self._migrations is None:
            self._migrations = list_migrations()
        return self._migrations

    def get_pending_migrations(self) -> list[Migration]:
        """Get migrations that haven't been applied yet.

        Returns:
            List of Migration objects with version > current version.
        """
        current = self.get_version()
        return [m for m in self.get_migrations() if m.version > current]

    def run(self) -> int:
        """Apply all pending migrations.

        Returns:
            Number of migrations applied.

        Raises:
            MigrationError: If any migration fails. Earlier migrations in
                the same run stay applied.
        """
        current = self.get_version()
        latest = self.get_latest_version()

        if current > latest:
            logger.warning(
                f"Database at version {current} is newer than the latest "
                f"known migration ({latest}), leaving it untouched"
            )
            return 0

        pending = self.get_pending_migrations()

        if not pending:
            logger.debug(f"Database at version {current}, no migrations to apply")
            return 0

        applied = 0

        for migration in pending:
            logger.info(
                f"Applying migration {migration.version}: {migration.description}"
            )
            self._apply(migration)
            applied += 1
            logger.debug(f"Migration {migration.version} applied successfully")

        logger.info(
            f"Applied {applied} migration(s), "
            f"database now at version {self.get_version()}"
        )
        return applied

    def _apply(self, migration: Migration) -> None:
        """Run one migration and its version bump in a single transaction."""
        if self.conn.in_transaction:
            self.conn.commit()

        script = (
            "BEGIN;\n"
            f"{migration.sql.strip()}\n"
            # The script may omit its final semicolon
            ";\n"
            f"PRAGMA user_version = {int(migration.version)};\n"
            "COMMIT;\n"
        )

        try:
            self.conn.executescript(script)
        except sqlite3.Error as e:
            logger.error(f"Migration {migration.version} failed: {e}")
            if self.conn.in_transaction:
                self.conn.execute("ROLLBACK")
            raise MigrationError(
                f"Migration {migration.version} ({migration.description}) failed: {e}",
                version=migration.version,
            ) from e

    def get_latest_version(self) -> int:
        """Get the latest available migration version.

        Returns:
            Highest version number among migrations, or 0 if none.
        """
        migrations = self.get_migrations()
        if not migrations:
            return 0
        return migrations[-1].version

    def is_up_to_date(self) -> bool:
        """Check if database is at latest version.

        Returns:
            True if current version equals latest migration version.
        """
        return self.get_version() >= self.get_latest_version()
