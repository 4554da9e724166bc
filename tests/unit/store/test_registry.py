"""Tests for the migration registry."""

import pytest

from neuronotes.core.exceptions import MigrationError
from neuronotes.store.migrations import Migration, list_migrations, validate_migrations


class TestListMigrations:
    """Tests for list_migrations()."""

    def test_returns_three_versions_in_order(self):
        """Registered migrations are versions 1, 2, 3 in ascending order."""
        migrations = list_migrations()

        assert [m.version for m in migrations] == [1, 2, 3]

    def test_descriptions(self):
        """Descriptions match the deployed migration names."""
        assert [m.description for m in list_migrations()] == [
            "create_initial_tables",
            "add_calendar_repeat_fields",
            "add_calendar_event_color",
        ]

    def test_is_deterministic(self):
        """Repeated calls return the identical sequence."""
        assert list_migrations() is list_migrations()
        assert list_migrations() == list_migrations()

    def test_versions_strictly_increasing(self):
        """No duplicate or decreasing versions."""
        versions = [m.version for m in list_migrations()]

        assert len(versions) == len(set(versions))
        assert all(a < b for a, b in zip(versions, versions[1:]))

    def test_initial_migration_creates_all_tables(self):
        """v1 creates every base table with IF NOT EXISTS."""
        sql = list_migrations()[0].sql

        for table in ("workspaces", "folders", "notes", "calendarEvents", "kanban", "settings"):
            assert f"CREATE TABLE IF NOT EXISTS {table} " in sql

    def test_later_migrations_only_alter_calendar_events(self):
        """v2 and v3 only add columns to calendarEvents."""
        for migration in list_migrations()[1:]:
            statements = [s.strip() for s in migration.sql.split(";") if s.strip()]
            assert statements
            assert all(
                s.startswith("ALTER TABLE calendarEvents ADD COLUMN") for s in statements
            )


class TestValidateMigrations:
    """Tests for validate_migrations()."""

    def test_accepts_gaps(self):
        """Gaps between versions are allowed."""
        migrations = [Migration(1, "a", "SELECT 1;"), Migration(5, "b", "SELECT 1;")]

        assert validate_migrations(migrations) == tuple(migrations)

    def test_rejects_duplicates(self):
        """Repeated versions are rejected."""
        migrations = [Migration(2, "a", "SELECT 1;"), Migration(2, "b", "SELECT 1;")]

        with pytest.raises(MigrationError, match="Duplicate") as exc_info:
            validate_migrations(migrations)
        assert exc_info.value.version == 2

    def test_rejects_out_of_order(self):
        """Decreasing versions are rejected."""
        migrations = [Migration(3, "a", "SELECT 1;"), Migration(2, "b", "SELECT 1;")]

        with pytest.raises(MigrationError, match="out of order"):
            validate_migrations(migrations)

    @pytest.mark.parametrize("version", [0, -1])
    def test_rejects_non_positive(self, version):
        """Versions must be positive."""
        with pytest.raises(MigrationError, match="positive"):
            validate_migrations([Migration(version, "a", "SELECT 1;")])

    def test_rejects_empty_script(self):
        """Migrations need a script."""
        with pytest.raises(MigrationError, match="empty script"):
            validate_migrations([Migration(1, "a", "   ")])

    def test_registered_migrations_are_valid(self):
        """The registered sequence passes validation."""
        assert validate_migrations(list_migrations()) == list_migrations()
