"""Status command for NeuroNotes CLI."""

from ...app import Application, create_application
from ...core.config import Config
from ...store.schema import inspect_schema


def handle_status(args, config: Config) -> None:
    """Handle status command.

    Reports the database as it is on disk, without applying migrations.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with create_application(config, migrate=False) as app:
        _print_status(app)


def _print_status(app: Application) -> None:
    """Print database status.

    Args:
        app: Initialized application.
    """
    runner = app.db.runner()
    pending = runner.get_pending_migrations()

    print("NeuroNotes Database Status")
    print("=" * 50)
    print(f"Database: {app.target.name}")
    print(f"Path: {app.target.path}")
    print(f"Schema version: {runner.get_version()}")
    print(f"Latest migration: {runner.get_latest_version()}")
    print(f"Pending: {len(pending)}")
    print()

    schema = inspect_schema(app.db.connection)
    if schema:
        print("Tables:")
        for table, columns in schema.items():
            print(f"  • {table} ({', '.join(columns)})")
    else:
        print("No tables yet.")
