"""Migration commands for NeuroNotes CLI."""

from ...app import create_application
from ...core.config import Config
from ...store.migrations import list_migrations


def handle_migrate(args, config: Config) -> None:
    """Handle migrate command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with create_application(config) as app:
        version = app.db.runner().get_version()
        print(f"{app.target.name} is at version {version} ({app.target.path})")


def handle_migrations(args, config: Config) -> None:
    """Handle migrations command (list registered migrations).

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    for migration in list_migrations():
        print(f"{migration.version:>4}  {migration.description}")
