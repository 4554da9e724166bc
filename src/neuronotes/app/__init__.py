"""Application bootstrap for NeuroNotes.

This module provides:
- Logging setup
- Registration of the production and development databases
- The Application class holding process-wide state
- create_application(), the single initialization entry point

Example:
    from neuronotes.app import create_application
    from neuronotes.core.config import Config

    with create_application(Config.from_env()) as app:
        print(app.db.runner().get_version())
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ..core.config import (
    DEVELOPMENT_DATABASE,
    PRODUCTION_DATABASE,
    Config,
    resolve_database_path,
)
from ..core.exceptions import ConfigError
from ..store.database import Database
from ..store.migrations import Migration, list_migrations

__all__ = [
    "Application",
    "DatabaseTarget",
    "configure_logging",
    "create_application",
    "register_databases",
]

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


@dataclass(frozen=True)
class DatabaseTarget:
    """A named database and the migrations it receives."""

    name: str
    path: Path
    migrations: tuple[Migration, ...]


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to a single stderr sink.

    Args:
        level: Minimum level to emit (e.g. "DEBUG", "INFO").
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def register_databases(config: Config) -> dict[str, DatabaseTarget]:
    """Register the production and development databases.

    Both receive the same migration sequence but keep independent
    version markers in separate files.

    Args:
        config: Application configuration.

    Returns:
        Mapping of database identifier to its target.

    Raises:
        ConfigError: If two identifiers resolve to the same file.
    """
    migrations = list_migrations()
    targets: dict[str, DatabaseTarget] = {}
    seen: dict[Path, str] = {}

    for name in (PRODUCTION_DATABASE, DEVELOPMENT_DATABASE):
        path = resolve_database_path(name, config.data_dir)
        key = path.expanduser().resolve()
        if key in seen:
            raise ConfigError(
                f"Databases {seen[key]!r} and {name!r} resolve to the same file: {path}"
            )
        seen[key] = name
        targets[name] = DatabaseTarget(name=name, path=path, migrations=migrations)

    return targets


class Application:
    """Process-wide state created once at startup.

    Use create_application() to create a properly initialized instance.

    Attributes:
        config: Application configuration.
        targets: All registered databases, keyed by identifier.
        db: Connected database for this process, fully migrated unless
            created with migrate=False.
    """

    def __init__(
        self,
        config: Config,
        targets: dict[str, DatabaseTarget],
        db: Database,
    ):
        self.config = config
        self.targets = targets
        self.db = db

    @property
    def target(self) -> DatabaseTarget:
        """Get the registration of the active database."""
        return self.targets[self.config.database_name]

    def close(self) -> None:
        """Release the database connection."""
        self.db.close()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_application(
    config: Config,
    setup_logging: bool = True,
    migrate: bool = True,
) -> Application:
    """Initialize the application.

    Registers both databases, then opens the active one and applies its
    pending migrations before returning. Call once from the entry point.

    Args:
        config: Application configuration.
        setup_logging: Whether to install the stderr log sink.
        migrate: Whether to apply pending migrations. Only read-only
            diagnostics such as the status command pass False.

    Returns:
        Initialized Application.

    Raises:
        ConfigError: If the database configuration is invalid.
        MigrationError: If a pending migration fails.
        DatabaseError: If the database cannot be opened.
    """
    if setup_logging:
        configure_logging(config.log_level)

    targets = register_databases(config)
    active = targets[config.database_name]

    logger.info(f"Opening {active.name} at {active.path}")
    db = Database(active.path, active.migrations)
    db.connect(migrate=migrate)

    return Application(config=config, targets=targets, db=db)
