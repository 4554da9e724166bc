"""Configuration management for NeuroNotes."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError

# Database identifiers, each tracked with its own schema version
PRODUCTION_DATABASE = "sqlite:neuronotes.db"
DEVELOPMENT_DATABASE = "sqlite:neuronotes_dev.db"

DATABASE_SCHEME = "sqlite:"

_TRUTHY = {"1", "true", "yes", "on"}


def _default_data_dir() -> Path:
    """Get default data directory."""
    data_home = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return data_home / "neuronotes"


def resolve_database_path(identifier: str, data_dir: Path) -> Path:
    """Resolve a database identifier to a file path.

    Args:
        identifier: Identifier such as "sqlite:neuronotes.db".
        data_dir: Directory holding the database files.

    Returns:
        Path of the database file inside data_dir.

    Raises:
        ConfigError: If the identifier is not a sqlite identifier or has no file name.
    """
    if not identifier.startswith(DATABASE_SCHEME):
        raise ConfigError(f"Unsupported database identifier: {identifier!r}")

    filename = identifier[len(DATABASE_SCHEME):]
    if not filename or Path(filename).name != filename:
        raise ConfigError(f"Invalid database file name in {identifier!r}")

    return data_dir / filename


@dataclass
class Config:
    """Main application configuration."""

    data_dir: Path = field(default_factory=_default_data_dir)
    dev: bool = False
    log_level: str = "INFO"

    @property
    def database_name(self) -> str:
        """Identifier of the database used by this process."""
        return DEVELOPMENT_DATABASE if self.dev else PRODUCTION_DATABASE

    @property
    def database_path(self) -> Path:
        """File path of the database used by this process."""
        return resolve_database_path(self.database_name, self.data_dir)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        if path := os.environ.get("NEURONOTES_DATA_DIR"):
            config.data_dir = Path(path)

        if dev := os.environ.get("NEURONOTES_DEV"):
            config.dev = dev.strip().lower() in _TRUTHY

        if level := os.environ.get("NEURONOTES_LOG_LEVEL"):
            config.log_level = level.upper()

        return config
