"""Configuration and shared exceptions for NeuroNotes."""

from .config import Config, resolve_database_path
from .exceptions import (
    ConfigError,
    DatabaseError,
    MigrationError,
    NeuroNotesError,
)

__all__ = [
    "Config",
    "resolve_database_path",
    "NeuroNotesError",
    "ConfigError",
    "DatabaseError",
    "MigrationError",
]
