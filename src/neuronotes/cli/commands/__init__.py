"""Command implementations for NeuroNotes CLI."""

from .migrate import handle_migrate, handle_migrations
from .status import handle_status

__all__ = [
    "handle_migrate",
    "handle_migrations",
    "handle_status",
]
