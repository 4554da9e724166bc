"""Custom exceptions for NeuroNotes."""


class NeuroNotesError(Exception):
    """Base exception for all NeuroNotes errors."""

    pass


class ConfigError(NeuroNotesError):
    """Configuration is invalid."""

    pass


class DatabaseError(NeuroNotesError):
    """Database operation failed."""

    pass


class MigrationError(DatabaseError):
    """Schema migration could not be validated or applied."""

    def __init__(self, message: str, version: int | None = None):
        """Initialize exception with message and failing version.

        Args:
            message: Description of the failure.
            version: Migration version that failed, if known.
        """
        self.version = version
        super().__init__(message)
