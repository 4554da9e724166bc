"""Registry of schema migrations for NeuroNotes.

Migrations are discovered from the versions subpackage once per process
and returned as an immutable, version-ordered tuple.
"""

from __future__ import annotations

import functools
import importlib
import pkgutil
from dataclasses import dataclass
from typing import Iterable

from loguru import logger

from ...core.exceptions import MigrationError

VERSIONS_PACKAGE = "neuronotes.store.migrations.versions"


@dataclass(frozen=True)
class Migration:
    """A forward-only database migration."""

    version: int
    description: str
    sql: str

    def __repr__(self) -> str:
        return f"Migration({self.version}, {self.description!r})"


def validate_migrations(migrations: Iterable[Migration]) -> tuple[Migration, ...]:
    """Check that migrations form a strictly increasing version sequence.

    Gaps between versions are allowed.

    Args:
        migrations: Migrations in the order they will be applied.

    Returns:
        The migrations as a tuple.

    Raises:
        MigrationError: If a version is not positive, is repeated, or is out
            of order, or a migration has an empty script.
    """
    result = tuple(migrations)
    previous = 0

    for migration in result:
        if migration.version <= 0:
            raise MigrationError(
                f"Migration version must be positive, got {migration.version}",
                version=migration.version,
            )
        if migration.version == previous:
            raise MigrationError(
                f"Duplicate migration version {migration.version}",
                version=migration.version,
            )
        if migration.version < previous:
            raise MigrationError(
                f"Migration {migration.version} is out of order (follows {previous})",
                version=migration.version,
            )
        if not migration.sql.strip():
            raise MigrationError(
                f"Migration {migration.version} has an empty script",
                version=migration.version,
            )
        previous = migration.version

    return result


def _discover(package_name: str) -> list[Migration]:
    """Import every module in a versions package and build its Migration."""
    package = importlib.import_module(package_name)
    migrations = []

    for _, modname, ispkg in pkgutil.iter_modules(package.__path__):
        if ispkg:
            continue

        module = importlib.import_module(f"{package_name}.{modname}")

        if not hasattr(module, "VERSION") or not hasattr(module, "SQL"):
            logger.warning(f"Skipping invalid migration module: {modname}")
            continue

        migrations.append(
            Migration(
                version=module.VERSION,
                description=getattr(module, "DESCRIPTION", modname),
                sql=module.SQL,
            )
        )

    migrations.sort(key=lambda m: m.version)
    return migrations


@functools.lru_cache(maxsize=None)
def list_migrations(package_name: str = VERSIONS_PACKAGE) -> tuple[Migration, ...]:
    """Get all schema migrations, sorted by version.

    The result is computed once and the same tuple is returned on every
    later call.

    Args:
        package_name: Dotted name of the package holding version modules.

    Returns:
        Tuple of Migration objects in ascending version order.

    Raises:
        MigrationError: If two modules declare the same version.
    """
    return validate_migrations(_discover(package_name))
