"""Pytest configuration and fixtures."""

import sqlite3
from pathlib import Path

import pytest
from loguru import logger

from neuronotes.core.config import Config
from neuronotes.store.database import Database


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any loguru sinks a test installed."""
    yield
    logger.remove()


@pytest.fixture
def log_messages() -> list[str]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def conn(test_db_path: Path) -> sqlite3.Connection:
    """Provide a raw SQLite connection to an empty database."""
    connection = sqlite3.connect(str(test_db_path))
    yield connection
    connection.close()


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected, migrated database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a Config instance rooted in a temporary directory."""
    return Config(data_dir=tmp_path / "data")
