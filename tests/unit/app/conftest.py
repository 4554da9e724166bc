"""Pytest fixtures for app module tests."""

import pytest

from neuronotes.app import Application, create_application
from neuronotes.core.config import Config


@pytest.fixture
def application(config: Config) -> Application:
    """Provide an initialized application without installing log sinks."""
    app = create_application(config, setup_logging=False)
    yield app
    app.close()
