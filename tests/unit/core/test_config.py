"""Tests for configuration loading."""

from pathlib import Path

import pytest

from neuronotes.core.config import (
    DEVELOPMENT_DATABASE,
    PRODUCTION_DATABASE,
    Config,
    resolve_database_path,
)
from neuronotes.core.exceptions import ConfigError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove NeuroNotes variables from the environment."""
    for name in ("NEURONOTES_DATA_DIR", "NEURONOTES_DEV", "NEURONOTES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    """Tests for Config."""

    def test_defaults(self, clean_env, tmp_path: Path):
        """Config defaults to production, INFO and the XDG data dir."""
        clean_env.setenv("XDG_DATA_HOME", str(tmp_path))

        config = Config.from_env()

        assert config.dev is False
        assert config.log_level == "INFO"
        assert config.data_dir == tmp_path / "neuronotes"
        assert config.database_name == PRODUCTION_DATABASE
        assert config.database_path == tmp_path / "neuronotes" / "neuronotes.db"

    def test_from_env_overrides(self, clean_env, tmp_path: Path):
        """Environment variables override defaults."""
        clean_env.setenv("NEURONOTES_DATA_DIR", str(tmp_path))
        clean_env.setenv("NEURONOTES_DEV", "true")
        clean_env.setenv("NEURONOTES_LOG_LEVEL", "debug")

        config = Config.from_env()

        assert config.data_dir == tmp_path
        assert config.dev is True
        assert config.log_level == "DEBUG"
        assert config.database_name == DEVELOPMENT_DATABASE
        assert config.database_path == tmp_path / "neuronotes_dev.db"

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "anything"])
    def test_dev_falsy_values(self, clean_env, value):
        clean_env.setenv("NEURONOTES_DEV", value)

        assert Config.from_env().dev is False

    @pytest.mark.parametrize("value", ["1", "TRUE", "Yes", " on "])
    def test_dev_truthy_values(self, clean_env, value):
        clean_env.setenv("NEURONOTES_DEV", value)

        assert Config.from_env().dev is True


class TestResolveDatabasePath:
    """Tests for resolve_database_path()."""

    def test_strips_scheme(self, tmp_path: Path):
        assert resolve_database_path("sqlite:notes.db", tmp_path) == tmp_path / "notes.db"

    def test_production_and_development_differ(self, tmp_path: Path):
        assert resolve_database_path(PRODUCTION_DATABASE, tmp_path) != resolve_database_path(
            DEVELOPMENT_DATABASE, tmp_path
        )

    @pytest.mark.parametrize(
        "identifier",
        ["notes.db", "postgres:notes.db", "sqlite:", "sqlite:../notes.db", "sqlite:a/b.db"],
    )
    def test_rejects_invalid_identifiers(self, tmp_path: Path, identifier):
        with pytest.raises(ConfigError):
            resolve_database_path(identifier, tmp_path)
