"""
Tests for configuration loading and validation.
"""
import pytest

from home_command.config_loader import load_config_from_env
from home_command.config_validator import validate_log_level, validate_path
from home_command.exceptions import ConfigurationError

ENV_KEYS = ("HOME_COMMAND_REGISTRY_PATH", "HOME_COMMAND_LOG_LEVEL", "VERBOSE")


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without our settings and without reading a local .env file."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("home_command.config_loader.load_dotenv", lambda: False)
    return monkeypatch


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults(self, clean_env):
        """Test configuration with nothing set."""
        config = load_config_from_env()

        assert config.registry_path is None
        assert config.log_level == "WARNING"
        assert config.verbose is False

    def test_values_from_env(self, clean_env, tmp_path):
        """Test that every setting is read."""
        snapshot = tmp_path / "registry.json"
        snapshot.write_text("{}", encoding="utf-8")
        clean_env.setenv("HOME_COMMAND_REGISTRY_PATH", str(snapshot))
        clean_env.setenv("HOME_COMMAND_LOG_LEVEL", "debug")
        clean_env.setenv("VERBOSE", "True")

        config = load_config_from_env()

        assert config.registry_path == str(snapshot)
        assert config.log_level == "DEBUG"
        assert config.verbose is True

    def test_missing_registry_file(self, clean_env, tmp_path):
        """Test that a registry path must exist."""
        clean_env.setenv("HOME_COMMAND_REGISTRY_PATH", str(tmp_path / "missing.json"))

        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_from_env()

    def test_invalid_log_level(self, clean_env):
        """Test that an unknown log level is rejected."""
        clean_env.setenv("HOME_COMMAND_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError, match="HOME_COMMAND_LOG_LEVEL"):
            load_config_from_env()

    def test_placeholder_path_ignored(self, clean_env):
        """Test that a placeholder path warns and is treated as unset."""
        clean_env.setenv("HOME_COMMAND_REGISTRY_PATH", "/path/to/your_registry.json")

        with pytest.warns(UserWarning, match="placeholder"):
            config = load_config_from_env()

        assert config.registry_path is None


class TestValidators:
    """Tests for the individual validators."""

    def test_validate_path_required(self):
        """Test that an empty path is rejected."""
        with pytest.raises(ConfigurationError, match="is required"):
            validate_path("", "HOME_COMMAND_REGISTRY_PATH")

    def test_validate_path_without_existence_check(self):
        """Test that a path is returned unchanged when existence is not required."""
        assert validate_path("missing.json", "X") == "missing.json"

    def test_validate_log_level_normalizes(self):
        """Test that log levels are upper-cased and trimmed."""
        assert validate_log_level(" info ", "LEVEL") == "INFO"
