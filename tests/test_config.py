"""Tests for commitgenius.config module."""

import pytest

from commitgenius import config
from commitgenius.config import load_config, normalize_host


@pytest.fixture
def restore_config():
    """Restore the active config values after a test."""
    saved = {
        name: getattr(config, name)
        for name in (
            "ACTIVE_MODEL",
            "TEMPERATURE",
            "HOST",
            "TIMEOUT",
            "LANGUAGE",
            "USE_CONVENTIONAL",
            "MAX_SUBJECT_LENGTH",
        )
    }
    yield
    for name, value in saved.items():
        setattr(config, name, value)


class TestNormalizeHost:
    """Tests for normalize_host function."""

    def test_adds_scheme(self):
        """Test that a bare host gets http://."""
        assert normalize_host("localhost:11434") == "http://localhost:11434"

    def test_keeps_scheme(self):
        """Test that an explicit scheme is kept."""
        assert normalize_host("https://ollama.example.com/") == "https://ollama.example.com"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_file(self, config_dir, restore_config, monkeypatch):
        """Test that defaults apply without a config file."""
        monkeypatch.delenv(config.HOST_ENV_VAR, raising=False)

        load_config()

        assert config.ACTIVE_MODEL == config.DEFAULT_MODEL
        assert config.HOST == config.DEFAULT_HOST
        assert config.MAX_SUBJECT_LENGTH == 50

    def test_reads_config_file(self, config_dir, restore_config, monkeypatch):
        """Test that values come from the config file."""
        monkeypatch.delenv(config.HOST_ENV_VAR, raising=False)
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text(
            "model:\n  default_model: mistral\nformat:\n  use_conventional_commits: true\n"
            "language:\n  default_language: vi\n"
        )

        load_config()

        assert config.ACTIVE_MODEL == "mistral"
        assert config.USE_CONVENTIONAL is True
        assert config.LANGUAGE == "vi"

    def test_env_overrides_host(self, config_dir, restore_config, monkeypatch):
        """Test that OLLAMA_HOST wins over the config file."""
        monkeypatch.setenv(config.HOST_ENV_VAR, "gpu-box:11434")

        load_config()

        assert config.HOST == "http://gpu-box:11434"

    def test_invalid_file_keeps_defaults(self, config_dir, restore_config, monkeypatch):
        """Test that a broken config file does not stop the CLI."""
        monkeypatch.delenv(config.HOST_ENV_VAR, raising=False)
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("model:\n  temperature: 7\n")

        load_config()

        assert config.TEMPERATURE == config.DEFAULT_TEMPERATURE
