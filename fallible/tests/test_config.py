"""Tests for config.py - Settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from fallible.config import Settings


class TestSettings:
    """Tests for Settings defaults and env overrides."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Test defaults with an empty environment."""
        monkeypatch.chdir(tmp_path)
        for name in ("FALLIBLE_COPY_ON_OVERRIDE", "FALLIBLE_LOG_LEVEL", "FALLIBLE_JSON_LOGS"):
            monkeypatch.delenv(name, raising=False)

        config = Settings()

        assert config.copy_on_override is False
        assert config.log_level == "INFO"
        assert config.json_logs is False

    def test_env_override(self, monkeypatch):
        """Test prefixed environment variables are read."""
        monkeypatch.setenv("FALLIBLE_COPY_ON_OVERRIDE", "true")
        monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FALLIBLE_JSON_LOGS", "1")

        config = Settings()

        assert config.copy_on_override is True
        assert config.log_level == "DEBUG"
        assert config.json_logs is True

    def test_unprefixed_env_ignored(self, monkeypatch, tmp_path):
        """Test variables without the prefix do not leak in."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("FALLIBLE_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert Settings().log_level == "INFO"

    def test_env_file(self, monkeypatch, tmp_path):
        """Test values are read from a .env file in the working directory."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("FALLIBLE_COPY_ON_OVERRIDE", raising=False)
        (tmp_path / ".env").write_text("FALLIBLE_COPY_ON_OVERRIDE=yes\nUNRELATED=1\n")

        assert Settings().copy_on_override is True

    def test_invalid_bool(self, monkeypatch):
        """Test a non-boolean value is rejected."""
        monkeypatch.setenv("FALLIBLE_JSON_LOGS", "sometimes")

        with pytest.raises(ValidationError):
            Settings()
