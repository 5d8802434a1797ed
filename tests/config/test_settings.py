"""Tests for runtime settings."""

import pytest
from pydantic import ValidationError

from retrochat.config.settings import Settings


class TestSettings:
    """Tests for defaults, validation and environment overrides."""

    def test_defaults(self, config):
        assert config.initial_mode == "normal"
        assert config.entropy_seed is None
        assert config.show_welcome
        assert not config.debug
        assert config.effective_log_level == "WARNING"

    def test_invalid_mode_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, initial_mode="loud")

    def test_negative_seed_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, entropy_seed=-1)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RETROCHAT_INITIAL_MODE", "playful")
        monkeypatch.setenv("RETROCHAT_ENTROPY_SEED", "64")
        settings = Settings(_env_file=None)
        assert settings.initial_mode == "playful"
        assert settings.entropy_seed == 64

    def test_debug_forces_debug_level(self):
        settings = Settings(_env_file=None, debug=True, log_level="ERROR")
        assert settings.effective_log_level == "DEBUG"
