"""Tests for configuration loading."""

import pytest

from sitechat.config import (
    DEFAULT_API_BASE,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    ConfigurationError,
    Settings,
    load_settings,
)
from sitechat.prompts import SYSTEM_INSTRUCTION


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings.api_key is None
        assert settings.model == DEFAULT_MODEL
        assert settings.system_instruction == SYSTEM_INSTRUCTION
        assert settings.api_base == DEFAULT_API_BASE
        assert settings.timeout == DEFAULT_TIMEOUT

    def test_sitechat_key_preferred(self):
        settings = load_settings({"SITECHAT_API_KEY": "one", "GEMINI_API_KEY": "two"})
        assert settings.api_key == "one"

    def test_gemini_key_fallback(self):
        settings = load_settings({"GEMINI_API_KEY": "two", "API_KEY": "three"})
        assert settings.api_key == "two"

    def test_plain_api_key_fallback(self):
        settings = load_settings({"API_KEY": "three"})
        assert settings.api_key == "three"

    def test_blank_key_ignored(self):
        settings = load_settings({"SITECHAT_API_KEY": "   ", "API_KEY": "three"})
        assert settings.api_key == "three"

    def test_overrides(self):
        settings = load_settings(
            {
                "SITECHAT_MODEL": "gemini-2.0-flash",
                "SITECHAT_SYSTEM_INSTRUCTION": "Be brief.",
                "SITECHAT_API_BASE": "http://localhost:9999",
                "SITECHAT_TIMEOUT": "5",
            }
        )
        assert settings.model == "gemini-2.0-flash"
        assert settings.system_instruction == "Be brief."
        assert settings.api_base == "http://localhost:9999"
        assert settings.timeout == 5.0

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError):
            load_settings({"SITECHAT_TIMEOUT": "soon"})

    def test_non_positive_timeout(self):
        with pytest.raises(ConfigurationError):
            load_settings({"SITECHAT_TIMEOUT": "0"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("SITECHAT_API_KEY", "from-env")
        assert load_settings().api_key == "from-env"


class TestMaskedKey:
    def test_not_set(self):
        assert Settings().masked_key == "(not set)"

    def test_short_key(self):
        assert Settings(api_key="abc").masked_key == "****"

    def test_long_key(self):
        masked = Settings(api_key="secret-key-1234").masked_key
        assert masked.endswith("1234")
        assert "secret" not in masked
