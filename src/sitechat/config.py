"""Environment-driven configuration for sitechat."""

import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from sitechat.prompts import SYSTEM_INSTRUCTION

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com"
DEFAULT_TIMEOUT = 60.0

# Checked in order; the first non-empty value wins
API_KEY_VARS = ("SITECHAT_API_KEY", "GEMINI_API_KEY", "API_KEY")


class ConfigurationError(RuntimeError):
    """The assistant cannot be set up (missing credential, bad settings)."""


class Settings(BaseModel):
    """Effective settings for one chat session."""

    api_key: Optional[str] = Field(None, description="Gemini API key")
    model: str = Field(DEFAULT_MODEL, description="Gemini model identifier")
    system_instruction: str = Field(
        SYSTEM_INSTRUCTION, description="System instruction scoping the assistant"
    )
    api_base: str = Field(DEFAULT_API_BASE, description="Generative Language API root URL")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    @property
    def masked_key(self) -> str:
        """API key with everything but the last four characters hidden."""
        if not self.api_key:
            return "(not set)"
        if len(self.api_key) <= 4:
            return "****"
        return "*" * 8 + self.api_key[-4:]


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Args:
        env: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Settings with defaults filled in for anything unset

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    if env is None:
        env = os.environ

    values: dict[str, object] = {}

    for var in API_KEY_VARS:
        if env.get(var, "").strip():
            values["api_key"] = env[var].strip()
            break

    optional = {
        "model": "SITECHAT_MODEL",
        "system_instruction": "SITECHAT_SYSTEM_INSTRUCTION",
        "api_base": "SITECHAT_API_BASE",
        "timeout": "SITECHAT_TIMEOUT",
    }
    for field_name, var in optional.items():
        value = env.get(var, "").strip()
        if value:
            values[field_name] = value

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
