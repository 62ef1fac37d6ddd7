"""Gemini-backed conversation sessions for sitechat."""

from sitechat.ai.runtime import GeminiClient, ProviderError
from sitechat.ai.session import ChatSession, create_session, send_message
from sitechat.config import ConfigurationError

__all__ = [
    "ChatSession",
    "ConfigurationError",
    "GeminiClient",
    "ProviderError",
    "create_session",
    "send_message",
]
