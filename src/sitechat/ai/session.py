"""Conversation session with the Gemini backend."""

import logging
from typing import Any

from sitechat.ai.runtime import GeminiClient, ProviderError
from sitechat.config import Settings, load_settings
from sitechat.models import Failure, Reply, SubmitResult
from sitechat.prompts import FALLBACK_REPLY

logger = logging.getLogger(__name__)


class ChatSession:
    """One ongoing dialogue with the assistant.

    The session is a capability: callers can only ``submit`` text. Turn
    history lives inside the session and grows with every successful
    exchange, so each request carries the whole conversation so far.

    Callers must not have more than one ``submit`` in flight at a time.
    """

    def __init__(self, client: GeminiClient, system_instruction: str):
        self._client = client
        self._system_instruction = system_instruction
        self._history: list[dict[str, Any]] = []

    def __repr__(self) -> str:
        return f"ChatSession(model={self._client.model!r}, turns={len(self._history)})"

    async def submit(self, text: str) -> SubmitResult:
        """Send a user utterance and return the assistant's reply.

        Backend failures are returned as ``Failure`` values rather than
        raised. History is only extended when the exchange succeeds.

        Args:
            text: Non-empty user message

        Returns:
            ``Reply`` with the assistant's text, or ``Failure``
        """
        user_turn = {"role": "user", "parts": [{"text": text}]}

        try:
            reply = await self._client.generate(
                self._history + [user_turn], self._system_instruction
            )
        except ProviderError as e:
            logger.warning("Gemini API error (%s): %s", e.kind.value, e.detail)
            return Failure(kind=e.kind, detail=e.detail)

        self._history.append(user_turn)
        self._history.append({"role": "model", "parts": [{"text": reply}]})
        return Reply(text=reply)

    async def aclose(self) -> None:
        """Release the underlying HTTP client."""
        await self._client.aclose()


def create_session(
    settings: Settings | None = None,
    client: GeminiClient | None = None,
) -> ChatSession:
    """Create a new chat session bound to the configured model and persona.

    No network call is made here; the first request happens on ``submit``.

    Args:
        settings: Settings to use (loaded from the environment if omitted)
        client: Pre-built client, mainly for tests

    Returns:
        A fresh session with empty history

    Raises:
        ConfigurationError: If the credential is missing or the client
            cannot be constructed
    """
    if settings is None:
        settings = load_settings()

    if client is None:
        client = GeminiClient(settings)

    logger.debug("Created chat session for model %s", settings.model)
    return ChatSession(client, settings.system_instruction)


async def send_message(session: ChatSession, text: str) -> str:
    """Send text and always return a string.

    On failure the fixed fallback reply is returned instead of raising.
    """
    result = await session.submit(text)
    if isinstance(result, Reply):
        return result.text
    return FALLBACK_REPLY
