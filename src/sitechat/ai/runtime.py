"""Gemini REST client used by chat sessions."""

import logging
from typing import Any

import httpx

from sitechat.config import ConfigurationError, Settings
from sitechat.models import FailureKind

logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    """A single backend call failed."""

    def __init__(self, kind: FailureKind, detail: str = ""):
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail


class GeminiClient:
    """Thin async wrapper around the ``generateContent`` endpoint.

    Holds no conversation state; callers pass the full history on every
    call. Constructing the client performs no network I/O.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        if not settings.api_key:
            raise ConfigurationError(
                "No API key configured. Set SITECHAT_API_KEY (or GEMINI_API_KEY)."
            )

        self.model = settings.model
        try:
            self._http = httpx.AsyncClient(
                base_url=settings.api_base,
                headers={"x-goog-api-key": settings.api_key},
                timeout=settings.timeout,
                transport=transport,
            )
        except (TypeError, ValueError, httpx.InvalidURL) as e:
            raise ConfigurationError(f"Failed to initialize AI client: {e}") from e

    @property
    def endpoint(self) -> str:
        return f"/v1beta/models/{self.model}:generateContent"

    async def generate(self, contents: list[dict[str, Any]], system_instruction: str) -> str:
        """Request the next model turn for a conversation.

        Args:
            contents: Conversation turns in Gemini ``contents`` format
            system_instruction: Instruction scoping the assistant

        Returns:
            Reply text of the first candidate

        Raises:
            ProviderError: On any transport or backend failure
        """
        payload = {
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "contents": contents,
        }

        logger.debug("POST %s (%d turns)", self.endpoint, len(contents))
        try:
            response = await self._http.post(self.endpoint, json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.TimeoutException as e:
            raise ProviderError(FailureKind.TIMEOUT, str(e) or "request timed out") from e
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                FailureKind.HTTP_STATUS, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(FailureKind.TRANSPORT, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise ProviderError(FailureKind.EMPTY_REPLY, "response was not valid JSON") from e

        return extract_text(result)

    async def aclose(self) -> None:
        await self._http.aclose()


def extract_text(result: Any) -> str:
    """Pull the reply text out of a ``generateContent`` response.

    Raises:
        ProviderError: If the prompt was blocked or no text came back
    """
    if not isinstance(result, dict):
        raise ProviderError(FailureKind.EMPTY_REPLY, "response was not a JSON object")

    candidates = result.get("candidates") or []
    if not candidates:
        feedback = result.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        if block_reason:
            raise ProviderError(FailureKind.BLOCKED, str(block_reason))
        raise ProviderError(FailureKind.EMPTY_REPLY, "no candidates in response")

    candidate = candidates[0] if isinstance(candidates, list) else None
    if not isinstance(candidate, dict):
        raise ProviderError(FailureKind.EMPTY_REPLY, "malformed candidate in response")

    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        parts = []

    chunks = []
    for part in parts:
        if not isinstance(part, dict) or part.get("thought"):
            continue
        chunk = part.get("text") or ""
        if isinstance(chunk, str):
            chunks.append(chunk)
    text = "".join(chunks)
    if not text.strip():
        finish_reason = str(candidate.get("finishReason") or "")
        if finish_reason == "SAFETY":
            raise ProviderError(FailureKind.BLOCKED, finish_reason)
        raise ProviderError(FailureKind.EMPTY_REPLY, finish_reason)

    return text
