"""Transcript state for the chat widget."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from sitechat.ai.session import ChatSession, create_session
from sitechat.config import ConfigurationError
from sitechat.models import Message, Reply
from sitechat.prompts import CONNECT_ERROR, ERROR_REPLY, GREETING, issue_banner

logger = logging.getLogger(__name__)

Listener = Callable[["ConversationState"], None]


@dataclass
class ConversationState:
    """Everything the UI renders: transcript, busy flag, error banner."""

    messages: list[Message] = field(default_factory=list)
    busy: bool = False
    error: Optional[str] = None
    session: Optional[ChatSession] = field(default=None, repr=False)

    @property
    def ready(self) -> bool:
        return self.session is not None


class ConversationView:
    """Owns a ConversationState and the transitions that mutate it.

    UIs subscribe to be told when state changes and call ``initialize``
    once, then ``on_send`` for each user submission.
    """

    def __init__(self, session_factory: Callable[[], ChatSession] = create_session):
        self.state = ConversationState()
        self._session_factory = session_factory
        self._listeners: list[Listener] = []

    @property
    def messages(self) -> list[Message]:
        return list(self.state.messages)

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.state)

    def initialize(self) -> bool:
        """Create the session and seed the greeting.

        Returns:
            True if a session is ready, False if setup failed
        """
        if self.state.session is not None:
            return True

        try:
            session = self._session_factory()
        except ConfigurationError as e:
            logger.error("Failed to initialize chat session: %s", e)
            self.state.error = CONNECT_ERROR
            self._notify()
            return False

        self.state.session = session
        self.state.messages.append(Message.from_bot(GREETING))
        self._notify()
        return True

    def can_send(self, text: str) -> bool:
        """Whether a submission would be accepted right now."""
        return bool(text.strip()) and not self.state.busy and self.state.session is not None

    def _begin(self, text: str) -> ChatSession:
        self.state.messages.append(Message.from_user(text))
        self.state.busy = True
        self.state.error = None
        self._notify()
        return self.state.session

    def _finish(self, bot_message: Message, error: Optional[str] = None) -> None:
        self.state.messages.append(bot_message)
        if error is not None:
            self.state.error = error
        self.state.busy = False
        self._notify()

    async def on_send(self, text: str) -> bool:
        """Submit user text and append the reply.

        Ignored when the text is blank, a request is in flight, or there
        is no session.

        Returns:
            True if the submission was accepted
        """
        if not self.can_send(text):
            return False

        session = self._begin(text)
        try:
            result = await session.submit(text)
        except Exception as e:
            logger.exception("Unexpected error while sending message")
            self._finish(
                Message.from_bot(ERROR_REPLY, error=True),
                issue_banner(str(e) or "An unknown error occurred."),
            )
            return True

        if isinstance(result, Reply):
            self._finish(Message.from_bot(result.text))
        else:
            self._finish(
                Message.from_bot(ERROR_REPLY, error=True),
                issue_banner(result.describe()),
            )
        return True
