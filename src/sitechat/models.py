"""Data models for sitechat."""

import itertools
import time
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

_id_counter = itertools.count()


class Sender(str, Enum):
    """Who authored a transcript message."""

    USER = "user"
    BOT = "bot"


class FailureKind(str, Enum):
    """Why a single submission to the backend failed."""

    TRANSPORT = "transport"  # Connection refused, DNS, protocol errors
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"  # Backend answered with a non-2xx status
    BLOCKED = "blocked"  # Prompt rejected by provider safety filters
    EMPTY_REPLY = "empty_reply"  # 2xx response without usable text


def new_message_id(prefix: str) -> str:
    """Build a process-unique message id such as ``user-1718000000000-3``."""
    return f"{prefix}-{int(time.time() * 1000)}-{next(_id_counter)}"


class Message(BaseModel):
    """A single entry in the transcript."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique message identifier")
    sender: Sender = Field(..., description="Message author")
    text: str = Field(..., description="Message body")

    @classmethod
    def from_user(cls, text: str) -> "Message":
        return cls(id=new_message_id("user"), sender=Sender.USER, text=text)

    @classmethod
    def from_bot(cls, text: str, error: bool = False) -> "Message":
        prefix = "bot-error" if error else "bot"
        return cls(id=new_message_id(prefix), sender=Sender.BOT, text=text)

    @property
    def is_user(self) -> bool:
        return self.sender == Sender.USER


class Reply(BaseModel):
    """Successful assistant reply."""

    model_config = ConfigDict(frozen=True)

    text: str

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """Failed submission, tagged with the kind of failure."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        """Human-readable summary for the error banner."""
        labels = {
            FailureKind.TRANSPORT: "could not reach the AI service",
            FailureKind.TIMEOUT: "the AI service took too long to respond",
            FailureKind.HTTP_STATUS: "the AI service rejected the request",
            FailureKind.BLOCKED: "the request was blocked by the AI service",
            FailureKind.EMPTY_REPLY: "the AI service returned an empty reply",
        }
        label = labels.get(self.kind, "an unknown error occurred")
        if self.detail:
            return f"{label} ({self.detail})"
        return label


SubmitResult = Union[Reply, Failure]
