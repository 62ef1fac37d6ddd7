"""Custom widgets for the sitechat TUI."""

from rich.markdown import Markdown
from rich.text import Text
from textual.widgets import Static

from sitechat.models import Message


class MessageBubble(Static):
    """One sender-tagged transcript entry."""

    def __init__(self, message: Message, **kwargs):
        sender_class = "user" if message.is_user else "bot"
        classes = f"{sender_class} {kwargs.pop('classes', '')}".strip()
        super().__init__(self._body(message), classes=classes, **kwargs)
        self.message = message

    @staticmethod
    def _body(message: Message):
        if message.is_user:
            return Text(message.text)
        return Markdown(message.text)


class ErrorBanner(Static):
    """Red banner shown above the transcript while an error is set."""

    def __init__(self, *args, **kwargs):
        super().__init__("", *args, **kwargs)
        self.error: str | None = None

    def show_error(self, error: str | None) -> None:
        """Show the banner with the given text, or hide it for None."""
        self.error = error
        self.update(error or "")
        self.display = bool(error)
