"""Main TUI application for sitechat."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Input, LoadingIndicator

from sitechat.conversation import ConversationState, ConversationView
from sitechat.tui.widgets import ErrorBanner, MessageBubble


class ChatApp(App):
    """Chat window talking to the website assistant."""

    TITLE = "AI Assistant"
    SUB_TITLE = "Powered by Gemini"

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("escape", "clear_input", "Clear", show=False),
    ]

    def __init__(self, view: ConversationView | None = None):
        super().__init__()
        self.view = view or ConversationView()
        self._rendered = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield ErrorBanner(id="error-banner")
        yield VerticalScroll(id="transcript")
        yield LoadingIndicator(id="typing")
        yield Input(placeholder="Ask a question...", id="chat-input")
        yield Footer()

    def on_mount(self) -> None:
        """Create the session once the widgets exist."""
        self.view.subscribe(self._on_state_change)
        self._on_state_change(self.view.state)
        self.view.initialize()
        self.query_one("#chat-input", Input).focus()

    async def on_unmount(self) -> None:
        session = self.view.state.session
        if session is not None:
            await session.aclose()

    def _on_state_change(self, state: ConversationState) -> None:
        """Re-render from conversation state."""
        transcript = self.query_one("#transcript", VerticalScroll)
        new_messages = state.messages[self._rendered:]
        if new_messages:
            transcript.mount_all(MessageBubble(message) for message in new_messages)
            self._rendered = len(state.messages)
            transcript.scroll_end(animate=False)

        self.query_one("#error-banner", ErrorBanner).show_error(state.error)
        self.query_one("#typing", LoadingIndicator).display = state.busy

        chat_input = self.query_one("#chat-input", Input)
        chat_input.disabled = state.busy or not state.ready
        if not chat_input.disabled:
            chat_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Send the typed message."""
        text = event.value
        if not self.view.can_send(text):
            return

        event.input.value = ""
        self.run_worker(self.view.on_send(text), group="send")

    def action_clear_input(self) -> None:
        self.query_one("#chat-input", Input).value = ""


def run_tui(view: ConversationView | None = None) -> None:
    """Run the interactive chat window."""
    app = ChatApp(view=view)
    app.run()
