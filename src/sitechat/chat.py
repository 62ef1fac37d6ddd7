"""Line-mode chat loop for terminals without a full TUI."""

import asyncio

from rich.console import Console

from sitechat import display
from sitechat.conversation import ConversationView

EXIT_WORDS = ("exit", "quit", "q")


def start_chat(view: ConversationView | None = None, console: Console | None = None) -> bool:
    """Start an interactive line-mode chat.

    Args:
        view: Conversation view to drive (a fresh one by default)
        console: Rich console for output

    Returns:
        False if the assistant could not be initialized
    """
    if view is None:
        view = ConversationView()
    if console is None:
        console = display.console

    return asyncio.run(_chat_loop(view, console))


async def _chat_loop(view: ConversationView, console: Console) -> bool:
    display.show_header(console)

    if not view.initialize():
        display.show_error_banner(view.state.error, console)
        return False

    console.print("[dim]Type 'exit' or 'quit' to leave. Type 'help' for tips.[/dim]")
    for message in view.messages:
        display.show_message(message, console)

    session = view.state.session
    try:
        while True:
            try:
                user_input = console.input("[bold cyan]You:[/bold cyan] ").strip()
            except (KeyboardInterrupt, EOFError):
                console.print("\n[dim]Goodbye![/dim]")
                break

            if not user_input:
                continue

            if user_input.lower() in EXIT_WORDS:
                console.print("\n[dim]Goodbye![/dim]")
                break

            if user_input.lower() == "help":
                display.show_help(console)
                continue

            seen = len(view.state.messages)
            with console.status("[dim]Thinking...[/dim]"):
                await view.on_send(user_input)

            for message in view.messages[seen:]:
                if not message.is_user:
                    display.show_message(message, console)
            if view.state.error:
                display.show_error_banner(view.state.error, console)
    finally:
        await session.aclose()

    return True
