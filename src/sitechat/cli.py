"""CLI interface for sitechat."""

import asyncio
import logging

import typer
from rich.logging import RichHandler
from rich.markup import escape

from sitechat import __version__
from sitechat.ai.session import create_session, send_message
from sitechat.config import ConfigurationError, load_settings
from sitechat.display import console, show_error_banner, show_message, show_settings
from sitechat.models import Message
from sitechat.prompts import CONNECT_ERROR

# Create Typer app
app = typer.Typer(
    name="sitechat",
    help="Website assistant chat powered by Gemini",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"sitechat version {__version__}")
        raise typer.Exit()


def configure_logging(debug: bool = False) -> None:
    """Route sitechat log records through rich."""
    logger = logging.getLogger("sitechat")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """sitechat - ask an AI assistant how this website works."""
    configure_logging(debug)

    # If no command specified, launch the TUI
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask the assistant"),
) -> None:
    """Ask a single question and print the reply."""
    if not question.strip():
        console.print("[red]Error: Question must not be empty[/red]")
        raise typer.Exit(1)

    try:
        session = create_session()
    except ConfigurationError as e:
        show_error_banner(CONNECT_ERROR)
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1)

    async def _ask() -> str:
        try:
            return await send_message(session, question)
        finally:
            await session.aclose()

    with console.status("[dim]Thinking...[/dim]"):
        reply = asyncio.run(_ask())

    show_message(Message.from_bot(reply))


@app.command()
def chat() -> None:
    """Line-mode chat in the current terminal."""
    from sitechat.chat import start_chat

    if not start_chat(console=console):
        raise typer.Exit(1)


@app.command()
def tui() -> None:
    """Launch the interactive chat window."""
    from sitechat.tui import run_tui

    run_tui()


@app.command()
def config() -> None:
    """Show effective configuration."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    show_settings(settings)

    if not settings.api_key:
        console.print()
        console.print("[yellow]No API key set. Export SITECHAT_API_KEY to enable chat.[/yellow]")


if __name__ == "__main__":
    app()
