"""Rich terminal display for sitechat."""

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sitechat.config import Settings
from sitechat.models import Message, Sender

console = Console()


def sender_label(sender: Sender) -> str:
    """Get styled speaker label for a message."""
    labels = {
        Sender.USER: "[bold cyan]You:[/bold cyan]",
        Sender.BOT: "[bold blue]Assistant:[/bold blue]",
    }
    return labels.get(sender, "?")


def show_header(out: Console | None = None) -> None:
    """Display the chat header."""
    (out or console).print(
        Panel(
            "[bold blue]AI Assistant[/bold blue]\n" "[dim]Powered by Gemini[/dim]",
            expand=False,
        )
    )


def show_message(message: Message, out: Console | None = None) -> None:
    """Display one transcript message."""
    out = out or console
    out.print()
    out.print(sender_label(message.sender))
    out.print(Markdown(message.text))
    out.print()


def show_error_banner(error: str, out: Console | None = None) -> None:
    """Display the error banner."""
    (out or console).print(Panel(f"[red]{escape(error)}[/red]", border_style="red", expand=False))


def show_settings(settings: Settings) -> None:
    """Display effective configuration."""
    table = Table(title="sitechat Configuration", show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value")

    key_style = "green" if settings.api_key else "red"
    table.add_row("API key", f"[{key_style}]{settings.masked_key}[/{key_style}]")
    table.add_row("Model", escape(settings.model))
    table.add_row("API base", escape(settings.api_base))
    table.add_row("Timeout", f"{settings.timeout:g}s")

    console.print(table)
    console.print()
    console.print("[bold]System instruction[/bold]")
    console.print(f"[dim]{escape(settings.system_instruction)}[/dim]")


def show_help(out: Console | None = None) -> None:
    """Show help tips for line-mode chat."""
    (out or console).print(
        Panel(
            """[bold]Tips:[/bold]

- Ask how a feature of the website works
- Ask where the data on a page comes from
- Replies keep the context of earlier questions

[dim]Type 'exit' to quit[/dim]""",
            title="Help",
            expand=False,
        )
    )
