"""Operator-facing log output of the init container.

Messages are assembled from plain string parts and highlighted parts, and
printed as rich Text. Plain parts are never parsed as markup, so label
values, addresses and exception messages are printed exactly as they are.
"""

from collections.abc import Generator, Mapping
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "highlight": "cyan bold",
        "muted": "dim",
    }
)

# Icon and icon style per message level
_LEVELS: dict[str, tuple[str, str]] = {
    "info": ("ℹ", "info"),
    "success": ("✓", "success"),
    "warning": ("⚠", "warning"),
    "error": ("✗", "error"),
    "action": ("→", "info"),
    "step": ("•", "muted"),
}

console = Console(theme=_THEME)

Part = str | Text


def message(level: str, *parts: Part) -> Text:
    """Build the line printed for a message.

    Args:
        level: One of info, success, warning, error, action or step.
        *parts: Plain strings and highlighted Text, joined without separator.

    Returns:
        The icon followed by the message text.

    """
    icon, style = _LEVELS[level]
    return Text.assemble((icon, style), " ", *parts)


def info(*parts: Part) -> None:
    """Print an informational message."""
    console.print(message("info", *parts))


def success(*parts: Part) -> None:
    """Print a success message."""
    console.print(message("success", *parts))


def warning(*parts: Part) -> None:
    """Print a warning message."""
    console.print(message("warning", *parts))


def error(*parts: Part) -> None:
    """Print an error message."""
    console.print(message("error", *parts))


def action(*parts: Part) -> None:
    console.print(message("action", *parts))


def step(*parts: Part) -> None:
    console.print(message("step", *parts))


def highlight(text: str) -> Text:
    """Return text styled as highlighted.

    Args:
        text: The text to highlight, printed verbatim.

    """
    return Text(text, style="highlight")


@contextmanager
def spinner(status: str) -> Generator[None, None, None]:
    """Display a spinner while waiting on the Kubernetes API.

    Args:
        status: The status message to display.

    Yields:
        None

    """
    with console.status(Text(status, style="info"), spinner="dots"):
        yield


def summary_panel(title: str, items: Mapping[str, str]) -> None:
    """Print a panel with one row per label and value.

    Args:
        title: Title for the panel.
        items: Mapping of label -> value pairs to display.

    """
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(style="cyan")

    for label, value in items.items():
        table.add_row(Text(f"{label}:"), Text(value))

    console.print(Panel(table, title=Text(title, style="bold"), border_style="green"))
