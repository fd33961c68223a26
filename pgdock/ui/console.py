"""
Rich console wrapper for consistent terminal UI across pgdock.
"""

from rich.console import Console
from rich.theme import Theme

# Green for ok, red for failures, yellow for progress
PGDOCK_THEME = Theme({
    "pgdock.title": "bold bright_blue",
    "pgdock.success": "bold green",
    "pgdock.warning": "bold yellow",
    "pgdock.error": "bold red",
    "pgdock.info": "cyan",
    "pgdock.muted": "dim white",
    "pgdock.step": "yellow",
    "pgdock.command": "blue",
})

# Global console instance
console = Console(theme=PGDOCK_THEME)


def print_header(title: str) -> None:
    """Print a command header line."""
    console.print(f"\n[pgdock.title]{title}[/]\n")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[pgdock.success]✅[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[pgdock.error]❌[/] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[pgdock.warning]⚠️[/]  {message}")


def print_step(step: int, message: str) -> None:
    """Print a numbered step."""
    console.print(f"\n[pgdock.step]{step}. {message}[/]")


def print_commands(commands: list[tuple[str, str]]) -> None:
    """Print a list of suggested commands with descriptions."""
    width = max(len(cmd) for cmd, _ in commands)
    for cmd, description in commands:
        console.print(f"  [pgdock.command]{cmd:<{width}}[/]  {description}", highlight=False, soft_wrap=True)
