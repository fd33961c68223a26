"""
Rich panels for pgdock reports.
"""

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED

from pgdock.core.config import ConnectionConfig
from pgdock.core.models import InstallInstructions
from pgdock.ui.console import console


def create_instructions_panel(instructions: InstallInstructions) -> Panel:
    """Create a panel listing the Docker installation steps."""
    body = Text("Steps:\n", style="pgdock.info")
    for step in instructions.steps:
        body.append(f"  {step}\n", style="pgdock.command")

    return Panel(
        body,
        title=f"[pgdock.warning]{instructions.title}[/]",
        title_align="left",
        border_style="cyan",
        box=ROUNDED,
    )


def create_connection_panel(connection: ConnectionConfig) -> Panel:
    """Create a panel with the parameters clients need to connect."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Property", style="pgdock.muted")
    table.add_column("Value", style="bold")

    table.add_row("Host", connection.host)
    table.add_row("Port", str(connection.port))
    table.add_row("Database", connection.database)
    table.add_row("Username", connection.username)
    table.add_row("Password", connection.password)

    return Panel(
        table,
        title="[pgdock.title]Connection details[/]",
        title_align="left",
        border_style="blue",
        box=ROUNDED,
        expand=False,
    )


def display_panel(panel: Panel) -> None:
    """Display a panel to the console."""
    console.print(panel)
