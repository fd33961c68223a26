"""
pgdock CLI - Main entry point.

Developer helpers for the Docker Compose managed PostgreSQL database.
"""

import typer

from pgdock.core.logging_config import setup_logging
from pgdock.ui.console import console

# Create the main Typer app
app = typer.Typer(
    name="pgdock",
    help="🐘 pgdock - Local PostgreSQL under Docker Compose",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    🐘 pgdock - Local PostgreSQL under Docker Compose

    Check your Docker setup and verify the database container accepts connections.
    """
    if version:
        from pgdock import __version__
        console.print(f"pgdock CLI v{__version__}")
        raise typer.Exit()

    setup_logging("DEBUG" if debug else None)


# Import and register commands
from pgdock.cli.check_docker_cmd import check_docker_command
from pgdock.cli.test_postgres_cmd import test_postgres_command

app.command(name="check-docker", help="🐳 Check Docker is installed and running")(check_docker_command)
app.command(name="test-postgres", help="🔍 Start PostgreSQL if needed and test the connection")(test_postgres_command)


if __name__ == "__main__":
    app()
