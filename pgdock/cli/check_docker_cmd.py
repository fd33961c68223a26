"""
pgdock check-docker - Check that Docker is installed and running.

Prints installation guidance for the current platform when it is not.
"""

import logging

import typer
from rich.markup import escape

from pgdock.core.engine import (
    get_engine_version,
    is_compose_available,
    is_engine_installed,
    is_engine_running,
)
from pgdock.core.install_guide import DOCS_URL, START_HINTS, get_install_instructions
from pgdock.core.logging_config import setup_logging
from pgdock.ui.console import (
    console,
    print_commands,
    print_error,
    print_header,
    print_success,
    print_warning,
)
from pgdock.ui.panels import create_instructions_panel, display_panel

logger = logging.getLogger(__name__)


def check_docker_command():
    """
    Check the Docker installation and daemon, with install help on failure.
    """
    try:
        _check_docker()
    except typer.Exit:
        raise
    except Exception as e:
        logger.debug("check-docker failed", exc_info=True)
        print_error(f"Error: {escape(str(e))}")
        raise typer.Exit(1)


def _check_docker():
    print_header("🐳 Docker Installation Check")

    console.print("[pgdock.step]Checking Docker installation...[/]")
    if not is_engine_installed():
        print_error("Docker is not installed")
        _print_install_help()
        raise typer.Exit(1)

    print_success("Docker is installed")

    if is_compose_available():
        print_success("Docker Compose is available")
    else:
        print_warning("Docker Compose not found (using docker-compose)")

    console.print("\n[pgdock.step]Checking Docker daemon...[/]")
    if not is_engine_running():
        print_error("Docker is not running")
        _print_start_help()
        raise typer.Exit(1)

    print_success("Docker is running")

    version = get_engine_version()
    if version:
        console.print(f"\n[pgdock.info]📦 {version}[/]")

    console.print()
    print_success("Docker is ready to use!")
    console.print("\n[pgdock.step]You can now run:[/]")
    print_commands([
        ("docker compose up -d postgres", "Start PostgreSQL"),
        ("test-postgres", "Test PostgreSQL connection"),
    ])
    console.print()


def _print_install_help():
    """Print installation steps for the detected platform."""
    instructions = get_install_instructions()

    console.print()
    display_panel(create_instructions_panel(instructions))
    console.print("\n[pgdock.warning]💡 Quick Install:[/]")
    console.print(f"   Download: [pgdock.command]{instructions.download_url}[/]", soft_wrap=True)
    console.print("\n[pgdock.warning]📚 Documentation:[/]")
    console.print(f"   [pgdock.command]{DOCS_URL}[/]", soft_wrap=True)
    console.print()


def _print_start_help():
    """Print how to start the Docker daemon on each platform."""
    console.print("\n[pgdock.warning]Please start Docker Desktop:[/]")
    for hint in START_HINTS:
        console.print(f"[pgdock.command]{hint}[/]", highlight=False)
    console.print("\n[pgdock.step]Wait for Docker to fully start, then try again.[/]\n")


def run():
    """Console script entry point for check-docker."""
    setup_logging()
    typer.run(check_docker_command)
