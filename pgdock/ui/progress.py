"""
Rich spinners for long-running pgdock operations.
"""

from contextlib import contextmanager
from typing import Generator

from pgdock.ui.console import console


@contextmanager
def spinner(message: str) -> Generator[None, None, None]:
    """Context manager for a simple spinner."""
    with console.status(f"[pgdock.step]⏳ {message}[/]", spinner="dots"):
        yield
