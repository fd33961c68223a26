"""
Logging configuration, set up once by each entrypoint.

Every module that does ``logger = logging.getLogger(__name__)`` inherits
this config. Records go to stderr through Rich so they never mix with the
report printed on stdout.

Levels are resolved in precedence order:
    --debug flag  >  PGDOCK_LOG_LEVEL env var  >  WARNING (default)
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from pgdock.core.config import get_env_config


def setup_logging(level: Optional[str] = None) -> None:
    """Configure Python logging for the entire process."""
    if level is None:
        level = get_env_config()["log_level"]
    numeric_level = _parse_level(level)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=numeric_level <= logging.DEBUG,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)


def _parse_level(level: Optional[str]) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
