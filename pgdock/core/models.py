"""
Value types shared by the pgdock commands.
"""

from dataclasses import dataclass
from typing import Tuple
from enum import Enum


class Platform(Enum):
    """Operating system buckets that get distinct Docker guidance."""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"     # Also the fallback for anything unrecognized


@dataclass(frozen=True)
class InstallInstructions:
    """How to install Docker on one platform."""

    title: str
    steps: Tuple[str, ...]
    download_url: str


@dataclass(frozen=True)
class ConnectivityResult:
    """Outcome of a single psql connectivity attempt."""

    success: bool
    output: str = ""
    error: str = ""
