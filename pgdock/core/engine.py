"""
Docker engine probes.

Each probe runs one diagnostic command and reports only whether it
succeeded. Probes never raise: a missing binary, a timeout or a non-zero
exit all read as ``False``.
"""

import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


def _probe(cmd: list[str]) -> bool:
    """Run a command with its output discarded and report whether it exited 0."""
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except Exception as e:
        logger.debug("%s could not be run: %s", cmd[0], e)
        return False
    logger.debug("%s exited with %d", " ".join(cmd), result.returncode)
    return result.returncode == 0


def is_engine_installed() -> bool:
    """Check if the docker CLI is installed and on PATH."""
    return _probe(["docker", "--version"])


def is_compose_available() -> bool:
    """Check if the 'docker compose' plugin is available."""
    return _probe(["docker", "compose", "version"])


def is_engine_running() -> bool:
    """Check if the Docker daemon is running and reachable."""
    return _probe(["docker", "info"])


def get_engine_version() -> Optional[str]:
    """Get the installed Docker version string, e.g. 'Docker version 24.0.7, build afdd53b'."""
    try:
        result = subprocess.run(
            ["docker", "--version"],
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except Exception as e:
        logger.debug("Could not query docker version: %s", e)

    return None
