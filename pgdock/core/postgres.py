"""
PostgreSQL compose service management for pgdock.

Checks, starts and queries the database container through the
``docker compose`` CLI.
"""

import logging
import subprocess
import time
from typing import Optional

from pgdock.core.config import PgDockConfig
from pgdock.core.errors import ServiceStartError
from pgdock.core.models import ConnectivityResult

logger = logging.getLogger(__name__)


class PostgresService:
    """Manages the PostgreSQL service defined in docker-compose.yaml."""

    def __init__(self, config: Optional[PgDockConfig] = None):
        """Initialize the service wrapper with config (defaults if omitted)."""
        self.config = config or PgDockConfig()

    def is_running(self) -> bool:
        """
        Check whether the container is up.

        Matches 'docker compose ps' text output: the container name and an
        'Up' status must both appear. Any failure counts as not running.
        """
        cmd = ["docker", "compose", "ps", self.config.service]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            output = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            ).stdout
        except Exception as e:
            logger.debug("Status check failed: %s", e)
            return False

        return self.config.container_name in output and "Up" in output

    def start(self) -> None:
        """
        Start the service in the background.

        Output is not captured so the user sees Docker's progress live.

        Raises:
            ServiceStartError: If the command could not be run or failed.
        """
        cmd = ["docker", "compose", "up", "-d", self.config.service]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            subprocess.run(cmd, check=True)
        except subprocess.CalledProcessError as e:
            raise ServiceStartError(f"Command failed: {' '.join(cmd)} (exit code {e.returncode})") from e
        except OSError as e:
            raise ServiceStartError(f"Could not run {cmd[0]}: {e}") from e

    def wait_for_startup(self) -> None:
        """Give the database a fixed amount of time to come up."""
        logger.debug("Sleeping %.1fs for %s to start", self.config.startup_delay, self.config.service)
        time.sleep(self.config.startup_delay)

    def connect_command(self) -> list[str]:
        """Build the one-shot psql command run inside the container."""
        conn = self.config.connection
        return [
            "docker", "compose", "exec", "-T", self.config.service,
            "psql",
            "-U", conn.username,
            "-d", conn.database,
            "-c", self.config.query,
        ]

    def test_connection(self) -> ConnectivityResult:
        """
        Run the validation query and collect its output.

        Success is decided by the exit code alone. No timeout is applied.
        """
        cmd = self.connect_command()
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug("psql probe could not be started: %s", e)
            return ConnectivityResult(success=False, error=str(e))

        output, error = proc.communicate()
        logger.debug("psql probe exited with %d", proc.returncode)

        return ConnectivityResult(
            success=proc.returncode == 0,
            output=output or "",
            error=error or "",
        )
