"""
Configuration management for pgdock.

Defaults match the PostgreSQL service declared in the project's
docker-compose.yaml. A pgdock.yaml in the working directory may override them.
"""

import os
from pathlib import Path
from typing import Optional, Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE_NAME = "pgdock.yaml"


class ConnectionConfig(BaseModel):
    """How clients reach the database from the host."""

    host: str = Field(default="localhost", description="Host the database port is published on")
    port: int = Field(default=5432, ge=1, le=65535, description="Published PostgreSQL port")
    database: str = Field(default="8noai_db", description="Database name")
    username: str = Field(default="postgres", description="Database user")
    password: str = Field(default="postgres", description="Database password")


class PgDockConfig(BaseModel):
    """Complete pgdock configuration (pgdock.yaml schema)."""

    service: str = Field(default="postgres", description="Compose service name")
    container_name: str = Field(
        default="8no-ai-postgres",
        description="Token that identifies the container in 'docker compose ps' output",
    )
    startup_delay: float = Field(
        default=5.0, ge=0, description="Seconds to wait after 'docker compose up' before re-checking",
    )
    query: str = Field(default="SELECT version();", description="Query used to validate connectivity")

    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)


def get_config_path(base_path: Optional[Path] = None) -> Path:
    """Get the pgdock.yaml config file path."""
    env_path = get_env_config()["config_path"]
    if base_path is None and env_path:
        return Path(env_path)
    if base_path is None:
        base_path = Path.cwd()
    return base_path / CONFIG_FILE_NAME


def load_config(config_path: Optional[Path] = None) -> PgDockConfig:
    """Load configuration from pgdock.yaml, falling back to defaults."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return PgDockConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return PgDockConfig.model_validate(data or {})


def save_config(config: PgDockConfig, config_path: Optional[Path] = None) -> Path:
    """Save configuration to pgdock.yaml."""
    if config_path is None:
        config_path = get_config_path()

    data = config.model_dump(exclude_none=True)

    with open(config_path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    return config_path


def get_env_config() -> dict[str, Any]:
    """Get configuration from environment variables."""
    return {
        "config_path": os.getenv("PGDOCK_CONFIG"),
        "log_level": os.getenv("PGDOCK_LOG_LEVEL", "WARNING"),
    }
