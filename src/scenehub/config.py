"""
Configuration for the SceneHub server.

This module defines the configuration options for:
- Database connection and migrations
- HTTP server binding and CORS
- Identity resolution (authorization on/off, development user)
- Collaboration presence timeouts

Values come from an optional YAML file and are then overridden by
SCENEHUB_* environment variables.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field

log = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    """Database configuration."""

    url: Optional[str] = Field(
        default="sqlite:///scenehub.db",
        description="SQLAlchemy database URL; None disables persistence",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    auto_migrate: bool = Field(
        default=True,
        description="Run Alembic migrations to head on startup",
    )


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)
    api_prefix: str = Field(default="/api/v1")
    cors_allowed_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )


class AuthConfig(BaseModel):
    """Identity resolution configuration."""

    use_authorization: bool = Field(
        default=True,
        description="When false, requests without an identity act as the development user",
    )
    user_id_header: str = Field(default="X-User-Id")
    user_name_header: str = Field(default="X-User-Name")
    user_email_header: str = Field(default="X-User-Email")
    dev_user_id: str = Field(default="scenehub_dev_user")


class CollaborationConfig(BaseModel):
    """Presence tracking configuration."""

    presence_timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Sessions not seen within this window are not listed as active",
    )


class SceneHubConfig(BaseModel):
    """Top-level SceneHub configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    collaboration: CollaborationConfig = Field(default_factory=CollaborationConfig)
    log_level: str = Field(default="INFO")


_TRUE_VALUES = {"1", "true", "yes", "on"}


def _apply_env_overrides(config: SceneHubConfig) -> SceneHubConfig:
    database_url = os.getenv("SCENEHUB_DATABASE_URL")
    if database_url:
        config.database.url = database_url

    use_authorization = os.getenv("SCENEHUB_USE_AUTHORIZATION")
    if use_authorization is not None:
        config.auth.use_authorization = use_authorization.strip().lower() in _TRUE_VALUES

    dev_user_id = os.getenv("SCENEHUB_DEV_USER_ID")
    if dev_user_id:
        config.auth.dev_user_id = dev_user_id

    log_level = os.getenv("SCENEHUB_LOG_LEVEL")
    if log_level:
        config.log_level = log_level

    return config


def load_config(config_path: Optional[Union[str, Path]] = None) -> SceneHubConfig:
    """
    Load configuration from a YAML file and the environment.

    The YAML document may either be the configuration itself or nest it under
    a top-level ``scenehub`` key.

    Args:
        config_path: Path to a YAML file; falls back to $SCENEHUB_CONFIG

    Returns:
        SceneHubConfig with environment overrides applied
    """
    config_path = config_path or os.getenv("SCENEHUB_CONFIG")
    data: dict = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if "scenehub" in data:
            data = data["scenehub"] or {}
        log.info("Loaded configuration from %s", path)

    return _apply_env_overrides(SceneHubConfig.model_validate(data))
