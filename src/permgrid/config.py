"""Configuration for the permissions grid.

Pydantic-validated settings shared by the grid builder, the session and
logging setup. ``load_config_from_env()`` is the only place that reads the
environment; everything else receives a ``GridConfig``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_BASE_PATH = "/admin/permissions"


class GridConfig(BaseModel):
    """Settings for grid links, group naming and logging."""

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Navigation links
    base_path: str = Field(
        default=DEFAULT_BASE_PATH,
        description="Route prefix for entity navigation links",
    )

    # Built-in groups
    admin_group_name: str = Field(
        default="Admin",
        description="Name of the built-in administrative group (never editable)",
    )
    admin_display_name: str = Field(default="Administrator")
    default_group_name: str = Field(
        default="Default",
        description="Name of the built-in group every user belongs to",
    )
    default_display_name: str = Field(default="All Users")

    @field_validator("base_path")
    @classmethod
    def validate_base_path(cls, v: str) -> str:
        """Require an absolute route and drop the trailing slash."""
        if not v.startswith("/"):
            raise ValueError("base_path must start with '/'")
        return v.rstrip("/") or "/"

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "extra": "forbid",
    }


def load_config_from_env() -> GridConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - PERMISSIONS_BASE_PATH: Route prefix for navigation links
    - PERMISSIONS_ADMIN_GROUP: Name of the administrative group
    - PERMISSIONS_DEFAULT_GROUP: Name of the all-users group

    Returns:
        GridConfig instance with values from environment or defaults.
    """
    import os

    return GridConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        base_path=os.getenv("PERMISSIONS_BASE_PATH", DEFAULT_BASE_PATH),
        admin_group_name=os.getenv("PERMISSIONS_ADMIN_GROUP", "Admin"),
        default_group_name=os.getenv("PERMISSIONS_DEFAULT_GROUP", "Default"),
    )


__all__ = [
    "DEFAULT_BASE_PATH",
    "GridConfig",
    "LogLevel",
    "load_config_from_env",
]
