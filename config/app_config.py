"""
Main Application Configuration.

Composes domain-specific configuration modules:
    - DatabaseConfig (MySQL-family backing store)

Exports:
    AppConfig: Main configuration class

Pattern:
    Composition over inheritance - domain configs are composed, not inherited.
"""

import os

from pydantic import BaseModel, Field

from .database_config import DatabaseConfig
from .defaults import AppDefaults


class AppConfig(BaseModel):
    """Application configuration - composition of domain configs."""

    environment: str = Field(
        default=AppDefaults.ENVIRONMENT,
        description="Environment name (dev, qa, prod)"
    )

    log_level: str = Field(
        default=AppDefaults.LOG_LEVEL,
        description="Logging verbosity (DEBUG, INFO, WARNING, ERROR)"
    )

    database: DatabaseConfig

    @classmethod
    def from_environment(cls) -> "AppConfig":
        """Load all configuration from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", AppDefaults.ENVIRONMENT),
            log_level=os.environ.get("LOG_LEVEL", AppDefaults.LOG_LEVEL).upper(),
            database=DatabaseConfig.from_environment(),
        )
