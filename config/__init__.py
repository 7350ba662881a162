"""
Configuration Package

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── database_config.py       # MySQL-family connection + check policy
    ├── defaults.py              # Default values
    └── env_validation.py        # Regex validation of env vars

Usage:
    from config import get_config
    config = get_config()
    schema = config.database.schema_name

    from config import debug_config
    info = debug_config()  # Passwords masked
"""

from typing import Optional

from .database_config import DatabaseConfig, derive_schema_name, parse_connection_string
from .app_config import AppConfig


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment

    Raises:
        ConfigurationError: DB_CONN not set
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration (tests, reload after env change)."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get sanitized configuration for debugging (masks sensitive values).
    """
    try:
        config = get_config()
        return {
            'environment': config.environment,
            'log_level': config.log_level,
            'database': config.database.debug_dict(),
        }
    except Exception as e:
        return {'error': f'Configuration failed to load: {e}'}


__all__ = [
    'AppConfig',
    'DatabaseConfig',
    'derive_schema_name',
    'parse_connection_string',
    'get_config',
    'reset_config',
    'debug_config',
]
