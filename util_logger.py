"""
Component Loggers.

Every record is written to stdout as one JSON object, tagged with the
component that produced it, so the startup verdict can be followed in any
log shipper without a parser.

Exports:
    ComponentType: Layer a logger belongs to
    LogLevel: Level names with conversion to logging constants
    ComponentConfig: Per-layer logger settings
    JSONFormatter: One JSON object per record
    LoggerFactory: create_logger(component_type, name)
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ComponentType(Enum):
    """Layer of the application a logger belongs to."""
    SERVICE = "service"        # startup orchestration
    REPOSITORY = "repository"  # catalog queries
    FACTORY = "factory"
    VALIDATOR = "validator"    # the database check


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Look up a level by name, ignoring case. Raises KeyError if unknown."""
        return cls[level.upper()]


def _level_from_env() -> LogLevel:
    """LOG_LEVEL wins; DEBUG_LOGGING=true means DEBUG; INFO otherwise."""
    raw = os.getenv('LOG_LEVEL')
    if raw:
        try:
            return LogLevel.from_string(raw)
        except KeyError:
            # env validation reports the bad value
            pass
    if os.getenv('DEBUG_LOGGING', '').lower() == 'true':
        return LogLevel.DEBUG
    return LogLevel.INFO


@dataclass
class ComponentConfig:
    component_type: ComponentType
    log_level: LogLevel = LogLevel.INFO


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single line of JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        dimensions = getattr(record, 'custom_dimensions', None)
        if dimensions is not None:
            entry['customDimensions'] = dimensions

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry['exception'] = {
                'type': exc_type.__name__ if exc_type else None,
                'message': str(exc_value) if exc_value else None,
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


class _ComponentAdapter(logging.LoggerAdapter):
    """Adds component_type/component_name to the record's custom dimensions."""

    def process(self, msg, kwargs):
        extra = kwargs.setdefault('extra', {})
        extra['custom_dimensions'] = {**self.extra, **extra.get('custom_dimensions', {})}
        return msg, kwargs


class LoggerFactory:
    """
    Builds component loggers.

    Example:
        logger = LoggerFactory.create_logger(ComponentType.VALIDATOR, "DatabaseStartupCheck")
        logger.info("Database checks: started")
    """

    # Repositories log every statement at DEBUG
    DEFAULT_CONFIGS = {
        ComponentType.SERVICE: ComponentConfig(ComponentType.SERVICE, _level_from_env()),
        ComponentType.REPOSITORY: ComponentConfig(ComponentType.REPOSITORY, LogLevel.DEBUG),
        ComponentType.FACTORY: ComponentConfig(ComponentType.FACTORY, _level_from_env()),
        ComponentType.VALIDATOR: ComponentConfig(ComponentType.VALIDATOR, _level_from_env()),
    }

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        config: Optional[ComponentConfig] = None
    ) -> logging.LoggerAdapter:
        """
        Logger named "<component_type>.<name>", wrapped in a dimension adapter.

        Calling this repeatedly for the same name reuses the logger and its
        single JSON handler.
        """
        config = config or cls.DEFAULT_CONFIGS.get(component_type, ComponentConfig(component_type))
        level = config.log_level
        if isinstance(level, str):
            level = LogLevel.from_string(level)

        logger = logging.getLogger(f"{component_type.value}.{name}")
        logger.setLevel(level.to_python_level())

        if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)

        return _ComponentAdapter(logger, {
            'component_type': component_type.value,
            'component_name': name,
        })


__all__ = [
    'ComponentType',
    'LogLevel',
    'ComponentConfig',
    'JSONFormatter',
    'LoggerFactory',
]
