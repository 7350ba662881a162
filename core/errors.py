"""
Error Code Definitions and Classification.

Centralized error code management for the database startup check, with
consistent error responses for the error/setup pages and diagnostics.

Key Features:
    - Explicit error codes for all failure modes of the startup check
    - Classification (PERMANENT, TRANSIENT) telling operators whether a
      restart alone can help
    - Helper to build a standardized error response

Exports:
    ErrorCode: Standardized error codes enum
    ErrorClassification: Error category enum
    is_retryable: Helper to check if a restart may clear the error
    get_error_classification: Classification lookup
    create_error_response: Standardized error dict
"""

from enum import Enum
from typing import Dict, Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for database startup check failures.

    These codes are attached to ValidationResult entries and to the
    error response consumed by whatever renders the error page.
    """

    # ========================================================================
    # CONNECTIVITY
    # ========================================================================
    DATABASE_CONNECTION_FAILED = "DATABASE_CONNECTION_FAILED"  # Connect, query or scan failed

    # ========================================================================
    # SERVER COMPATIBILITY
    # ========================================================================
    VARIANT_UNKNOWN = "VARIANT_UNKNOWN"  # Engine family not recognised
    VERSION_FORMAT_INVALID = "VERSION_FORMAT_INVALID"  # Version not a.b.c
    VERSION_TOO_LOW = "VERSION_TOO_LOW"  # Below minimum for family
    CHARSET_INVALID = "CHARSET_INVALID"  # Character set not utf8
    COLLATION_INVALID = "COLLATION_INVALID"  # Collation not utf8*

    # ========================================================================
    # SCHEMA
    # ========================================================================
    SCHEMA_COUNT_FAILED = "SCHEMA_COUNT_FAILED"  # Catalog query failed
    TABLE_MISSING = "TABLE_MISSING"  # Required table absent

    # ========================================================================
    # GENERIC
    # ========================================================================
    CONFIG_ERROR = "CONFIG_ERROR"  # Invalid environment / connection string
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"  # Unexpected exception


class ErrorClassification(str, Enum):
    """
    Error classification for operator guidance.

    The startup check itself never retries; this only tells the operator
    whether restarting the process could clear the error.
    """

    PERMANENT = "PERMANENT"  # Needs operator action (upgrade, re-create schema)
    TRANSIENT = "TRANSIENT"  # May clear on restart (database briefly unavailable)


_ERROR_CLASSIFICATION: Dict[ErrorCode, ErrorClassification] = {
    ErrorCode.DATABASE_CONNECTION_FAILED: ErrorClassification.TRANSIENT,
    ErrorCode.SCHEMA_COUNT_FAILED: ErrorClassification.TRANSIENT,
    ErrorCode.UNEXPECTED_ERROR: ErrorClassification.TRANSIENT,

    ErrorCode.VARIANT_UNKNOWN: ErrorClassification.PERMANENT,
    ErrorCode.VERSION_FORMAT_INVALID: ErrorClassification.PERMANENT,
    ErrorCode.VERSION_TOO_LOW: ErrorClassification.PERMANENT,
    ErrorCode.CHARSET_INVALID: ErrorClassification.PERMANENT,
    ErrorCode.COLLATION_INVALID: ErrorClassification.PERMANENT,
    ErrorCode.TABLE_MISSING: ErrorClassification.PERMANENT,
    ErrorCode.CONFIG_ERROR: ErrorClassification.PERMANENT,
}


def get_error_classification(error_code: ErrorCode) -> ErrorClassification:
    """
    Get the classification for an error code.

    Example:
        >>> get_error_classification(ErrorCode.TABLE_MISSING)
        <ErrorClassification.PERMANENT: 'PERMANENT'>
    """
    return _ERROR_CLASSIFICATION.get(error_code, ErrorClassification.TRANSIENT)


def is_retryable(error_code: ErrorCode) -> bool:
    """
    Determine if restarting the process may clear an error.

    Example:
        >>> is_retryable(ErrorCode.VERSION_TOO_LOW)
        False
        >>> is_retryable(ErrorCode.DATABASE_CONNECTION_FAILED)
        True
    """
    return get_error_classification(error_code) != ErrorClassification.PERMANENT


def create_error_response(
    error_code: ErrorCode,
    message: str,
    **kwargs: Any
) -> Dict[str, Any]:
    """
    Create a standardized error response dictionary.

    Args:
        error_code: ErrorCode enum value
        message: Human-readable issue message
        **kwargs: Additional fields to include in response

    Returns:
        Dict with standardized error response structure

    Example:
        >>> create_error_response(
        ...     ErrorCode.TABLE_MISSING,
        ...     "database is not empty, but does not contain table: user",
        ...     table="user"
        ... )
        {
            "success": False,
            "error": "TABLE_MISSING",
            "message": "database is not empty, but does not contain table: user",
            "retryable": False,
            "table": "user"
        }
    """
    return {
        "success": False,
        "error": error_code.value,
        "message": message,
        "retryable": is_retryable(error_code),
        **kwargs
    }
