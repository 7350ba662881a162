"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - DatabaseDefaults: Connection and startup check reference values
    - AppDefaults: Application-wide defaults

Usage:
    from config.defaults import DatabaseDefaults

    # In Pydantic Field definitions:
    port: int = Field(default=DatabaseDefaults.PORT, ...)
"""


# =============================================================================
# DATABASE DEFAULTS
# =============================================================================

class DatabaseDefaults:
    """
    Database configuration and startup check reference values.

    REQUIRED_TABLES order is the probe order, so error messages are
    reproducible between runs.
    """

    PORT = 3306
    HOST = "localhost"
    CONNECTION_TIMEOUT_SECONDS = 30

    # Startup check behaviour
    STRICT_VERSION_PARSING = True   # Unparsable VERSION() is fatal
    ALLOW_VARIANT_FALLBACK = False  # Unknown engine family is fatal

    # Unicode requirements (utf8mb3 is how MySQL 8.0.30+ reports utf8)
    ALLOWED_CHARSETS = ("utf8", "utf8mb3", "utf8mb4")
    COLLATION_PREFIX = "utf8"

    REQUIRED_TABLES = (
        "account",
        "attachment",
        "document",
        "label",
        "organization",
        "page",
        "revision",
        "search",
        "user",
    )


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """Application-wide defaults."""

    LOG_LEVEL = "INFO"
    ENVIRONMENT = "dev"
