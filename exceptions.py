"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Business Logic Failures (expected runtime issues)
3. Configuration Errors (fatal operator mistakes)

Every database startup check failure is a business logic failure: it is
expected at runtime, carries an ErrorCode, and is converted into a single
issue message by the startup check instead of crashing the process.
"""

from typing import Optional

from core.errors import ErrorCode


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate bugs that need to be fixed in the code and are not
    handled anywhere except DatabaseStartupCheck.run(), which reports them
    as UNEXPECTED_ERROR so the startup gate never crashes the host.

    Examples:
        - Repository returns a dict instead of ServerMetadata
        - Table name that is not a plain identifier passed to a probe
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime business logic failures.

    These are normal failures that occur during system operation
    and should be handled gracefully without crashing.
    """
    pass


class ConfigurationError(Exception):
    """
    System configuration error.

    Examples:
        - DB_CONN not set
        - Connection string that cannot be parsed
    """
    pass


# ============================================================================
# DATABASE STARTUP CHECK ERRORS
# ============================================================================

class DatabaseCheckError(BusinessLogicError):
    """
    Base class for failures of the database startup check.

    Attributes:
        error_code: ErrorCode classifying the failure
        check: Name of the check that raised it
    """
    error_code: ErrorCode = ErrorCode.UNEXPECTED_ERROR
    check: str = "database"


class DatabaseConnectionError(DatabaseCheckError):
    """
    Server metadata could not be read.

    Examples:
        - Connection refused / authentication failure
        - Metadata query returned no row
        - Row scan failed
    """
    error_code = ErrorCode.DATABASE_CONNECTION_FAILED
    check = "metadata"


class UnknownVariantError(DatabaseCheckError):
    """Engine family could not be determined from comment text or hint."""
    error_code = ErrorCode.VARIANT_UNKNOWN
    check = "variant"


class VersionFormatError(DatabaseCheckError):
    """Server version string is not of the form a.b.c[-suffix]."""
    error_code = ErrorCode.VERSION_FORMAT_INVALID
    check = "version"

    def __init__(self, message: str, version_string: str):
        super().__init__(message)
        self.version_string = version_string


class VersionTooLowError(DatabaseCheckError):
    """
    Server version is below the minimum for its engine family.

    Attributes:
        component: 1-indexed position of the deficient element
        version_string: Raw version reported by the server
        minimum: Minimum version as "a.b.c"
    """
    error_code = ErrorCode.VERSION_TOO_LOW
    check = "version"

    def __init__(self, component: int, version_string: str, minimum: str):
        super().__init__(
            f"version element {component} of '{version_string}' not high enough, "
            f"need at least version {minimum}"
        )
        self.component = component
        self.version_string = version_string
        self.minimum = minimum


class EncodingError(DatabaseCheckError):
    """
    Database character set or collation is not Unicode.

    Attributes:
        attribute: "charset" or "collation"
        value: Offending value reported by the server
    """
    check = "encoding"

    def __init__(self, attribute: str, value: str, message: Optional[str] = None):
        super().__init__(message or f"{attribute} not utf8: {value}")
        self.attribute = attribute
        self.value = value
        self.error_code = (
            ErrorCode.CHARSET_INVALID if attribute == "charset"
            else ErrorCode.COLLATION_INVALID
        )


class SchemaCountError(DatabaseCheckError):
    """Catalog query counting base tables failed."""
    error_code = ErrorCode.SCHEMA_COUNT_FAILED
    check = "table_count"


class MissingTableError(DatabaseCheckError):
    """A required table is absent from a non-empty schema."""
    error_code = ErrorCode.TABLE_MISSING
    check = "required_tables"

    def __init__(self, table: str):
        super().__init__(f"database is not empty, but does not contain table: {table}")
        self.table = table
