"""
Error codes, classification and exception messages.
"""

import pytest

from core.errors import (
    ErrorClassification,
    ErrorCode,
    create_error_response,
    get_error_classification,
    is_retryable,
)
from exceptions import (
    BusinessLogicError,
    DatabaseCheckError,
    DatabaseConnectionError,
    EncodingError,
    MissingTableError,
    SchemaCountError,
    UnknownVariantError,
    VersionFormatError,
    VersionTooLowError,
)


class TestClassification:
    def test_every_code_is_classified(self):
        for code in ErrorCode:
            assert isinstance(get_error_classification(code), ErrorClassification)

    @pytest.mark.parametrize("code", [
        ErrorCode.DATABASE_CONNECTION_FAILED,
        ErrorCode.SCHEMA_COUNT_FAILED,
        ErrorCode.UNEXPECTED_ERROR,
    ])
    def test_transient_codes_retryable(self, code):
        assert is_retryable(code)

    @pytest.mark.parametrize("code", [
        ErrorCode.VERSION_TOO_LOW,
        ErrorCode.CHARSET_INVALID,
        ErrorCode.TABLE_MISSING,
        ErrorCode.CONFIG_ERROR,
    ])
    def test_permanent_codes_not_retryable(self, code):
        assert not is_retryable(code)

    def test_error_response_shape(self):
        response = create_error_response(ErrorCode.TABLE_MISSING, "missing user", table="user")
        assert response == {
            "success": False,
            "error": "TABLE_MISSING",
            "message": "missing user",
            "retryable": False,
            "table": "user",
        }


class TestExceptions:
    @pytest.mark.parametrize("error,code", [
        (DatabaseConnectionError("refused"), ErrorCode.DATABASE_CONNECTION_FAILED),
        (UnknownVariantError("unknown"), ErrorCode.VARIANT_UNKNOWN),
        (VersionFormatError("bad", version_string="x"), ErrorCode.VERSION_FORMAT_INVALID),
        (VersionTooLowError(2, "5.6.51", "5.7.10"), ErrorCode.VERSION_TOO_LOW),
        (EncodingError("charset", "latin1"), ErrorCode.CHARSET_INVALID),
        (EncodingError("collation", "latin1_swedish_ci"), ErrorCode.COLLATION_INVALID),
        (SchemaCountError("failed"), ErrorCode.SCHEMA_COUNT_FAILED),
        (MissingTableError("user"), ErrorCode.TABLE_MISSING),
    ])
    def test_error_codes(self, error, code):
        assert isinstance(error, DatabaseCheckError)
        assert isinstance(error, BusinessLogicError)
        assert error.error_code is code

    def test_version_too_low_message(self):
        error = VersionTooLowError(2, "5.6.51-log", "5.7.10")
        assert str(error) == (
            "version element 2 of '5.6.51-log' not high enough, need at least version 5.7.10"
        )
        assert error.component == 2

    def test_missing_table_message(self):
        assert str(MissingTableError("user")) == (
            "database is not empty, but does not contain table: user"
        )

    def test_encoding_default_message(self):
        assert str(EncodingError("charset", "latin1")) == "charset not utf8: latin1"

    def test_connection_error_does_not_shadow_builtin(self):
        assert not issubclass(DatabaseConnectionError, ConnectionError)
