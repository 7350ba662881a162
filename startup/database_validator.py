# ============================================================================
# DATABASE STARTUP CHECK
# ============================================================================
# STATUS: Infrastructure - Database validation gate
# PURPOSE: Decide NORMAL / SETUP / BAD_CONFIGURATION before serving requests
# ============================================================================
"""
Database Startup Check.

Runs an ordered list of checks against the backing store and stops at the
first one that does not pass:

    1. metadata         - VERSION(), @@version_comment, charset, collation
    2. variant          - MySQL / Percona / MariaDB
    3. version          - at least the family's minimum
    4. charset          - utf8 / utf8mb3 / utf8mb4
    5. collation        - utf8*
    6. table_count      - zero base tables means first run (SETUP)
    7. required_tables  - every required table can be selected from

Each check returns a ValidationResult (PASS or SETUP) or raises a
DatabaseCheckError; the error becomes a FAIL result and the verdict is
BAD_CONFIGURATION. Nothing is retried.

Exports:
    DatabaseStartupCheck: The check, run once per process
    verify_required_tables: Probe required tables in declared order
"""

from typing import Callable, Iterable, List, Optional, Tuple

from config import DatabaseConfig
from config.defaults import DatabaseDefaults
from core.errors import ErrorCode
from core.logic import (
    deficient_component,
    detect_variant,
    gate_version,
    is_charset_allowed,
    is_collation_allowed,
    parse_version,
    resolve_variant,
)
from core.models import (
    ZERO_VERSION,
    CheckOutcome,
    EngineVariant,
    ServerMetadata,
    VersionTuple,
    minimum_version_for,
)
from exceptions import (
    ContractViolationError,
    DatabaseCheckError,
    EncodingError,
    MissingTableError,
    VersionFormatError,
    VersionTooLowError,
)
from infrastructure.interface_repository import ICatalogRepository
from util_logger import LoggerFactory, ComponentType
from .state import DatabaseCheckResult, ValidationResult


def verify_required_tables(
    repository: ICatalogRepository,
    tables: Iterable[str]
) -> ValidationResult:
    """
    Probe each required table in declared order.

    Stops at the first table whose probe fails; later tables are not probed.

    Raises:
        MissingTableError: Naming the first missing table
    """
    probed = []
    for table in tables:
        if not repository.probe_table(table):
            raise MissingTableError(table)
        probed.append(table)

    return ValidationResult(
        name="required_tables",
        outcome=CheckOutcome.PASS,
        details={"tables": probed}
    )


class DatabaseStartupCheck:
    """
    Database startup check over an injected catalog repository.

    Meant to run once per process: a second run() returns the first verdict.

    Example:
        check = DatabaseStartupCheck(repository, config.database)
        result = check.run()
    """

    def __init__(
        self,
        repository: ICatalogRepository,
        config: DatabaseConfig,
        logger=None,
        required_tables: Optional[Iterable[str]] = None
    ):
        self.repository = repository
        self.config = config
        self.logger = logger or LoggerFactory.create_logger(ComponentType.VALIDATOR, "DatabaseStartupCheck")
        self.required_tables: Tuple[str, ...] = tuple(
            required_tables if required_tables is not None else DatabaseDefaults.REQUIRED_TABLES
        )
        self.schema_name = config.schema_name

        # Populated as checks pass
        self.metadata: Optional[ServerMetadata] = None
        self.variant: Optional[EngineVariant] = None
        self.version: Optional[VersionTuple] = None

        self._result: Optional[DatabaseCheckResult] = None
        self._checked = False

        self.checks: List[Tuple[str, Callable[[], ValidationResult]]] = [
            ("metadata", self._check_metadata),
            ("variant", self._check_variant),
            ("version", self._check_version),
            ("charset", self._check_charset),
            ("collation", self._check_collation),
            ("table_count", self._check_table_count),
            ("required_tables", self._check_required_tables),
        ]

    @property
    def checked(self) -> bool:
        """True once a full run has passed every check."""
        return self._checked

    def run(self) -> DatabaseCheckResult:
        """Run the checks in order and return the verdict."""
        if self._result is not None:
            self.logger.warning("Database checks already ran; returning the earlier verdict")
            return self._result

        self.logger.info("Database checks: started")
        results: List[ValidationResult] = []

        for name, check in self.checks:
            try:
                result = check()
            except DatabaseCheckError as e:
                self.logger.error(f"Database check '{name}' failed: {e}")
                result = ValidationResult(
                    name=name,
                    outcome=CheckOutcome.FAIL,
                    error_type=e.error_code.value,
                    error_message=str(e),
                    details=self._error_details(e),
                )
            except Exception as e:
                self.logger.exception(f"Database check '{name}' raised unexpectedly: {e}")
                result = ValidationResult(
                    name=name,
                    outcome=CheckOutcome.FAIL,
                    error_type=ErrorCode.UNEXPECTED_ERROR.value,
                    error_message=f"unexpected error during {name} check: {e}",
                )

            results.append(result)
            if not result.passed:
                break

        self._result = self._verdict(results)
        self.logger.info(f"Database checks: finished in mode '{self._result.mode.value}'")
        return self._result

    # ------------------------------------------------------------------
    # Verdict
    # ------------------------------------------------------------------

    def _verdict(self, results: List[ValidationResult]) -> DatabaseCheckResult:
        last = results[-1]

        if last.outcome is CheckOutcome.FAIL:
            return DatabaseCheckResult.bad_configuration(
                issue=last.error_message,
                error_code=ErrorCode(last.error_type),
                checks=results,
                variant=self.variant,
                version=self.version,
            )

        if last.outcome is CheckOutcome.SETUP:
            return DatabaseCheckResult.setup(
                issue=last.details["message"],
                schema_name=self.schema_name,
                checks=results,
                variant=self.variant,
                version=self.version,
            )

        self._checked = True
        return DatabaseCheckResult.normal(
            checks=results,
            variant=self.variant,
            version=self.version,
        )

    @staticmethod
    def _error_details(error: DatabaseCheckError) -> dict:
        if isinstance(error, VersionTooLowError):
            return {"component": error.component, "version": error.version_string, "minimum": error.minimum}
        if isinstance(error, VersionFormatError):
            return {"version": error.version_string}
        if isinstance(error, EncodingError):
            return {error.attribute: error.value}
        if isinstance(error, MissingTableError):
            return {"table": error.table}
        return {}

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _check_metadata(self) -> ValidationResult:
        metadata = self.repository.fetch_server_metadata()
        if not isinstance(metadata, ServerMetadata):
            raise ContractViolationError(
                f"fetch_server_metadata returned {type(metadata).__name__}, expected ServerMetadata"
            )
        self.metadata = metadata
        self.logger.info(f"Database checks: SQL version {metadata.version_string}")
        return ValidationResult(
            name="metadata",
            outcome=CheckOutcome.PASS,
            details=metadata.model_dump()
        )

    def _check_variant(self) -> ValidationResult:
        hint = self.config.db_type
        comment = self.metadata.comment_text
        fallback = EngineVariant.MYSQL if self.config.allow_variant_fallback else None

        if detect_variant(comment):
            source = "version_comment"
        elif detect_variant(hint):
            source = "db_type"
        else:
            source = "fallback"

        self.variant = resolve_variant(hint, comment, fallback=fallback)

        if source == "fallback":
            self.logger.warning(
                f"Database checks: could not determine SQL variant from '{comment}' "
                f"or DB_TYPE '{hint or ''}', assuming {self.variant.value}"
            )
        self.logger.info(f"Database checks: SQL variant {self.variant.value} (from {source})")
        return ValidationResult(
            name="variant",
            outcome=CheckOutcome.PASS,
            details={"variant": self.variant.value, "source": source}
        )

    def _check_version(self) -> ValidationResult:
        raw = self.metadata.version_string
        try:
            self.version = parse_version(raw)
        except VersionFormatError as e:
            if self.config.strict_version_parsing:
                raise
            self.logger.error(f"Database version check failed: {e}; gating against {ZERO_VERSION}")
            self.version = ZERO_VERSION

        minimum = minimum_version_for(self.variant)
        if not gate_version(self.version, minimum):
            raise VersionTooLowError(deficient_component(self.version, minimum), raw, str(minimum))

        return ValidationResult(
            name="version",
            outcome=CheckOutcome.PASS,
            details={"version": str(self.version), "minimum": str(minimum)}
        )

    def _check_charset(self) -> ValidationResult:
        charset = self.metadata.charset
        if not is_charset_allowed(charset):
            raise EncodingError(
                "charset", charset,
                f"character set not {'/'.join(DatabaseDefaults.ALLOWED_CHARSETS)}: {charset}"
            )
        return ValidationResult(name="charset", outcome=CheckOutcome.PASS, details={"charset": charset})

    def _check_collation(self) -> ValidationResult:
        collation = self.metadata.collation
        if not is_collation_allowed(collation):
            raise EncodingError(
                "collation", collation,
                f"collation sequence not {DatabaseDefaults.COLLATION_PREFIX}...: {collation}"
            )
        return ValidationResult(name="collation", outcome=CheckOutcome.PASS, details={"collation": collation})

    def _check_table_count(self) -> ValidationResult:
        count = self.repository.count_base_tables(self.schema_name)
        if count == 0:
            self.logger.info("Entering database set-up mode because the database is empty")
            return ValidationResult(
                name="table_count",
                outcome=CheckOutcome.SETUP,
                details={
                    "table_count": 0,
                    "message": f"database '{self.schema_name or ''}' is empty, entering set-up mode",
                }
            )
        return ValidationResult(name="table_count", outcome=CheckOutcome.PASS, details={"table_count": count})

    def _check_required_tables(self) -> ValidationResult:
        return verify_required_tables(self.repository, self.required_tables)
