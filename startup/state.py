# ============================================================================
# STARTUP STATE MODULE
# ============================================================================
# STATUS: Infrastructure - Startup check result types
# PURPOSE: Immutable verdict of the database startup check
# ============================================================================
"""
Startup State Module.

Holds the result types of the database startup check. The verdict is a
single immutable value returned by the check and handed to whatever needs
it (request loop, setup wizard, error page, diagnostics endpoint) instead
of process-wide mutable flags.

Exports:
    ValidationResult: Result of one check
    DatabaseCheckResult: Overall verdict (mode, issue, transient schema name)

Usage:
    from startup import run_startup_validation, OperatingMode

    result = run_startup_validation()
    if result.mode is OperatingMode.NORMAL:
        serve()
    elif result.mode is OperatingMode.SETUP:
        show_setup_wizard(result.schema_name)
    else:
        show_error_page(result.issue)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from core.errors import ErrorCode, create_error_response
from core.logic.transitions import can_mode_transition
from core.models import CheckOutcome, EngineVariant, OperatingMode, VersionTuple
from exceptions import ContractViolationError


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of a single startup check.

    Attributes:
        name: Identifier for this check (e.g., "version", "required_tables")
        outcome: PASS, FAIL or SETUP
        error_type: ErrorCode value if failed
        error_message: Human-readable error description
        details: Additional context (values seen, minimums, table names)
        timestamp: When this check was performed
    """
    name: str
    outcome: CheckOutcome
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=_utc_now)

    @property
    def passed(self) -> bool:
        return self.outcome is CheckOutcome.PASS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        result = {
            "name": self.name,
            "outcome": self.outcome.value,
            "timestamp": self.timestamp
        }
        if self.error_type:
            result["error_type"] = self.error_type
        if self.error_message:
            result["error_message"] = self.error_message
        if self.details:
            result["details"] = self.details
        return result


@dataclass(frozen=True)
class DatabaseCheckResult:
    """
    Verdict of the database startup check.

    Invariants (enforced on construction):
        - mode is a terminal mode (never UNCHECKED)
        - issue is set for SETUP and BAD_CONFIGURATION, empty for NORMAL
        - schema_name is exposed only in SETUP mode
        - checked is true only for a NORMAL verdict

    Attributes:
        mode: NORMAL, SETUP or BAD_CONFIGURATION
        issue: Message for the setup/error page
        schema_name: Database name, shown by the setup wizard only
        error_code: ErrorCode of the failing check (BAD_CONFIGURATION only)
        variant: Detected engine family, if the check got that far
        version: Parsed server version, if the check got that far
        checks: Results of the checks that ran, in order
        checked: Latched true after a full successful run
    """
    mode: OperatingMode
    issue: Optional[str] = None
    schema_name: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    variant: Optional[EngineVariant] = None
    version: Optional[VersionTuple] = None
    checks: Tuple[ValidationResult, ...] = ()
    checked: bool = False
    completed_at: str = field(default_factory=_utc_now)

    def __post_init__(self):
        if not can_mode_transition(OperatingMode.UNCHECKED, self.mode):
            raise ContractViolationError(f"Startup check cannot end in mode {self.mode}")
        if self.mode is OperatingMode.NORMAL:
            if self.issue or self.schema_name or not self.checked:
                raise ContractViolationError("NORMAL verdict must be checked and carry no issue or schema name")
        else:
            if not self.issue:
                raise ContractViolationError(f"{self.mode.value} verdict requires an issue message")
            if self.checked:
                raise ContractViolationError(f"{self.mode.value} verdict cannot be marked checked")
        if self.schema_name and self.mode is not OperatingMode.SETUP:
            raise ContractViolationError("schema_name is only exposed in SETUP mode")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def normal(cls, checks, variant=None, version=None) -> "DatabaseCheckResult":
        return cls(
            mode=OperatingMode.NORMAL,
            variant=variant,
            version=version,
            checks=tuple(checks),
            checked=True,
        )

    @classmethod
    def setup(cls, issue: str, schema_name: Optional[str], checks, variant=None, version=None) -> "DatabaseCheckResult":
        return cls(
            mode=OperatingMode.SETUP,
            issue=issue,
            schema_name=schema_name,
            variant=variant,
            version=version,
            checks=tuple(checks),
        )

    @classmethod
    def bad_configuration(
        cls,
        issue: str,
        error_code: ErrorCode,
        checks=(),
        variant=None,
        version=None
    ) -> "DatabaseCheckResult":
        return cls(
            mode=OperatingMode.BAD_CONFIGURATION,
            issue=issue,
            error_code=error_code,
            variant=variant,
            version=version,
            checks=tuple(checks),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_operational(self) -> bool:
        """True if the service may start serving requests."""
        return self.mode is OperatingMode.NORMAL

    def get_failed_checks(self) -> List[ValidationResult]:
        return [c for c in self.checks if c.outcome is CheckOutcome.FAIL]

    def get_passed_checks(self) -> List[ValidationResult]:
        return [c for c in self.checks if c.passed]

    def error_response(self) -> Optional[Dict[str, Any]]:
        """Standardized error dict for the error page, None unless BAD_CONFIGURATION."""
        if self.mode is not OperatingMode.BAD_CONFIGURATION:
            return None
        return create_error_response(
            self.error_code or ErrorCode.UNEXPECTED_ERROR,
            self.issue,
            mode=self.mode.value,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "mode": self.mode.value,
            "issue": self.issue,
            "schema_name": self.schema_name,
            "error_code": self.error_code.value if self.error_code else None,
            "variant": self.variant.value if self.variant else None,
            "version": str(self.version) if self.version else None,
            "checked": self.checked,
            "completed_at": self.completed_at,
            "checks": [c.to_dict() for c in self.checks],
        }

    def get_summary(self) -> Dict[str, Any]:
        """Brief summary suitable for a readiness response."""
        failed = self.get_failed_checks()
        return {
            "mode": self.mode.value,
            "operational": self.is_operational,
            "checks_run": len(self.checks),
            "checks_passed": len(self.get_passed_checks()),
            "failed_check_names": [f.name for f in failed],
            "issue": self.issue,
        }
