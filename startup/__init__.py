# ============================================================================
# STARTUP MODULE
# ============================================================================
# STATUS: Infrastructure - Startup validation orchestration
# PURPOSE: Decide the operating mode before any request is served
# ============================================================================
"""
Startup Validation Module.

Checks the backing database once at process start and returns the
operating mode:

    NORMAL             - serve requests
    SETUP              - database is empty, show the set-up wizard
    BAD_CONFIGURATION  - show the error page with the issue message

Usage:
    from startup import run_startup_validation

    result = run_startup_validation()
    print(result.mode, result.issue)

Design Philosophy:
    - SOFT VALIDATION: Return a verdict, don't crash
    - ORDERED CHECKS: First failing check wins, nothing is retried
    - DIAGNOSTIC FRIENDLY: Results serialise via to_dict()

Exports:
    run_startup_validation: Main entry point
    DatabaseStartupCheck: The database check itself
    verify_required_tables: Required table probe
    DatabaseCheckResult: Verdict
    ValidationResult: Result of one check
    OperatingMode: Verdict enum
"""

from core.models import OperatingMode

from .state import DatabaseCheckResult, ValidationResult
from .database_validator import DatabaseStartupCheck, verify_required_tables
from .orchestrator import run_startup_validation

__all__ = [
    'run_startup_validation',
    'DatabaseStartupCheck',
    'verify_required_tables',
    'DatabaseCheckResult',
    'ValidationResult',
    'OperatingMode',
]
