# ============================================================================
# STARTUP VALIDATION ORCHESTRATOR
# ============================================================================
# STATUS: Infrastructure - Startup validation coordination
# PURPOSE: Run validation phases in order and return the operating mode
# ============================================================================
"""
Startup Validation Orchestrator.

Runs the validation phases in order and returns one DatabaseCheckResult.

Validation Phases:
    1. Environment variables (regex validation, skipped if config injected)
    2. Catalog repository (opened from config, skipped if injected)
    3. Database startup check (metadata, version, encoding, schema)

Usage:
    from startup import run_startup_validation

    result = run_startup_validation()
    if result.is_operational:
        # Start the request loop
        pass
"""

import logging
from typing import Optional

from config import DatabaseConfig, get_config
from config.env_validation import validate_environment, log_validation_results
from core.errors import ErrorCode
from core.models import CheckOutcome, OperatingMode
from exceptions import ConfigurationError
from infrastructure.interface_repository import ICatalogRepository
from .database_validator import DatabaseStartupCheck
from .state import DatabaseCheckResult, ValidationResult

_logger = logging.getLogger("startup.orchestrator")


def run_startup_validation(
    config: Optional[DatabaseConfig] = None,
    repository: Optional[ICatalogRepository] = None,
    logger=None
) -> DatabaseCheckResult:
    """
    Run all startup validations and return the verdict.

    Never raises for configuration or database problems: those become a
    BAD_CONFIGURATION result so the host can show an error page.

    Args:
        config: DatabaseConfig (loaded from environment if None)
        repository: Catalog repository (MySQL repository from config if None)
        logger: Logger for the database check (component logger if None)

    Returns:
        DatabaseCheckResult
    """
    _logger.info("=" * 70)
    _logger.info("STARTUP VALIDATION STARTING")
    _logger.info("=" * 70)

    if config is None:
        _logger.info("Phase 1: Validating environment variables...")
        result = _load_config()
        if isinstance(result, DatabaseCheckResult):
            _log_final_status(result)
            return result
        config = result

    owns_repository = repository is None
    if owns_repository:
        _logger.info("Phase 2: Opening catalog repository...")
        from infrastructure.mysql_catalog import MySQLCatalogRepository
        repository = MySQLCatalogRepository(config)

    _logger.info("Phase 3: Running database startup check...")
    try:
        result = DatabaseStartupCheck(repository, config, logger=logger).run()
    finally:
        if owns_repository:
            repository.close()

    _log_final_status(result)
    return result


def _load_config():
    """Validate the environment and load DatabaseConfig, or return a failed verdict."""
    errors = validate_environment(include_warnings=False)
    if errors:
        log_validation_results(_logger)
        error_vars = [e.var_name for e in errors]
        issue = f"Invalid environment variables: {', '.join(error_vars)}"
        return DatabaseCheckResult.bad_configuration(
            issue=issue,
            error_code=ErrorCode.CONFIG_ERROR,
            checks=[ValidationResult(
                name="env_vars",
                outcome=CheckOutcome.FAIL,
                error_type=ErrorCode.CONFIG_ERROR.value,
                error_message=issue,
                details={"errors": [e.to_dict() for e in errors]},
            )],
        )

    try:
        return get_config().database
    except (ConfigurationError, ValueError) as e:
        _logger.error(f"Configuration failed to load: {e}")
        issue = f"Configuration failed to load: {e}"
        return DatabaseCheckResult.bad_configuration(
            issue=issue,
            error_code=ErrorCode.CONFIG_ERROR,
            checks=[ValidationResult(
                name="env_vars",
                outcome=CheckOutcome.FAIL,
                error_type=ErrorCode.CONFIG_ERROR.value,
                error_message=issue,
            )],
        )


def _log_final_status(result: DatabaseCheckResult) -> None:
    _logger.info("=" * 70)
    if result.is_operational:
        _logger.info("STARTUP VALIDATION COMPLETE - All checks PASSED")
    elif result.mode is OperatingMode.SETUP:
        _logger.warning(f"STARTUP VALIDATION COMPLETE - SET-UP MODE: {result.issue}")
    else:
        _logger.warning(f"STARTUP VALIDATION COMPLETE - BAD CONFIGURATION: {result.issue}")
        _logger.warning(f"Failed: {[f.name for f in result.get_failed_checks()]}")
    _logger.info("=" * 70)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ['run_startup_validation']
