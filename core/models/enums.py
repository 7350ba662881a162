"""
Pure Enumeration Types for the Database Startup Check.

No business logic - pure type definitions only.

Exports:
    EngineVariant: MySQL-family engine classification
    OperatingMode: Verdict of the startup check
    CheckOutcome: Tagged outcome of a single check
"""

from enum import Enum


class EngineVariant(str, Enum):
    """
    Engine families of the MySQL line.

    MySQL and Percona share the same version scheme (e.g. 5.7.10).
    MariaDB forked its numbering at 10.x.
    """

    MYSQL = "mysql"
    PERCONA = "percona"
    MARIADB = "mariadb"


class OperatingMode(str, Enum):
    """
    Operating mode of the service, decided once at startup.

    State transitions:
    - UNCHECKED -> NORMAL (all checks passed)
    - UNCHECKED -> SETUP (empty database, first run)
    - UNCHECKED -> BAD_CONFIGURATION (any check failed)

    NORMAL, SETUP and BAD_CONFIGURATION are terminal.
    """

    UNCHECKED = "unchecked"
    NORMAL = "normal"
    SETUP = "setup"
    BAD_CONFIGURATION = "bad_configuration"


class CheckOutcome(str, Enum):
    """
    Outcome of a single startup check.

    PASS continues to the next check; FAIL and SETUP stop the run.
    """

    PASS = "pass"
    FAIL = "fail"
    SETUP = "setup"
