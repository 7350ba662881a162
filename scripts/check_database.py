"""
Run the database startup check and print the verdict as JSON.

Exit codes:
    0  NORMAL
    1  BAD_CONFIGURATION
    2  SETUP (empty database)

Usage:
    DB_CONN='app:secret@tcp(localhost:3306)/documents' python scripts/check_database.py
    python scripts/check_database.py --conn 'mysql://app:secret@db:3306/documents' --db-type mariadb
"""
import argparse
import json
import logging
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.models import OperatingMode  # noqa: E402
from startup import run_startup_validation  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

EXIT_CODES = {
    OperatingMode.NORMAL: 0,
    OperatingMode.BAD_CONFIGURATION: 1,
    OperatingMode.SETUP: 2,
}


def main(argv=None) -> int:
    """Parse arguments, run the check, print the result."""
    parser = argparse.ArgumentParser(description="Check the database before starting the service")
    parser.add_argument("--conn", help="Connection string (overrides DB_CONN)")
    parser.add_argument("--db-type", help="Engine hint: mysql, percona or mariadb (overrides DB_TYPE)")
    parser.add_argument("--summary", action="store_true", help="Print the short summary only")
    args = parser.parse_args(argv)

    if args.conn:
        os.environ["DB_CONN"] = args.conn
    if args.db_type:
        os.environ["DB_TYPE"] = args.db_type

    result = run_startup_validation()
    payload = result.get_summary() if args.summary else result.to_dict()
    print(json.dumps(payload, indent=2))

    logger.info(f"Operating mode: {result.mode.value}")
    return EXIT_CODES[result.mode]


if __name__ == '__main__':
    sys.exit(main())
