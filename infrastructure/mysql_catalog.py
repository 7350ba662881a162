"""
MySQL Catalog Repository.

Reads server metadata and the information_schema catalog with
mysql-connector-python. Works for MySQL, Percona Server and MariaDB.

Exports:
    MySQLCatalogRepository: ICatalogRepository implementation
"""

import re
from contextlib import contextmanager
from typing import Any, Optional

import mysql.connector
from mysql.connector import Error as MySQLError

from config import DatabaseConfig, get_config
from core.models import ServerMetadata
from exceptions import (
    ConfigurationError,
    ContractViolationError,
    DatabaseConnectionError,
    SchemaCountError,
)
from util_logger import LoggerFactory, ComponentType
from .interface_repository import ICatalogRepository


METADATA_QUERY = (
    "SELECT VERSION() AS version, @@version_comment AS comment, "
    "@@character_set_database AS charset, @@collation_database AS collation"
)

# COALESCE: a connection string without '/dbname' falls back to the session database
BASE_TABLE_COUNT_QUERY = (
    "SELECT COUNT(*) FROM information_schema.tables "
    "WHERE table_schema = COALESCE(%s, DATABASE()) AND table_type = 'BASE TABLE'"
)

_IDENTIFIER = re.compile(r"[A-Za-z0-9_$]+")


def _as_text(value: Any) -> str:
    """Connector may hand back bytes for session variables."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


class MySQLCatalogRepository(ICatalogRepository):
    """
    Catalog repository over one mysql-connector connection.

    Either wraps an injected connection (the caller keeps ownership) or
    opens its own from DatabaseConfig on first use and closes it in close().
    """

    def __init__(self, config: Optional[DatabaseConfig] = None, connection=None):
        self.config = config if config is not None else get_config().database
        self._connection = connection
        self._owns_connection = connection is None
        self.logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "MySQLCatalogRepository")

    def connect(self):
        """Return the open connection, connecting if needed."""
        if self._connection is None:
            try:
                params = self.config.connection_params
            except ConfigurationError as e:
                raise DatabaseConnectionError(f"invalid connection string: {e}") from e
            self.logger.debug(
                f"Connecting to {params.get('host') or params.get('unix_socket')}"
                f" database '{params.get('database', '')}'"
            )
            try:
                self._connection = mysql.connector.connect(**params)
            except MySQLError as e:
                self.logger.error(f"Database connection failed: {e}")
                raise DatabaseConnectionError(f"can't connect to database: {e}") from e
        return self._connection

    @contextmanager
    def _get_cursor(self):
        """Cursor that is closed on every exit path."""
        cursor = self.connect().cursor(buffered=True)
        try:
            yield cursor
        finally:
            cursor.close()

    def fetch_server_metadata(self) -> ServerMetadata:
        try:
            with self._get_cursor() as cursor:
                cursor.execute(METADATA_QUERY)
                row = cursor.fetchone()
        except MySQLError as e:
            raise DatabaseConnectionError(f"can't get database configuration: {e}") from e

        if row is None:
            raise DatabaseConnectionError("no database configuration returned")

        try:
            version, comment, charset, collation = row
        except (TypeError, ValueError) as e:
            raise DatabaseConnectionError(f"database configuration row unreadable: {e}") from e

        return ServerMetadata(
            version_string=_as_text(version),
            comment_text=_as_text(comment),
            charset=_as_text(charset),
            collation=_as_text(collation),
        )

    def count_base_tables(self, schema_name: Optional[str]) -> int:
        self.logger.debug(f"Counting base tables in schema '{schema_name or '<current>'}'")
        try:
            with self._get_cursor() as cursor:
                cursor.execute(BASE_TABLE_COUNT_QUERY, (schema_name,))
                row = cursor.fetchone()
        except MySQLError as e:
            raise SchemaCountError(f"can't get number of tables: {e}") from e

        if row is None or row[0] is None:
            raise SchemaCountError("can't get number of tables: no row returned")
        return int(row[0])

    def probe_table(self, table: str) -> bool:
        if not _IDENTIFIER.fullmatch(table or ""):
            raise ContractViolationError(f"Not a plain table identifier: {table!r}")

        query = f"SELECT 1 FROM `{table}` LIMIT 1"
        try:
            with self._get_cursor() as cursor:
                cursor.execute(query)
                cursor.fetchall()
        except MySQLError as e:
            self.logger.debug(f"Probe failed: {query} ({e})")
            return False
        return True

    def close(self) -> None:
        if self._owns_connection and self._connection is not None:
            try:
                self._connection.close()
            except MySQLError as e:
                self.logger.warning(f"Error closing database connection: {e}")
            finally:
                self._connection = None
