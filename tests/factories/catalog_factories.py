"""
Catalog factories: in-memory repository and model builders.

FakeCatalogRepository records every call so tests can assert on probe
order and on which checks touched the database.
"""

from typing import Iterable, List, Optional

from config import DatabaseConfig
from config.defaults import DatabaseDefaults
from core.models import ServerMetadata
from infrastructure.interface_repository import ICatalogRepository


def make_metadata(**overrides) -> ServerMetadata:
    """ServerMetadata for a healthy MySQL 8 server unless overridden."""
    fields = {
        "version_string": "8.0.36-0ubuntu0.22.04.1",
        "comment_text": "MySQL Community Server - GPL",
        "charset": "utf8mb4",
        "collation": "utf8mb4_unicode_ci",
    }
    fields.update(overrides)
    return ServerMetadata(**fields)


def make_config(**overrides) -> DatabaseConfig:
    """DatabaseConfig for schema 'documents' unless overridden."""
    fields = {
        "connection_string": "app:secret@tcp(localhost:3306)/documents?charset=utf8mb4",
    }
    fields.update(overrides)
    return DatabaseConfig(**fields)


class FakeCatalogRepository(ICatalogRepository):
    """
    In-memory ICatalogRepository.

    Args:
        metadata: Returned by fetch_server_metadata (or raise metadata_error)
        table_count: Returned by count_base_tables (or raise count_error)
        tables: Names whose probe succeeds (defaults to all required tables)
    """

    def __init__(
        self,
        metadata: Optional[ServerMetadata] = None,
        metadata_error: Optional[Exception] = None,
        table_count: int = 42,
        count_error: Optional[Exception] = None,
        tables: Optional[Iterable[str]] = None,
    ):
        self.metadata = metadata if metadata is not None else make_metadata()
        self.metadata_error = metadata_error
        self.table_count = table_count
        self.count_error = count_error
        self.tables = set(tables if tables is not None else DatabaseDefaults.REQUIRED_TABLES)

        self.calls: List[str] = []
        self.probed: List[str] = []
        self.counted_schemas: List[Optional[str]] = []
        self.closed = False

    def fetch_server_metadata(self) -> ServerMetadata:
        self.calls.append("fetch_server_metadata")
        if self.metadata_error is not None:
            raise self.metadata_error
        return self.metadata

    def count_base_tables(self, schema_name: Optional[str]) -> int:
        self.calls.append("count_base_tables")
        self.counted_schemas.append(schema_name)
        if self.count_error is not None:
            raise self.count_error
        return self.table_count

    def probe_table(self, table: str) -> bool:
        self.calls.append("probe_table")
        self.probed.append(table)
        return table in self.tables

    def close(self) -> None:
        self.closed = True
