"""
Repository Abstract Base Classes.

The startup check depends on this interface only, so the database
driver can be swapped and tests can use an in-memory fake.

Exports:
    ICatalogRepository: Catalog access used by the startup check
"""

from abc import ABC, abstractmethod
from typing import Optional

from core.models import ServerMetadata


class ICatalogRepository(ABC):
    """
    Read-only access to server metadata and the schema catalog.

    Every method acquires its own cursor and releases it before returning.
    """

    @abstractmethod
    def fetch_server_metadata(self) -> ServerMetadata:
        """
        Read version, version comment, charset and collation.

        Raises:
            DatabaseConnectionError: Query failed or returned no row
        """
        pass

    @abstractmethod
    def count_base_tables(self, schema_name: Optional[str]) -> int:
        """
        Count physical tables in a schema (None = current database).

        Raises:
            SchemaCountError: Catalog query failed
        """
        pass

    @abstractmethod
    def probe_table(self, table: str) -> bool:
        """Return True if `SELECT 1 FROM table LIMIT 1` succeeds."""
        pass

    def close(self) -> None:
        """Release the underlying connection, if owned."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
