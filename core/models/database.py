"""
Database Server Models.

Exports:
    ServerMetadata: Read-only snapshot of server metadata
    VersionTuple: major.minor.patch as integers
    ZERO_VERSION: All-zero version used when leniency is enabled
    MINIMUM_VERSION_POLICY: Minimum version per engine family
    minimum_version_for: Policy lookup
"""

from typing import Dict, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from .enums import EngineVariant


class ServerMetadata(BaseModel):
    """
    Server metadata fetched once per run.

    Maps to: SELECT VERSION(), @@version_comment,
    @@character_set_database, @@collation_database
    """
    model_config = ConfigDict(frozen=True)

    version_string: str = Field(..., description="Raw VERSION() output, e.g. '8.0.36-0ubuntu0.22.04.1'")
    comment_text: str = Field(default="", description="@@version_comment, e.g. 'MySQL Community Server - GPL'")
    charset: str = Field(..., description="@@character_set_database")
    collation: str = Field(..., description="@@collation_database")


class VersionTuple(NamedTuple):
    """Parsed server version."""
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


ZERO_VERSION = VersionTuple(0, 0, 0)


# JSON column type needs MySQL 5.7.10; MariaDB gained the equivalent at 10.3
MINIMUM_VERSION_POLICY: Dict[EngineVariant, VersionTuple] = {
    EngineVariant.MYSQL: VersionTuple(5, 7, 10),
    EngineVariant.PERCONA: VersionTuple(5, 7, 10),
    EngineVariant.MARIADB: VersionTuple(10, 3, 0),
}


def minimum_version_for(variant: EngineVariant) -> VersionTuple:
    """Return the minimum supported version for an engine family."""
    return MINIMUM_VERSION_POLICY[variant]
