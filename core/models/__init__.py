"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package.

Exports:
    EngineVariant, OperatingMode, CheckOutcome: Enums
    ServerMetadata: Server metadata snapshot
    VersionTuple: Parsed major.minor.patch
    MINIMUM_VERSION_POLICY, minimum_version_for: Per-family version floor
"""

from .enums import (
    EngineVariant,
    OperatingMode,
    CheckOutcome
)

from .database import (
    ServerMetadata,
    VersionTuple,
    ZERO_VERSION,
    MINIMUM_VERSION_POLICY,
    minimum_version_for
)

__all__ = [
    'EngineVariant',
    'OperatingMode',
    'CheckOutcome',
    'ServerMetadata',
    'VersionTuple',
    'ZERO_VERSION',
    'MINIMUM_VERSION_POLICY',
    'minimum_version_for',
]
