"""
Server Version Parsing and Gating.

Exports:
    parse_version: "a.b.c[-suffix]" -> VersionTuple
    deficient_component: First component below the minimum (1-indexed)
    gate_version: True if the version meets the minimum
"""

from typing import Optional

from exceptions import VersionFormatError
from ..models.database import VersionTuple


def parse_version(version_string: str) -> VersionTuple:
    """
    Parse a server version string into major, minor, patch.

    Engines append build metadata after a hyphen ("8.0.36-0ubuntu0.22.04.1",
    "10.6.16-MariaDB-log"), so the string is cut at the first hyphen.
    Components past the third are ignored.

    Args:
        version_string: Raw VERSION() output

    Returns:
        VersionTuple

    Raises:
        VersionFormatError: Fewer than three components, or one that is not
            made of ASCII digits
    """
    head = (version_string or "").strip().split("-", 1)[0]
    parts = head.split(".")

    if len(parts) < 3:
        raise VersionFormatError(
            f"version '{version_string}' not of the form a.b.c",
            version_string=version_string,
        )

    numbers = []
    for part in parts[:3]:
        if not (part.isascii() and part.isdigit()):
            raise VersionFormatError(
                f"version '{version_string}' has non-numeric element '{part}'",
                version_string=version_string,
            )
        numbers.append(int(part))

    return VersionTuple(*numbers)


def deficient_component(actual: VersionTuple, minimum: VersionTuple) -> Optional[int]:
    """
    Find the first component of actual that is below minimum.

    A higher major release is compatible without looking at minor/patch
    (8.x.x > 5.x.x). Otherwise each component is compared on its own, in
    order, so 5.8.0 against 5.7.10 fails on the patch element.

    Returns:
        1-indexed component position, or None if the version is sufficient
    """
    if actual[0] > minimum[0]:
        return None

    for position, (have, need) in enumerate(zip(actual, minimum), start=1):
        if have < need:
            return position
    return None


def gate_version(actual: VersionTuple, minimum: VersionTuple) -> bool:
    """Check actual against minimum using the rule of deficient_component."""
    return deficient_component(actual, minimum) is None
