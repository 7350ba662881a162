"""
Character Set and Collation Rules.

Exports:
    is_charset_allowed, is_collation_allowed, gate_encoding
"""

from typing import Iterable, Optional

from config.defaults import DatabaseDefaults


def is_charset_allowed(charset: str, allowed: Optional[Iterable[str]] = None) -> bool:
    """True if charset is one of the Unicode character sets."""
    if allowed is None:
        allowed = DatabaseDefaults.ALLOWED_CHARSETS
    return charset in tuple(allowed)


def is_collation_allowed(collation: str, prefix: str = DatabaseDefaults.COLLATION_PREFIX) -> bool:
    """True if collation belongs to a Unicode character set."""
    return (collation or "").startswith(prefix)


def gate_encoding(charset: str, collation: str) -> bool:
    """
    Both the character set and the collation must be Unicode.

    Convenience wrapper over is_charset_allowed and is_collation_allowed;
    the startup check calls those separately so each failure names its
    own offending value.
    """
    return is_charset_allowed(charset) and is_collation_allowed(collation)
