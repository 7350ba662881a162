"""
Engine Variant Detection.

Exports:
    VARIANT_PRIORITY: Family names in match order
    detect_variant: Match one text against the family names
    resolve_variant: Comment text first, operator hint second
"""

from typing import Optional, Tuple

from exceptions import UnknownVariantError
from ..models.enums import EngineVariant

# "mysql" last: Percona and MariaDB comments can mention MySQL too
VARIANT_PRIORITY: Tuple[EngineVariant, ...] = (
    EngineVariant.MARIADB,
    EngineVariant.PERCONA,
    EngineVariant.MYSQL,
)


def detect_variant(text: Optional[str]) -> Optional[EngineVariant]:
    """Case-insensitive substring match of text against VARIANT_PRIORITY."""
    lowered = (text or "").lower()
    for variant in VARIANT_PRIORITY:
        if variant.value in lowered:
            return variant
    return None


def resolve_variant(
    hint: Optional[str],
    comment_text: Optional[str],
    fallback: Optional[EngineVariant] = None
) -> EngineVariant:
    """
    Determine the engine family.

    The server's @@version_comment wins over the operator's DB_TYPE hint.

    Args:
        hint: Operator-supplied engine type (may be empty)
        comment_text: @@version_comment reported by the server
        fallback: Family to assume when neither matches; None to fail

    Returns:
        EngineVariant

    Raises:
        UnknownVariantError: Nothing matched and no fallback given
    """
    variant = detect_variant(comment_text) or detect_variant(hint)
    if variant is not None:
        return variant

    if fallback is not None:
        return fallback

    raise UnknownVariantError(
        f"cannot determine database type from version comment '{comment_text}' "
        f"or DB_TYPE '{hint or ''}'; set DB_TYPE to one of "
        f"{', '.join(v.value for v in VARIANT_PRIORITY)}"
    )
