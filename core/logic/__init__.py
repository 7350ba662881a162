"""
Core Business Logic Package.

Pure functions behind the database startup check. No I/O.

Exports:
    Versions: parse_version, gate_version, deficient_component
    Variants: resolve_variant, detect_variant
    Encoding: is_charset_allowed, is_collation_allowed, gate_encoding
    Transitions: can_mode_transition, is_mode_terminal, get_mode_terminal_states
"""

from .versions import (
    parse_version,
    gate_version,
    deficient_component
)

from .variants import (
    resolve_variant,
    detect_variant,
    VARIANT_PRIORITY
)

from .encoding import (
    is_charset_allowed,
    is_collation_allowed,
    gate_encoding
)

from .transitions import (
    can_mode_transition,
    is_mode_terminal,
    get_mode_terminal_states
)

__all__ = [
    'parse_version',
    'gate_version',
    'deficient_component',
    'resolve_variant',
    'detect_variant',
    'VARIANT_PRIORITY',
    'is_charset_allowed',
    'is_collation_allowed',
    'gate_encoding',
    'can_mode_transition',
    'is_mode_terminal',
    'get_mode_terminal_states',
]
