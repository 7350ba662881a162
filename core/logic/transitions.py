"""
Operating Mode Transition Logic.

The startup check moves the mode out of UNCHECKED exactly once.

Exports:
    can_mode_transition: Check if a mode transition is valid
    get_mode_terminal_states: Terminal modes
    is_mode_terminal: Check if a mode is terminal
"""

from typing import List

from ..models.enums import OperatingMode


def can_mode_transition(current: OperatingMode, target: OperatingMode) -> bool:
    """
    Check if the operating mode can move from current to target.

    Args:
        current: Current mode
        target: Requested mode

    Returns:
        True if transition is valid, False otherwise
    """
    transitions = {
        OperatingMode.UNCHECKED: [
            OperatingMode.NORMAL,
            OperatingMode.SETUP,
            OperatingMode.BAD_CONFIGURATION
        ],
        OperatingMode.NORMAL: [],  # Terminal state
        OperatingMode.SETUP: [],  # Terminal state
        OperatingMode.BAD_CONFIGURATION: []  # Terminal state
    }

    return target in transitions.get(current, [])


def get_mode_terminal_states() -> List[OperatingMode]:
    """Modes the startup check can end in."""
    return [OperatingMode.NORMAL, OperatingMode.SETUP, OperatingMode.BAD_CONFIGURATION]


def is_mode_terminal(mode: OperatingMode) -> bool:
    """Check if a mode is a final verdict."""
    return mode in get_mode_terminal_states()
