"""
Core Components of the Database Startup Check.

Contains the pure building blocks of the check, separated from the
infrastructure that talks to the database.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Business logic separated from models
    errors.py: Error codes and classification

Subpackages are imported on first access so that core.errors stays
importable from exceptions.py without a cycle.
"""

_LAZY_SUBPACKAGES = ('models', 'logic', 'errors')


def __getattr__(name):
    """Lazy import subpackages to avoid circular dependencies."""
    if name in _LAZY_SUBPACKAGES:
        from importlib import import_module
        return import_module(f'.{name}', package='core')
    raise AttributeError(f"module 'core' has no attribute '{name}'")


__all__ = list(_LAZY_SUBPACKAGES)
