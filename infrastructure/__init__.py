"""
Infrastructure Package - Lazy Loading Implementation.

Repository classes are imported on first access so that importing the
package never reads environment variables or loads the database driver.

Exports:
    ICatalogRepository: Catalog access interface used by the startup check
    MySQLCatalogRepository: mysql-connector implementation
"""

_LAZY_IMPORTS = {
    'ICatalogRepository': '.interface_repository',
    'MySQLCatalogRepository': '.mysql_catalog',
}


def __getattr__(name):
    """Lazy import repository classes."""
    if name in _LAZY_IMPORTS:
        from importlib import import_module
        module = import_module(_LAZY_IMPORTS[name], package='infrastructure')
        return getattr(module, name)
    raise AttributeError(f"module 'infrastructure' has no attribute '{name}'")


__all__ = list(_LAZY_IMPORTS)
