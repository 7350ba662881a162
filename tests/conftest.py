"""
Root conftest.py: sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without a database server.
"""

import logging
import os
import sys

import pytest

# Add project root to sys.path so 'core', 'config', 'startup', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables so configuration loads.
    """
    defaults = {
        "DB_CONN": "app:secret@tcp(localhost:3306)/documents?charset=utf8mb4",
        "ENVIRONMENT": "test",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the config singleton around every test."""
    from config import reset_config
    reset_config()
    yield
    reset_config()


@pytest.fixture
def quiet_logger():
    """Plain stdlib logger to inject into the startup check."""
    return logging.getLogger("tests.startup_check")


@pytest.fixture
def db_config():
    from tests.factories.catalog_factories import make_config
    return make_config()


@pytest.fixture
def healthy_repository():
    from tests.factories.catalog_factories import FakeCatalogRepository
    return FakeCatalogRepository()
