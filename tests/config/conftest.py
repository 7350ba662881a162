"""
Config test fixtures: clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "DB_CONN", "DB_TYPE", "DB_CONNECTION_TIMEOUT",
        "DB_STRICT_VERSION", "DB_VARIANT_FALLBACK",
        "LOG_LEVEL", "ENVIRONMENT",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
