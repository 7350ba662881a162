"""
Unit test fixtures: factory-built models.
"""

import pytest

from tests.factories.catalog_factories import make_metadata


@pytest.fixture
def mysql_metadata():
    """Healthy MySQL 8 server metadata."""
    return make_metadata()


@pytest.fixture
def mariadb_metadata():
    """Healthy MariaDB 10.6 server metadata."""
    return make_metadata(
        version_string="10.6.16-MariaDB-1:10.6.16+maria~ubu2204-log",
        comment_text="mariadb.org binary distribution",
    )
