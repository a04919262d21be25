"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from tests.helpers import TrackingDatabaseManager


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "roster",
        database_url=str(tmp_path / "roster" / "db" / "test.db"),
        api_prefix="/api/accounts",
        host="127.0.0.1",
        port=8000,
        log_level="DEBUG",
        log_dir=tmp_path / "roster" / "logs",
    )


@pytest.fixture
def db_manager_with_schema(test_config):
    """Create a DatabaseManager with the accounts table already created.

    Each connect() opens a fresh connection to the same database file, the
    way separate requests do, and the manager counts opens and closes.

    Args:
        test_config: Test configuration fixture.

    Returns:
        TrackingDatabaseManager: Database manager with schema ready.
    """
    db_manager = TrackingDatabaseManager(test_config)
    db_manager.initialize()
    db_manager.reset_counts()
    return db_manager


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    Args:
        test_config: Test configuration fixture.
        db_manager_with_schema: Database manager with schema set up.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)
