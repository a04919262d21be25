"""Database manager for SQLite connections and schema bootstrap."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from config import Config, get_schema_path
from errors import ConfigMissing, DatabaseConnectionError
from logger import get_logger

logger = get_logger()


class DatabaseManager:
    """Manages database connections.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the database manager.

        Args:
            config: Config object containing the database connection string.
        """
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection with automatic cleanup.

        The connection string is either a filesystem path or a ``file:`` URI.
        The connection is closed exactly once when the block exits, whether
        it returns normally or raises.

        Yields:
            sqlite3.Connection: Database connection.

        Raises:
            ConfigMissing: If no connection string is configured.
            DatabaseConnectionError: If the connection cannot be opened.
        """
        database_url = self.config.database_url
        if not database_url:
            logger.error("No database connection string configured. Cannot connect to database.")
            raise ConfigMissing()

        is_uri = database_url.startswith("file:")
        try:
            if not is_uri and database_url != ":memory:":
                Path(database_url).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(database_url, uri=is_uri)
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Database connection error: {e}")
            raise DatabaseConnectionError(str(e)) from e

        try:
            yield conn
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create the accounts table if it does not exist yet."""
        with open(self.get_schema_path(), "r") as f:
            sql = f.read()

        with self.connect() as conn:
            conn.executescript(sql)
            conn.commit()

    def get_schema_path(self) -> Path:
        """Get the schema file path.

        Returns:
            Path: Path to the accounts table schema.
        """
        return get_schema_path()
