"""Helper utilities for tests."""

from contextlib import contextmanager
from typing import List, Tuple

from db.manager import DatabaseManager


class TrackingDatabaseManager(DatabaseManager):
    """DatabaseManager that counts how many connections were opened and closed."""

    def __init__(self, config):
        super().__init__(config)
        self.reset_counts()

    def reset_counts(self) -> None:
        self.opened = 0
        self.closed = 0

    @contextmanager
    def connect(self):
        with super().connect() as conn:
            self.opened += 1
            try:
                yield conn
            finally:
                self.closed += 1


def seed_accounts(db_manager: DatabaseManager, rows: List[Tuple]) -> None:
    """Insert (id, name, type, labelText) rows directly, bypassing the service."""
    with DatabaseManager.connect(db_manager) as conn:
        conn.executemany(
            "INSERT INTO accounts (id, name, type, labelText) VALUES (?, ?, ?, ?)",
            rows,
        )
        conn.commit()


def read_rows(db_manager: DatabaseManager) -> List[Tuple]:
    """Read every stored row ordered by id, bypassing the service."""
    with DatabaseManager.connect(db_manager) as conn:
        cursor = conn.execute(
            "SELECT id, name, type, labelText FROM accounts ORDER BY id"
        )
        return cursor.fetchall()


def add_failing_trigger(db_manager: DatabaseManager, name: str) -> None:
    """Make any insert of an account with the given name fail inside the database."""
    with DatabaseManager.connect(db_manager) as conn:
        conn.execute(
            f"""
            CREATE TRIGGER fail_on_{name} BEFORE INSERT ON accounts
            WHEN NEW.name = '{name}'
            BEGIN
                SELECT RAISE(ABORT, 'forced failure');
            END
            """
        )
        conn.commit()
