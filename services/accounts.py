"""Account service for database operations."""

import sqlite3
from dataclasses import dataclass, field
from typing import Any, Iterable, List
from errors import InvalidAccount, TransactionError
from logger import get_logger
from models.account import Account

logger = get_logger()


@dataclass
class SkippedRecord:
    """A submitted record left out of a replace because it failed validation."""

    position: int
    record: Any
    missing: List[str]


@dataclass
class ReplaceResult:
    """Outcome of a committed replace-all."""

    accepted: int
    skipped: List[SkippedRecord] = field(default_factory=list)


class AccountService:
    """Service for reading and replacing the full account list.

    Every operation runs on a connection supplied by the caller, so a request
    can open one connection and use it for the whole exchange.
    """

    def __init__(self, db_manager):
        """Initialize the account service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self, conn: sqlite3.Connection) -> List[Account]:
        """Get all accounts from the database.

        Args:
            conn: Open database connection.

        Returns:
            List of Account objects ordered by name using the database's
            default text collation. Empty when there are no accounts.
        """
        cursor = conn.execute(
            "SELECT id, name, type, labelText FROM accounts ORDER BY name ASC"
        )
        rows = cursor.fetchall()

        return [
            Account(id=row[0], name=row[1], type=row[2], label_text=row[3])
            for row in rows
        ]

    def replace_all(
        self, conn: sqlite3.Connection, candidates: Iterable[Any]
    ) -> ReplaceResult:
        """Replace every stored account with the valid subset of candidates.

        The delete and all inserts run in one transaction. Candidates missing
        ``id``, ``name`` or ``type`` are skipped and logged; they do not abort
        the transaction. Duplicate ids are not filtered out, so the primary
        key rejects them and the whole replace is rolled back.

        Args:
            conn: Open database connection with no transaction in progress.
            candidates: Raw records in submission order.

        Returns:
            ReplaceResult with the number of inserted accounts and the
            skipped records.

        Raises:
            TransactionError: If the delete or an insert fails. The stored
                accounts are left exactly as they were before the call.
        """
        result = ReplaceResult(accepted=0)

        try:
            conn.execute("BEGIN")
            conn.execute("DELETE FROM accounts")

            for position, candidate in enumerate(candidates):
                try:
                    account = Account.from_payload(candidate)
                except InvalidAccount as e:
                    logger.warning(
                        f"Skipping invalid account at position {position} "
                        f"(missing {', '.join(e.missing)}): {candidate!r}"
                    )
                    result.skipped.append(
                        SkippedRecord(position=position, record=candidate, missing=e.missing)
                    )
                    continue

                conn.execute(
                    "INSERT INTO accounts (id, name, type, labelText) VALUES (?, ?, ?, ?)",
                    (account.id, account.name, account.type, account.label_text),
                )
                result.accepted += 1

            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            # OverflowError: an integer id too wide for SQLite INTEGER
            conn.rollback()
            logger.error(f"Transaction failed while replacing accounts: {e}")
            raise TransactionError(str(e)) from e

        logger.info(
            f"Replaced accounts: {result.accepted} saved, {len(result.skipped)} skipped"
        )
        return result
