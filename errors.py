"""Error types for Roster.

Every error carries a human-readable message. Errors that originate in the
database driver also keep the driver's message as ``details``.
"""

from typing import List, Optional


class RosterError(Exception):
    """Base exception for all Roster errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigMissing(RosterError):
    """No database connection string is configured."""

    def __init__(self):
        super().__init__("Database connection configuration missing.")


class DatabaseConnectionError(RosterError):
    """The database connection could not be established."""

    def __init__(self, details: str):
        super().__init__("Failed to connect to database", details=details)


class TransactionError(RosterError):
    """A replace-all transaction failed and was rolled back."""

    def __init__(self, details: str):
        super().__init__(
            "Failed to save accounts due to database transaction error",
            details=details,
        )


class BadRequestShape(RosterError):
    """The request body is not a JSON array of accounts."""

    def __init__(self):
        super().__init__("Request body must be an array of accounts.")


class MethodNotAllowed(RosterError):
    """The HTTP method is not supported by the accounts endpoint."""

    def __init__(self, method: str):
        super().__init__("Method Not Allowed")
        self.method = method


class InvalidAccount(RosterError):
    """A submitted record is missing required fields.

    Attributes:
        missing: Names of the required fields that were absent or empty.
    """

    def __init__(self, missing: List[str]):
        super().__init__(f"Account is missing required fields: {', '.join(missing)}")
        self.missing = missing
