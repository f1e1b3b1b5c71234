"""
Database session exceptions.
"""


class DatabaseNotInitialized(Exception):
    """Raised when a session is requested before Database.init()."""


class DatabaseTransactionError(Exception):
    """Raised when committing or rolling back a session fails."""
