"""Base manager class with common patterns."""

from sqlalchemy.orm import Session


class BaseManager:
    """Base class for managers backed by the ledger database.

    Provides common patterns:
    - Database session access
    - Flushing without committing (the caller owns the transaction)
    """

    def __init__(self, db: Session) -> None:
        """Initialize manager with a database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def _flush(self) -> None:
        """Push pending changes so generated IDs and balances are visible."""
        self.db.flush()
