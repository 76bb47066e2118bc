"""Database models package."""

from econadmin.database.models.base import Base, TimestampMixin
from econadmin.database.models.economy import Account, Currency, Holding

__all__ = [
    "Account",
    "Base",
    "Currency",
    "Holding",
    "TimestampMixin",
]
