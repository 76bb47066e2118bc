"""Manager classes for ledger access and admin operations."""

from econadmin.managers.admin_manager import (
    AdjustmentResult,
    BalanceReport,
    CurrencyPurge,
    EconomyAdminManager,
    GlobalCurrencyStatus,
    HoldingLine,
    ListingResult,
    PatternPreview,
    PurgeReport,
    WipeResult,
)
from econadmin.managers.base import BaseManager
from econadmin.managers.ledger_manager import LedgerManager

__all__ = [
    "AdjustmentResult",
    "BalanceReport",
    "BaseManager",
    "CurrencyPurge",
    "EconomyAdminManager",
    "GlobalCurrencyStatus",
    "HoldingLine",
    "LedgerManager",
    "ListingResult",
    "PatternPreview",
    "PurgeReport",
    "WipeResult",
]
