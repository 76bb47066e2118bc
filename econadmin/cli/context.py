"""Wiring shared by CLI commands."""

import logging

from rich.logging import RichHandler
from sqlalchemy.orm import Session

from econadmin.cli.display import console
from econadmin.config import get_settings
from econadmin.managers.admin_manager import EconomyAdminManager
from econadmin.managers.ledger_manager import LedgerManager


def configure_logging(level: str) -> None:
    """Send log records to the shared Rich console."""
    root = logging.getLogger("econadmin")
    root.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=console, show_path=False))


def build_admin_manager(db: Session) -> EconomyAdminManager:
    """Create an admin manager over the ledger with configured limits."""
    settings = get_settings()
    return EconomyAdminManager(
        LedgerManager(db),
        global_currency=settings.global_currency,
        limits=settings.limits,
        treasury_account_name=settings.treasury_account_name,
        new_player_gift_amount=settings.new_player_gift_amount,
        treasury_initial_balance=settings.treasury_initial_balance,
    )
