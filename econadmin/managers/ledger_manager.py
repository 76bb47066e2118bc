"""LedgerManager: the host economy backed by the ledger database."""

import logging

from econadmin.database.models.economy import Account, Currency, Holding
from econadmin.managers.base import BaseManager

logger = logging.getLogger(__name__)


class LedgerManager(BaseManager):
    """Implements EconomyHost over SQLAlchemy.

    Handles:
    - Account and currency listings in ID order
    - Balance lookups and adjustments
    - Creating accounts and currencies for seeding a ledger
    """

    # --- Listings ---

    def list_accounts(self) -> list[Account]:
        """Get all accounts in ID order."""
        return self.db.query(Account).order_by(Account.id).all()

    def list_currencies(self) -> list[Currency]:
        """Get all currencies in ID order."""
        return self.db.query(Currency).order_by(Currency.id).all()

    # --- Balances ---

    def get_holding(self, account: Account, currency: Currency) -> Holding | None:
        """Get the holding row for an account/currency pair.

        Args:
            account: The account.
            currency: The currency.

        Returns:
            Holding if the account has ever held the currency, None otherwise.
        """
        return (
            self.db.query(Holding)
            .filter(
                Holding.account_id == account.id,
                Holding.currency_id == currency.id,
            )
            .first()
        )

    def get_balance(self, account: Account, currency: Currency) -> float:
        """Get the balance of a currency in an account."""
        holding = self.get_holding(account, currency)
        return holding.balance if holding else 0.0

    def add_currency(self, account: Account, currency: Currency, amount: float) -> float:
        """Add currency to an account. Negative amounts remove.

        Args:
            account: The account to credit or debit.
            currency: The currency to change.
            amount: Amount to add (negative to remove).

        Returns:
            The new balance.
        """
        holding = self.get_holding(account, currency)
        if holding is None:
            holding = Holding(account_id=account.id, currency_id=currency.id, balance=0.0)
            self.db.add(holding)

        holding.balance += amount
        self._flush()

        logger.debug(
            "Ledger %s %+.2f %s -> %.2f",
            account.name,
            amount,
            currency.name,
            holding.balance,
        )
        return holding.balance

    def get_holdings(self, account: Account) -> list[Holding]:
        """Get every holding of an account."""
        return (
            self.db.query(Holding)
            .filter(Holding.account_id == account.id)
            .order_by(Holding.id)
            .all()
        )

    # --- Seeding ---

    def create_account(self, name: str | None) -> Account:
        """Create an account. Names need not be unique."""
        account = Account(name=name)
        self.db.add(account)
        self._flush()
        return account

    def create_currency(self, name: str | None) -> Currency:
        """Create a currency. Names need not be unique."""
        currency = Currency(name=name)
        self.db.add(currency)
        self._flush()
        return currency
