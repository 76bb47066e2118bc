"""Tests for LedgerManager."""

import pytest
from sqlalchemy.orm import Session

from econadmin.managers.ledger_manager import LedgerManager
from tests.factories import create_account, create_currency, create_holding


class TestListings:
    """Tests for account and currency listings."""

    def test_list_accounts_in_id_order(self, db_session: Session, ledger: LedgerManager):
        """Accounts are listed by ascending ID."""
        first = create_account(db_session, name="Zed")
        second = create_account(db_session, name="Alice")

        assert ledger.list_accounts() == [first, second]

    def test_list_currencies_in_id_order(self, db_session: Session, ledger: LedgerManager):
        """Currencies are listed by ascending ID."""
        first = create_currency(db_session, name="Gold")
        second = create_currency(db_session, name="Credit")

        assert ledger.list_currencies() == [first, second]

    def test_empty_ledger(self, ledger: LedgerManager):
        """An empty ledger lists nothing."""
        assert ledger.list_accounts() == []
        assert ledger.list_currencies() == []


class TestBalances:
    """Tests for reading and changing balances."""

    def test_balance_defaults_to_zero(self, db_session: Session, ledger: LedgerManager):
        """An account that never held a currency has zero balance."""
        account = create_account(db_session)
        currency = create_currency(db_session)

        assert ledger.get_balance(account, currency) == 0.0
        assert ledger.get_holding(account, currency) is None

    def test_get_balance(self, db_session: Session, ledger: LedgerManager):
        """Existing holdings report their balance."""
        account = create_account(db_session)
        currency = create_currency(db_session)
        create_holding(db_session, account, currency, balance=250.5)

        assert ledger.get_balance(account, currency) == 250.5

    def test_add_currency_creates_holding(self, db_session: Session, ledger: LedgerManager):
        """Adding to an empty account creates the holding."""
        account = create_account(db_session)
        currency = create_currency(db_session)

        new_balance = ledger.add_currency(account, currency, 40.0)

        assert new_balance == 40.0
        assert ledger.get_holding(account, currency) is not None

    def test_add_negative_amount(self, db_session: Session, ledger: LedgerManager):
        """Negative amounts remove currency."""
        account = create_account(db_session)
        currency = create_currency(db_session)
        create_holding(db_session, account, currency, balance=100.0)

        assert ledger.add_currency(account, currency, -30.0) == pytest.approx(70.0)
        assert ledger.get_balance(account, currency) == pytest.approx(70.0)

    def test_get_holdings(self, db_session: Session, ledger: LedgerManager):
        """Holdings of one account exclude other accounts."""
        account = create_account(db_session)
        other = create_account(db_session)
        gold = create_currency(db_session, name="Gold")
        credit = create_currency(db_session, name="Credit")
        create_holding(db_session, account, gold, balance=1.0)
        create_holding(db_session, account, credit, balance=2.0)
        create_holding(db_session, other, gold, balance=3.0)

        holdings = ledger.get_holdings(account)

        assert [h.currency.name for h in holdings] == ["Gold", "Credit"]


class TestSeeding:
    """Tests for creating accounts and currencies."""

    def test_create_account(self, ledger: LedgerManager):
        """Created accounts get an ID."""
        account = ledger.create_account("Player One")

        assert account.id is not None
        assert account.name == "Player One"

    def test_duplicate_names_allowed(self, ledger: LedgerManager):
        """Names are not unique."""
        first = ledger.create_currency("Credit")
        second = ledger.create_currency("Credit")

        assert first.id != second.id
        assert [c.name for c in ledger.list_currencies()] == ["Credit", "Credit"]
