"""Tests for global currency CLI commands."""

import pytest
from sqlalchemy.orm import sessionmaker
from typer.testing import CliRunner

from econadmin.cli.main import app
from econadmin.managers.ledger_manager import LedgerManager


runner = CliRunner()


@pytest.fixture
def gc_settings(cli_db):
    """Settings with Player Credit as the global currency."""
    _, settings = cli_db
    settings.global_currency = "Player Credit"
    return settings


@pytest.fixture
def treasury(cli_db):
    """Create the default treasury account in the CLI ledger."""
    engine, _ = cli_db
    with sessionmaker(bind=engine)() as db:
        LedgerManager(db).create_account("Player Credit - Treasury")
        db.commit()
    return "Player Credit - Treasury"


class TestGcStatus:
    """Tests for 'econadmin gc status'."""

    def test_not_configured(self, cli_db):
        """Should fail when no global currency is configured."""
        result = runner.invoke(app, ["gc", "status"])

        assert result.exit_code == 1
        assert "No global currency configured" in result.output

    def test_status_without_treasury(self, gc_settings):
        """Should report a missing treasury and a disabled gift."""
        result = runner.invoke(app, ["gc", "status"])

        assert result.exit_code == 0
        assert "Global Currency Status" in result.output
        assert "Player Credit" in result.output
        assert "Not created yet" in result.output
        assert "Disabled" in result.output

    def test_status_with_treasury(self, gc_settings, treasury):
        """Should show the treasury balance and the gift amount."""
        gc_settings.new_player_gift_amount = 2500

        result = runner.invoke(app, ["gc", "status"])

        assert result.exit_code == 0
        assert "Balance: 0.00" in result.output
        assert "2,500" in result.output


class TestGcGift:
    """Tests for 'econadmin gc gift'."""

    def test_gift_amount(self, gc_settings, read_balance):
        """Should add the given amount of global currency."""
        result = runner.invoke(app, ["gc", "gift", "Bob", "25"])

        assert result.exit_code == 0
        assert "Gifted 25 Player Credit to 'Bob'" in result.output
        assert read_balance("Bob", "Player Credit") == 75.0

    def test_gift_default_amount(self, gc_settings, read_balance):
        """Should fall back to the configured gift."""
        gc_settings.new_player_gift_amount = 1000

        result = runner.invoke(app, ["gc", "gift", "Alice"])

        assert result.exit_code == 0
        assert "Gifted 1,000 Player Credit" in result.output
        assert read_balance("Alice", "Player Credit") == 1100.0

    def test_gift_without_default(self, gc_settings, read_balance):
        """Should refuse when there is no amount and no default."""
        result = runner.invoke(app, ["gc", "gift", "Alice"])

        assert result.exit_code == 1
        assert "No amount given" in result.output
        assert read_balance("Alice", "Player Credit") == 100.0

    def test_gift_ambiguous_account(self, gc_settings):
        """Should list candidates for an ambiguous account."""
        result = runner.invoke(app, ["gc", "gift", "player", "10"])

        assert result.exit_code == 1
        assert "matches 2 accounts" in result.output

    def test_gift_not_configured(self, cli_db):
        result = runner.invoke(app, ["gc", "gift", "Alice", "10"])

        assert result.exit_code == 1
        assert "Global currency is not configured." in result.output


class TestGcMint:
    """Tests for 'econadmin gc mint'."""

    def test_mint(self, gc_settings, treasury, read_balance):
        """Should add currency to the treasury."""
        result = runner.invoke(app, ["gc", "mint", "5000"])

        assert result.exit_code == 0
        assert "Minted 5,000 Player Credit" in result.output
        assert "Treasury balance: 0.00 → 5000.00" in result.output
        assert read_balance(treasury, "Player Credit") == 5000.0

    def test_mint_configured_treasury(self, gc_settings, read_balance):
        """Should use the configured treasury account name."""
        gc_settings.treasury_account_name = "Bob"

        result = runner.invoke(app, ["gc", "mint", "10"])

        assert result.exit_code == 0
        assert read_balance("Bob", "Player Credit") == 60.0

    def test_mint_missing_treasury(self, gc_settings):
        result = runner.invoke(app, ["gc", "mint", "10"])

        assert result.exit_code == 1
        assert "Treasury 'Player Credit - Treasury' not found." in result.output

    def test_mint_zero(self, gc_settings, treasury):
        result = runner.invoke(app, ["gc", "mint", "0"])

        assert result.exit_code == 1
        assert "greater than 0" in result.output
