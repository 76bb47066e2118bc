"""Core test fixtures for EconAdmin tests."""

from contextlib import contextmanager
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from econadmin.config import Settings
from econadmin.database.models.base import Base
from econadmin.managers.admin_manager import EconomyAdminManager
from econadmin.managers.ledger_manager import LedgerManager
from econadmin.schemas import EntityRef


@pytest.fixture(scope="session")
def engine():
    """Create SQLite in-memory engine for fast tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    # Enable foreign key constraints in SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Import models to ensure they're registered with Base
    from econadmin.database.models import economy  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture(scope="function")
def db_session(engine) -> Session:
    """Create a fresh database session for each test.

    Uses a transaction that rolls back after each test for isolation.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session_factory = sessionmaker(bind=connection)
    session = session_factory()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def ledger(db_session: Session) -> LedgerManager:
    """LedgerManager over the test session."""
    return LedgerManager(db_session)


@pytest.fixture
def admin(ledger: LedgerManager) -> EconomyAdminManager:
    """EconomyAdminManager with default limits and no global currency."""
    return EconomyAdminManager(ledger)


@pytest.fixture
def gold_candidates() -> list[EntityRef]:
    """Two currencies where one name contains the other."""
    return [
        EntityRef(id=1, name="Gold"),
        EntityRef(id=2, name="Gold Bar"),
    ]


@pytest.fixture
def currency_refs() -> list[EntityRef]:
    """A typical server's currency list, in host order."""
    return [
        EntityRef(id=1, name="Player Credit"),
        EntityRef(id=2, name="SuperCredit"),
        EntityRef(id=3, name="Creditable"),
        EntityRef(id=4, name="Gold Reserve"),
        EntityRef(id=5, name="Goldfinger"),
        EntityRef(id=6, name="Old Test Currency"),
        EntityRef(id=7, name=""),
        EntityRef(id=8, name=None),
    ]


# --- CLI fixtures ---


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary SQLite ledger seeded with a small economy."""
    db_path = tmp_path / "test_cli.db"
    engine = create_engine(f"sqlite:///{db_path}")

    from econadmin.database.models import economy  # noqa: F401

    Base.metadata.create_all(bind=engine)
    TestSessionLocal = sessionmaker(bind=engine)

    with TestSessionLocal() as db:
        ledger = LedgerManager(db)
        alice = ledger.create_account("Alice")
        bob = ledger.create_account("Bob")
        ledger.create_account("Player One")
        ledger.create_account("Player Two")
        credit = ledger.create_currency("Player Credit")
        super_credit = ledger.create_currency("SuperCredit")
        gold = ledger.create_currency("Gold")
        ledger.create_currency("Gold Bar")
        ledger.add_currency(alice, credit, 100.0)
        ledger.add_currency(bob, credit, 50.0)
        ledger.add_currency(bob, super_credit, 25.0)
        ledger.add_currency(alice, gold, 10.0)
        db.commit()

    @contextmanager
    def mock_get_db_session():
        """Mock get_db_session that uses the test database."""
        session = TestSessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    yield engine, mock_get_db_session

    engine.dispose()


@pytest.fixture
def cli_db(temp_db):
    """Patch every command module to use the temporary ledger."""
    engine, mock_get_db_session = temp_db
    settings = Settings(_env_file=None)

    with patch("econadmin.cli.commands.account.get_db_session", mock_get_db_session), patch(
        "econadmin.cli.commands.currency.get_db_session", mock_get_db_session
    ), patch("econadmin.cli.commands.gc.get_db_session", mock_get_db_session), patch(
        "econadmin.cli.context.get_settings", return_value=settings
    ):
        yield engine, settings


@pytest.fixture
def read_balance(temp_db):
    """Read a balance straight from the ledger by account and currency name."""
    engine, _ = temp_db

    def _read(account_name: str, currency_name: str) -> float:
        with sessionmaker(bind=engine)() as db:
            ledger = LedgerManager(db)
            account = next(a for a in ledger.list_accounts() if a.name == account_name)
            currency = next(c for c in ledger.list_currencies() if c.name == currency_name)
            return ledger.get_balance(account, currency)

    return _read
