"""Ledger models for bank accounts, currencies, and holdings.

These tables mirror the host server's economy so the admin tools can
run against it directly. Names are display names chosen by players or
the host; they are not unique and can change at any time.
"""

from sqlalchemy import Float, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from econadmin.database.models.base import Base, TimestampMixin


class Currency(Base, TimestampMixin):
    """A currency minted on the host server."""

    __tablename__ = "currencies"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        index=True,
        comment="Display name, e.g. 'Player Credit'",
    )

    holdings: Mapped[list["Holding"]] = relationship(
        back_populates="currency",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Currency {self.id} {self.name!r}>"


class Account(Base, TimestampMixin):
    """A bank account holding balances in any number of currencies."""

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        index=True,
        comment="Display name, usually the owning player or government",
    )

    holdings: Mapped[list["Holding"]] = relationship(
        back_populates="account",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Account {self.id} {self.name!r}>"


class Holding(Base, TimestampMixin):
    """Balance of one currency in one account."""

    __tablename__ = "holdings"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    balance: Mapped[float] = mapped_column(
        Float,
        default=0.0,
        nullable=False,
    )

    account: Mapped[Account] = relationship(back_populates="holdings")
    currency: Mapped[Currency] = relationship(back_populates="holdings")

    __table_args__ = (
        UniqueConstraint("account_id", "currency_id", name="uq_holding_account_currency"),
    )

    def __repr__(self) -> str:
        return f"<Holding account={self.account_id} currency={self.currency_id} {self.balance}>"
