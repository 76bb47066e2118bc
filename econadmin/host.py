"""Interface the admin tools need from the host economy."""

from typing import Any, Protocol, Sequence


class EconomyHost(Protocol):
    """Query and mutate operations exposed by the host server.

    Listings are fresh snapshots in the host's own order. The admin tools
    never cache them across calls.
    """

    def list_accounts(self) -> Sequence[Any]:
        """All bank accounts, each exposing ``id`` and ``name``."""
        ...

    def list_currencies(self) -> Sequence[Any]:
        """All currencies, each exposing ``id`` and ``name``."""
        ...

    def get_balance(self, account: Any, currency: Any) -> float:
        """Current balance of a currency in an account (0.0 if none)."""
        ...

    def add_currency(self, account: Any, currency: Any, amount: float) -> float:
        """Add (or with a negative amount, remove) currency and return the new balance."""
        ...

    def get_holdings(self, account: Any) -> Sequence[Any]:
        """Holdings of an account, each exposing ``currency`` and ``balance``."""
        ...
