"""EconomyAdminManager for host balances and the global currency."""

import logging
from dataclasses import dataclass, field
from typing import Any

from econadmin.config import AdminLimits
from econadmin.exceptions import (
    AmbiguousEntityError,
    EntityNotFoundError,
    GlobalCurrencyError,
    InvalidAmountError,
)
from econadmin.host import EconomyHost
from econadmin.matching.pattern_matcher import WILDCARD, PatternMatcher, PatternShape, fold
from econadmin.resolver.entity_resolver import EntityResolver
from econadmin.schemas import EntityKind

logger = logging.getLogger(__name__)


@dataclass
class ListingResult:
    """A capped listing of entity names.

    Attributes:
        items: Entities shown, in host order.
        total: Number of entities that matched before capping.
    """

    items: list[Any]
    total: int

    @property
    def remaining(self) -> int:
        return self.total - len(self.items)


@dataclass
class AdjustmentResult:
    """Outcome of adding or removing currency from one account."""

    account: Any
    currency: Any
    amount: float
    before: float
    after: float

    @property
    def action(self) -> str:
        return "Added" if self.amount >= 0 else "Removed"


@dataclass
class WipeResult:
    """Outcome of removing all of one currency from one account."""

    account: Any
    currency: Any
    amount_removed: float

    @property
    def wiped(self) -> bool:
        return self.amount_removed > 0


@dataclass
class PatternPreview:
    """Currencies a pattern would select.

    Attributes:
        pattern: The pattern as typed.
        shape: How the pattern was interpreted.
        currencies: Currencies shown, in host order.
        total: Number of currencies matched before capping.
        global_matches: How many matches are the global currency.
    """

    pattern: str
    shape: PatternShape
    currencies: list[Any]
    total: int
    global_matches: int = 0

    @property
    def remaining(self) -> int:
        return self.total - len(self.currencies)

    @property
    def includes_global(self) -> bool:
        return self.global_matches > 0

    @property
    def purgeable(self) -> int:
        """Matches a purge would actually remove."""
        return self.total - self.global_matches


@dataclass
class CurrencyPurge:
    """Amount of one currency removed across all accounts."""

    currency: Any
    amount_removed: float = 0.0
    accounts_modified: int = 0


@dataclass
class PurgeReport:
    """Outcome of purging every currency matching a pattern."""

    pattern: str
    purged: list[CurrencyPurge] = field(default_factory=list)
    skipped: list[Any] = field(default_factory=list)

    @property
    def total_accounts_affected(self) -> int:
        return sum(p.accounts_modified for p in self.purged)

    @property
    def total_amount_removed(self) -> float:
        return sum(p.amount_removed for p in self.purged)


@dataclass
class HoldingLine:
    """One currency balance in an account."""

    currency_name: str | None
    balance: float


@dataclass
class BalanceReport:
    """Positive holdings of an account, largest first."""

    account: Any
    holdings: list[HoldingLine]
    total: int

    @property
    def remaining(self) -> int:
        return self.total - len(self.holdings)


@dataclass
class GlobalCurrencyStatus:
    """Global currency configuration and the state of its treasury.

    Attributes:
        currency_name: Configured global currency name.
        currency: The currency, or None if the host has no such currency.
        treasury_name: Treasury account name after defaulting.
        treasury: The treasury account, or None if it does not exist.
        treasury_balance: Treasury's global currency balance when both exist.
        gift_amount: Default gift amount; 0 means disabled.
        treasury_initial_balance: Balance a new treasury starts with.
    """

    currency_name: str
    currency: Any
    treasury_name: str
    treasury: Any
    treasury_balance: float | None
    gift_amount: int
    treasury_initial_balance: int

    @property
    def gift_enabled(self) -> bool:
        return self.gift_amount > 0


class EconomyAdminManager:
    """Admin operations over a host economy.

    Handles:
    - Account and currency listings with a search filter
    - Single-account adjustments and wipes
    - Pattern previews and bulk purges across all accounts
    - Account balance reports
    - Global currency status, gifts, and treasury minting

    Account and currency tokens go through EntityResolver, so admins can
    type an ID, an exact name, or an unambiguous part of a name.
    """

    def __init__(
        self,
        host: EconomyHost,
        global_currency: str | None = None,
        limits: AdminLimits | None = None,
        resolver: EntityResolver | None = None,
        treasury_account_name: str | None = None,
        new_player_gift_amount: int = 0,
        treasury_initial_balance: int = 1_000_000,
    ) -> None:
        """Initialize manager.

        Args:
            host: The host economy to read and mutate.
            global_currency: Name of the server currency that purges must skip.
            limits: Listing limits.
            resolver: Resolver for account and currency tokens.
            treasury_account_name: Treasury account; defaults to
                "<global currency> - Treasury".
            new_player_gift_amount: Amount gifted when no amount is given.
            treasury_initial_balance: Balance a new treasury starts with.
        """
        self.host = host
        self.global_currency = global_currency
        self.limits = limits or AdminLimits()
        self.resolver = resolver or EntityResolver()
        self.treasury_account_name = treasury_account_name
        self.new_player_gift_amount = new_player_gift_amount
        self.treasury_initial_balance = treasury_initial_balance

    # --- Lookups ---

    def resolve_account(self, token: str) -> Any:
        """Resolve an account token or raise a ResolutionError."""
        return self._resolve(token, self.host.list_accounts(), EntityKind.ACCOUNT)

    def resolve_currency(self, token: str) -> Any:
        """Resolve a currency token or raise a ResolutionError."""
        return self._resolve(token, self.host.list_currencies(), EntityKind.CURRENCY)

    def _resolve(self, token: str, candidates: list[Any], kind: EntityKind) -> Any:
        result = self.resolver.resolve(token, candidates)
        if result.resolved:
            return result.entity
        if result.is_ambiguous:
            raise AmbiguousEntityError(kind, result)
        raise EntityNotFoundError(kind, result)

    def is_global_currency(self, currency: Any) -> bool:
        """Check whether a currency is the configured global currency."""
        if not self.global_currency or not currency.name:
            return False
        return PatternMatcher.names_equal(currency.name, self.global_currency)

    def select_currencies(self, pattern: str) -> list[Any]:
        """Get currencies selected by a pattern.

        A pattern without '*' selects the first currency with that exact
        name. Any other pattern selects every wildcard match.
        """
        currencies = self.host.list_currencies()
        if WILDCARD not in pattern:
            currency = _first_named(currencies, pattern)
            return [currency] if currency is not None else []
        return PatternMatcher.match_all(pattern, currencies)

    @property
    def treasury_name(self) -> str | None:
        """Treasury account name, defaulting to '<global currency> - Treasury'."""
        if self.treasury_account_name and self.treasury_account_name.strip():
            return self.treasury_account_name
        if not self.global_currency:
            return None
        return f"{self.global_currency} - Treasury"

    def find_global_currency(self) -> Any | None:
        """Get the configured global currency, if the host has it."""
        if not self.global_currency:
            return None
        return _first_named(self.host.list_currencies(), self.global_currency)

    def find_treasury(self) -> Any | None:
        """Get the treasury account, if it exists."""
        name = self.treasury_name
        if name is None:
            return None
        return _first_named(self.host.list_accounts(), name)

    def _require_global_currency(self) -> Any:
        if not self.global_currency:
            raise GlobalCurrencyError("Global currency is not configured.")
        currency = self.find_global_currency()
        if currency is None:
            raise GlobalCurrencyError(f"Global currency '{self.global_currency}' not found.")
        return currency

    # --- Listings ---

    def list_accounts(self, search: str = "") -> ListingResult:
        """List accounts whose name contains the search text."""
        return self._list(self.host.list_accounts(), search, self.limits.account_list_limit)

    def list_currencies(self, search: str = "") -> ListingResult:
        """List currencies whose name contains the search text."""
        return self._list(self.host.list_currencies(), search, self.limits.currency_list_limit)

    def _list(self, entities: list[Any], search: str, limit: int) -> ListingResult:
        needle = fold(search or "")
        matched = [
            e for e in entities if e is not None and e.name and needle in fold(e.name)
        ]
        return ListingResult(items=matched[:limit], total=len(matched))

    # --- Single-account changes ---

    def adjust(self, account_token: str, currency_token: str, amount: float) -> AdjustmentResult:
        """Add or remove currency from one account.

        Args:
            account_token: Account ID or name.
            currency_token: Currency ID or name.
            amount: Amount to add; negative removes.

        Returns:
            AdjustmentResult with balances before and after.

        Raises:
            ResolutionError: If either token does not resolve to one entity.
        """
        currency = self.resolve_currency(currency_token)
        account = self.resolve_account(account_token)
        return self._apply(account, currency, amount)

    def _apply(self, account: Any, currency: Any, amount: float) -> AdjustmentResult:
        before = self.host.get_balance(account, currency)
        self.host.add_currency(account, currency, amount)
        after = self.host.get_balance(account, currency)

        logger.info(
            "Adjusted %s by %+.2f %s (%.2f -> %.2f)",
            account.name,
            amount,
            currency.name,
            before,
            after,
        )
        return AdjustmentResult(
            account=account,
            currency=currency,
            amount=amount,
            before=before,
            after=after,
        )

    def wipe(self, account_token: str, currency_token: str) -> WipeResult:
        """Remove all of one currency from one account.

        Raises:
            ResolutionError: If either token does not resolve to one entity.
        """
        currency = self.resolve_currency(currency_token)
        account = self.resolve_account(account_token)

        balance = self.host.get_balance(account, currency)
        if balance <= 0:
            return WipeResult(account=account, currency=currency, amount_removed=0.0)

        self.host.add_currency(account, currency, -balance)
        logger.info("Wiped %.2f %s from %s", balance, currency.name, account.name)
        return WipeResult(account=account, currency=currency, amount_removed=balance)

    # --- Bulk changes ---

    def preview(self, pattern: str) -> PatternPreview:
        """Show which currencies a purge with this pattern would touch."""
        currencies = self.select_currencies(pattern)
        return PatternPreview(
            pattern=pattern,
            shape=PatternMatcher.classify(pattern),
            currencies=currencies[: self.limits.preview_limit],
            total=len(currencies),
            global_matches=sum(1 for c in currencies if self.is_global_currency(c)),
        )

    def purge(self, pattern: str) -> PurgeReport:
        """Remove every positive balance of matching currencies from all accounts.

        The global currency is never purged; it is reported as skipped.
        """
        report = PurgeReport(pattern=pattern)
        currencies = self.select_currencies(pattern)
        if not currencies:
            return report

        accounts = [a for a in self.host.list_accounts() if a is not None]
        logger.info("Purging %d currencies matching %r", len(currencies), pattern)

        for currency in currencies:
            if self.is_global_currency(currency):
                logger.warning("Skipping global currency %s in purge", currency.name)
                report.skipped.append(currency)
                continue

            entry = CurrencyPurge(currency=currency)
            for account in accounts:
                balance = self.host.get_balance(account, currency)
                if balance > 0:
                    self.host.add_currency(account, currency, -balance)
                    entry.accounts_modified += 1
                    entry.amount_removed += balance

            if entry.accounts_modified:
                logger.info(
                    "Purged %.2f %s from %d accounts",
                    entry.amount_removed,
                    currency.name,
                    entry.accounts_modified,
                )
            report.purged.append(entry)

        return report

    # --- Reports ---

    def balance(self, account_token: str) -> BalanceReport:
        """Get positive holdings of an account, largest first.

        Raises:
            ResolutionError: If the token does not resolve to one account.
        """
        account = self.resolve_account(account_token)
        lines = [
            HoldingLine(currency_name=h.currency.name, balance=h.balance)
            for h in self.host.get_holdings(account)
            if h is not None and h.currency is not None and h.balance > 0
        ]
        lines.sort(key=lambda line: line.balance, reverse=True)
        return BalanceReport(
            account=account,
            holdings=lines[: self.limits.balance_limit],
            total=len(lines),
        )

    # --- Global currency ---

    def global_status(self) -> GlobalCurrencyStatus:
        """Get global currency configuration and treasury state.

        Raises:
            GlobalCurrencyError: If no global currency is configured.
        """
        if not self.global_currency:
            raise GlobalCurrencyError(
                "No global currency configured. Set ECONADMIN_GLOBAL_CURRENCY."
            )

        currency = self.find_global_currency()
        treasury = self.find_treasury()
        treasury_balance = None
        if currency is not None and treasury is not None:
            treasury_balance = self.host.get_balance(treasury, currency)

        return GlobalCurrencyStatus(
            currency_name=self.global_currency,
            currency=currency,
            treasury_name=self.treasury_name,
            treasury=treasury,
            treasury_balance=treasury_balance,
            gift_amount=self.new_player_gift_amount,
            treasury_initial_balance=self.treasury_initial_balance,
        )

    def gift(self, account_token: str, amount: int | None = None) -> AdjustmentResult:
        """Give global currency to one account.

        Args:
            account_token: Account ID or name.
            amount: Amount to give. Missing or non-positive amounts fall back
                to the configured new player gift amount.

        Raises:
            GlobalCurrencyError: If the global currency is missing.
            ResolutionError: If the token does not resolve to one account.
            InvalidAmountError: If no positive amount is available.
        """
        currency = self._require_global_currency()
        account = self.resolve_account(account_token)

        gift_amount = amount if amount is not None and amount > 0 else self.new_player_gift_amount
        if gift_amount <= 0:
            raise InvalidAmountError("No amount given and no default gift is configured.")

        logger.info("Gifting %d %s to %s", gift_amount, currency.name, account.name)
        return self._apply(account, currency, gift_amount)

    def mint(self, amount: int) -> AdjustmentResult:
        """Add global currency to the treasury account.

        Raises:
            InvalidAmountError: If amount is not positive.
            GlobalCurrencyError: If the global currency or the treasury is missing.
        """
        if amount <= 0:
            raise InvalidAmountError("Mint amount must be greater than 0.")

        currency = self._require_global_currency()
        treasury = self.find_treasury()
        if treasury is None:
            raise GlobalCurrencyError(f"Treasury '{self.treasury_name}' not found.")

        logger.info("Minting %d %s into %s", amount, currency.name, treasury.name)
        return self._apply(treasury, currency, amount)


def _first_named(entities: list[Any], name: str) -> Any | None:
    """First entity whose name equals name, ignoring case."""
    for entity in entities:
        if entity is not None and entity.name and PatternMatcher.names_equal(entity.name, name):
            return entity
    return None
