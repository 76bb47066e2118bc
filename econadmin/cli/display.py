"""Rich display helpers for CLI output."""

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from econadmin.exceptions import AmbiguousEntityError, ResolutionError
from econadmin.managers.admin_manager import (
    AdjustmentResult,
    BalanceReport,
    GlobalCurrencyStatus,
    ListingResult,
    PatternPreview,
    PurgeReport,
    WipeResult,
)
from econadmin.schemas import EntityKind


# Shared console instance
console = Console()

# Listing command to suggest when a lookup fails
LISTING_HINTS = {
    EntityKind.ACCOUNT: "econadmin account list",
    EntityKind.CURRENCY: "econadmin currency list",
}


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def _name(entity: Any) -> str:
    """Escaped display name, falling back to the ID for unnamed entities."""
    return escape(entity.name) if entity.name else f"#{entity.id}"


def _more_line(remaining: int) -> None:
    if remaining > 0:
        console.print(f"  ... and {remaining} more")


def display_name_list(title: str, listing: ListingResult, empty_message: str) -> None:
    """Display a capped listing of accounts or currencies.

    Args:
        title: Heading shown above the table.
        listing: The listing to show.
        empty_message: Shown when nothing matched.
    """
    if not listing.items:
        console.print(f"[dim]{empty_message}[/dim]")
        return

    console.print(f"[bold]{title} ({listing.total})[/bold]")
    table = Table(box=box.ROUNDED)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="white")

    for entity in listing.items:
        table.add_row(str(entity.id), _name(entity))

    console.print(table)
    _more_line(listing.remaining)


def display_resolution_error(error: ResolutionError) -> None:
    """Explain a failed account or currency lookup.

    Ambiguous lookups list the candidates so the admin can retry with an
    ID or a more specific name.
    """
    display_error(escape(str(error)))

    if isinstance(error, AmbiguousEntityError):
        table = Table(title="Did you mean", box=box.SIMPLE)
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Name", style="white")
        for candidate in error.result.candidates:
            table.add_row(str(candidate.id), _name(candidate))
        console.print(table)
        _more_line(error.result.hidden_matches)
        display_info(f"Use the {error.kind.value} ID or a more specific name.")
        return

    display_info(f"Use '{LISTING_HINTS[error.kind]}' to search.")


def display_adjustment(result: AdjustmentResult) -> None:
    """Display the outcome of an adjustment."""
    display_success(
        f"{result.action} {abs(result.amount):.2f} {_name(result.currency)}"
    )
    console.print(
        f"Account: {_name(result.account)} | "
        f"Before: {result.before:.2f} → After: {result.after:.2f}"
    )


def display_wipe(result: WipeResult) -> None:
    """Display the outcome of a wipe."""
    currency = _name(result.currency)
    if not result.wiped:
        display_info(f"Account has no {currency} to remove.")
        return
    display_success(
        f"Wiped {result.amount_removed:.2f} {currency} from '{_name(result.account)}'"
    )


def display_preview(preview: PatternPreview, global_currency: str | None = None) -> None:
    """Display currencies matched by a pattern."""
    pattern = escape(preview.pattern)
    if not preview.currencies:
        console.print(f"[dim]No currencies match pattern: '{pattern}'[/dim]")
        display_info("Tip: Use * wildcard - examples: *Credit, Test*, *Old*")
        return

    console.print(
        f"[bold]Pattern '{pattern}' ({preview.shape.value}) matches {preview.total} currencies[/bold]"
    )
    table = Table(box=box.ROUNDED)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="white")

    for currency in preview.currencies:
        table.add_row(str(currency.id), _name(currency))

    console.print(table)
    _more_line(preview.remaining)

    if preview.includes_global:
        display_warning(
            f"Global currency '{escape(global_currency or '')}' matches and will be skipped by purge."
        )


def display_purge_report(report: PurgeReport) -> None:
    """Display the outcome of a purge."""
    for currency in report.skipped:
        display_warning(f"Skipped global currency {_name(currency)}")

    for entry in report.purged:
        if entry.accounts_modified:
            console.print(
                f"  • {_name(entry.currency)}: {entry.amount_removed:.2f} removed "
                f"from {entry.accounts_modified} accounts"
            )

    if report.total_accounts_affected == 0:
        display_info("No balances found to remove.")
        return

    display_success(f"✓ Complete: {len(report.purged)} currencies purged")
    console.print(
        f"Total removed: {report.total_amount_removed:.2f} "
        f"from {report.total_accounts_affected} account operations"
    )


def display_balance(report: BalanceReport) -> None:
    """Display an account's positive holdings."""
    name = _name(report.account)
    if not report.holdings:
        console.print(f"[dim]Account '{name}' has no currency.[/dim]")
        return

    console.print(f"[bold]Account: {name} ({report.total} currencies)[/bold]")
    table = Table(box=box.ROUNDED)
    table.add_column("Balance", style="green", justify="right")
    table.add_column("Currency", style="white")

    for line in report.holdings:
        table.add_row(f"{line.balance:.2f}", escape(line.currency_name or ""))

    console.print(table)
    _more_line(report.remaining)


def display_global_status(status: GlobalCurrencyStatus) -> None:
    """Display global currency configuration and treasury state."""
    console.print("[bold]Global Currency Status[/bold]")
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Currency Name", escape(status.currency_name))
    table.add_row("Currency", "Found" if status.currency is not None else "Not created yet")

    if status.treasury is None:
        treasury = "Not created yet"
    elif status.treasury_balance is None:
        treasury = "Found | Balance: N/A"
    else:
        treasury = f"Found | Balance: {status.treasury_balance:.2f}"
    table.add_row("Treasury", f"{escape(status.treasury_name)} ({treasury})")

    table.add_row(
        "New Player Gift",
        f"{status.gift_amount:,}" if status.gift_enabled else "Disabled",
    )
    table.add_row("Treasury Start", f"{status.treasury_initial_balance:,}")

    console.print(table)


def display_gift(result: AdjustmentResult) -> None:
    """Display the outcome of a gift."""
    display_success(
        f"Gifted {result.amount:,.0f} {_name(result.currency)} to '{_name(result.account)}'"
    )
    console.print(f"Balance: {result.before:.2f} → {result.after:.2f}")


def display_mint(result: AdjustmentResult) -> None:
    """Display the outcome of minting into the treasury."""
    display_success(
        f"Minted {result.amount:,.0f} {_name(result.currency)} into '{_name(result.account)}'"
    )
    console.print(f"Treasury balance: {result.before:.2f} → {result.after:.2f}")
