"""Bank account commands."""

import typer
from rich.markup import escape

from econadmin.cli.context import build_admin_manager
from econadmin.cli.display import (
    display_adjustment,
    display_balance,
    display_error,
    display_name_list,
    display_resolution_error,
    display_wipe,
)
from econadmin.database.connection import get_db_session
from econadmin.exceptions import ResolutionError

app = typer.Typer(help="Inspect and adjust bank accounts")


@app.command("list")
def list_accounts(
    search: str = typer.Argument("", help="Only show accounts whose name contains this"),
) -> None:
    """List bank accounts (optional: search filter)."""
    with get_db_session() as db:
        listing = build_admin_manager(db).list_accounts(search)
        display_name_list("Accounts", listing, "No matching accounts found.")


@app.command()
def balance(
    account: str = typer.Argument(..., help="Account ID or name"),
) -> None:
    """Show detailed balance info for an account."""
    with get_db_session() as db:
        try:
            report = build_admin_manager(db).balance(account)
        except ResolutionError as e:
            display_resolution_error(e)
            raise typer.Exit(1)

        display_balance(report)


@app.command(context_settings={"ignore_unknown_options": True})
def adjust(
    account: str = typer.Argument(..., help="Account ID or name"),
    currency: str = typer.Argument(..., help="Currency ID or name"),
    amount: float = typer.Argument(..., help="Amount to add; negative removes"),
) -> None:
    """Add/remove currency amount to/from an account.

    Example: econadmin account adjust PlayerName CurrencyName -500
    """
    try:
        with get_db_session() as db:
            result = build_admin_manager(db).adjust(account, currency, amount)
            display_adjustment(result)

    except ResolutionError as e:
        display_resolution_error(e)
        raise typer.Exit(1)
    except Exception as e:
        display_error(f"Failed to adjust account: {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def wipe(
    account: str = typer.Argument(..., help="Account ID or name"),
    currency: str = typer.Argument(..., help="Currency ID or name"),
) -> None:
    """Remove ALL of a specific currency from one account."""
    try:
        with get_db_session() as db:
            result = build_admin_manager(db).wipe(account, currency)
            display_wipe(result)

    except ResolutionError as e:
        display_resolution_error(e)
        raise typer.Exit(1)
    except Exception as e:
        display_error(f"Failed to wipe account: {escape(str(e))}")
        raise typer.Exit(1)
