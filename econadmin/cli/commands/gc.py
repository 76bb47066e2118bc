"""Global currency commands."""

from typing import Optional

import typer
from rich.markup import escape

from econadmin.cli.context import build_admin_manager
from econadmin.cli.display import (
    display_error,
    display_gift,
    display_global_status,
    display_mint,
    display_resolution_error,
)
from econadmin.database.connection import get_db_session
from econadmin.exceptions import EconAdminError, ResolutionError

app = typer.Typer(help="Manage the global currency and its treasury")


@app.command()
def status() -> None:
    """Show global currency config and treasury status."""
    with get_db_session() as db:
        try:
            report = build_admin_manager(db).global_status()
        except EconAdminError as e:
            display_error(escape(str(e)))
            raise typer.Exit(1)

        display_global_status(report)


@app.command()
def gift(
    account: str = typer.Argument(..., help="Account ID or name"),
    amount: Optional[int] = typer.Argument(
        None, help="Amount to give (default: configured new player gift)"
    ),
) -> None:
    """Gift global currency to an account."""
    try:
        with get_db_session() as db:
            result = build_admin_manager(db).gift(account, amount)
            display_gift(result)

    except ResolutionError as e:
        display_resolution_error(e)
        raise typer.Exit(1)
    except EconAdminError as e:
        display_error(escape(str(e)))
        raise typer.Exit(1)
    except Exception as e:
        display_error(f"Failed to gift currency: {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def mint(
    amount: int = typer.Argument(..., help="Amount to add to the treasury"),
) -> None:
    """Mint global currency directly into the treasury account."""
    try:
        with get_db_session() as db:
            result = build_admin_manager(db).mint(amount)
            display_mint(result)

    except EconAdminError as e:
        display_error(escape(str(e)))
        raise typer.Exit(1)
    except Exception as e:
        display_error(f"Failed to mint currency: {escape(str(e))}")
        raise typer.Exit(1)
