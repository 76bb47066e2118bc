"""Currency commands, including wildcard preview and purge."""

import typer
from rich.markup import escape

from econadmin.cli.context import build_admin_manager
from econadmin.cli.display import (
    display_error,
    display_info,
    display_name_list,
    display_preview,
    display_purge_report,
    display_warning,
)
from econadmin.database.connection import get_db_session

app = typer.Typer(help="Inspect and purge currencies")


@app.command("list")
def list_currencies(
    search: str = typer.Argument("", help="Only show currencies whose name contains this"),
) -> None:
    """List all currencies in the system."""
    with get_db_session() as db:
        listing = build_admin_manager(db).list_currencies(search)
        display_name_list("Currencies", listing, "No currencies found.")


@app.command()
def preview(
    pattern: str = typer.Argument(..., help="Name or wildcard pattern, e.g. *Credit"),
) -> None:
    """Preview currencies that match a pattern.

    Supports wildcards: *Credit, Player*, Old*Coin, *Test*
    """
    with get_db_session() as db:
        admin = build_admin_manager(db)
        display_preview(admin.preview(pattern), admin.global_currency)


@app.command()
def purge(
    pattern: str = typer.Argument(..., help="Name or wildcard pattern, e.g. *Credit"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """DANGER: Remove matching currencies from ALL accounts.

    Preview with 'econadmin currency preview' first!
    """
    try:
        with get_db_session() as db:
            admin = build_admin_manager(db)
            matched = admin.preview(pattern)

            if not matched.total:
                display_preview(matched, admin.global_currency)
                return

            if not matched.purgeable:
                display_preview(matched, admin.global_currency)
                display_info("Nothing to purge: only the global currency matches.")
                return

            if not force:
                display_preview(matched, admin.global_currency)
                confirm = typer.confirm(
                    f"Remove {matched.purgeable} currencies from every account?"
                )
                if not confirm:
                    display_info("Cancelled")
                    return

            display_warning(
                f"⚠ PURGING {matched.purgeable} currencies matching '{escape(pattern)}'..."
            )
            report = admin.purge(pattern)
            display_purge_report(report)

    except Exception as e:
        display_error(f"Failed to purge currencies: {escape(str(e))}")
        raise typer.Exit(1)
