"""Ledger database commands."""

import typer
from rich.markup import escape

from econadmin.cli.display import display_error, display_success
from econadmin.config import get_settings
from econadmin.database.connection import init_db

app = typer.Typer(help="Manage the ledger database")


@app.command()
def init() -> None:
    """Create ledger tables if they do not exist."""
    try:
        init_db()
    except Exception as e:
        display_error(f"Failed to initialize database: {escape(str(e))}")
        raise typer.Exit(1)

    display_success(f"Ledger ready at {escape(get_settings().database_url)}")
