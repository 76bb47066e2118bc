"""Main CLI application for EconAdmin."""

import typer

from econadmin.cli.commands import account, currency, db, gc
from econadmin.cli.context import configure_logging
from econadmin.config import get_settings

# Create main app
app = typer.Typer(
    name="econadmin",
    help="Admin toolkit for managing currencies and bank accounts",
    add_completion=True,
)

# Add sub-commands
app.add_typer(account.app, name="account")
app.add_typer(currency.app, name="currency")
app.add_typer(gc.app, name="gc")
app.add_typer(db.app, name="db")


@app.callback()
def main() -> None:
    """EconAdmin - list, adjust, and purge balances on the host ledger.

    Accounts and currencies can be named by ID, exact name, or a unique
    part of the name. Use 'econadmin currency preview' before a purge.
    """
    configure_logging(get_settings().effective_log_level)


if __name__ == "__main__":
    app()
