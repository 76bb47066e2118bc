"""EconAdmin - admin tools for a game server economy.

Resolves typed account and currency names (IDs, exact names, partial
names, '*' wildcards) and runs listing, adjustment, and purge commands
against the host ledger.
"""

__version__ = "0.1.0"
