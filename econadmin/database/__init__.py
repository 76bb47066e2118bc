"""Ledger database package."""
