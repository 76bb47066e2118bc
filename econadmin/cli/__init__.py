"""Command-line interface for EconAdmin."""
