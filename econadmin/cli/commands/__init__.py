"""Command groups for the econadmin CLI."""
